import enum
from pydantic import BaseModel, ConfigDict, Field


class Resolution(str, enum.Enum):
    P144 = "P144"
    P240 = "P240"
    P360 = "P360"
    P480 = "P480"
    P720 = "P720"
    P1080 = "P1080"
    P1440 = "P1440"
    P2160 = "P2160"


RESOLUTION_VALUES = frozenset(r.value for r in Resolution)


class VideoCreate(BaseModel):
    title: str
    description: str | None = None
    date: str
    available_resolutions: list[Resolution] = Field(alias="availableResolutions")


class VideoUpdate(BaseModel):
    """Partial update. Only keys the client sent are applied (see model_dump(exclude_unset=True))."""
    title: str | None = None
    description: str | None = None
    date: str | None = None
    available_resolutions: list[Resolution] | None = Field(default=None, alias="availableResolutions")


class VideoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str | None = None
    date: str
    available_resolutions: list[str] = Field(alias="availableResolutions")
