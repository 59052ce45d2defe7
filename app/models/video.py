"""In-memory video record. Lives only as long as the VideoStore that owns it."""
from dataclasses import dataclass, field


@dataclass
class Video:
    id: str
    title: str
    date: str  # canonical ISO string, e.g. 2023-01-01T00:00:00.000Z
    available_resolutions: list[str] = field(default_factory=list)
    description: str | None = None
