"""Create/update flow: validate the raw body, then mutate the store. Invalid input never reaches the store."""
from typing import Any

from app.models.video import Video
from app.schemas.video import VideoCreate, VideoUpdate
from app.services.errors import VideoValidationError
from app.services.video_store import VideoStore
from app.services.video_validation import ValidationMode, validate_video_input


def create_video(store: VideoStore, data: Any) -> Video:
    result = validate_video_input(data, ValidationMode.CREATE)
    if not result.ok:
        raise VideoValidationError(result.errors)
    return store.create(VideoCreate.model_validate(data))


def update_video(store: VideoStore, video_id: str, data: Any) -> Video:
    # Unknown id wins over a bad body
    store.get(video_id)
    if data is None:
        # No body on PUT means nothing to change
        data = {}
    result = validate_video_input(data, ValidationMode.UPDATE)
    if not result.ok:
        raise VideoValidationError(result.errors)
    return store.update(video_id, VideoUpdate.model_validate(data))
