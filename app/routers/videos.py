"""
Video records CRUD. Bodies are taken as raw JSON so that wrong field types come back
as validation messages ({"errors": [...]}, 400) instead of FastAPI's 422.
"""
from typing import Any
from fastapi import APIRouter, Body, Depends, Response, status
from app.database import get_video_store
from app.models.video import Video
from app.schemas.video import VideoResponse
from app.services.video_store import VideoStore
from app.services.videos import create_video, update_video

router = APIRouter(prefix="/videos", tags=["videos"])


def _to_response(video: Video) -> VideoResponse:
    return VideoResponse(
        id=video.id,
        title=video.title,
        description=video.description,
        date=video.date,
        availableResolutions=video.available_resolutions,
    )


@router.get("", response_model=list[VideoResponse], response_model_exclude_none=True)
def list_videos(store: VideoStore = Depends(get_video_store)):
    return [_to_response(v) for v in store.list()]


@router.get("/{video_id}", response_model=VideoResponse, response_model_exclude_none=True)
def get_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    return _to_response(store.get(video_id))


@router.post(
    "",
    response_model=VideoResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def post_video(body: Any = Body(None), store: VideoStore = Depends(get_video_store)):
    return _to_response(create_video(store, body))


@router.put("/{video_id}", response_model=VideoResponse, response_model_exclude_none=True)
def put_video(video_id: str, body: Any = Body(None), store: VideoStore = Depends(get_video_store)):
    """Only fields present in the body are changed; the rest keep their values."""
    return _to_response(update_video(store, video_id, body))


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    store.delete(video_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
