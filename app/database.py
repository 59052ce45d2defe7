from fastapi import Request
from app.config import get_settings
from app.services.video_store import VideoStore


def create_video_store() -> VideoStore:
    settings = get_settings()
    return VideoStore(
        id_length=settings.video_id_length,
        id_max_attempts=settings.video_id_max_attempts,
    )


def get_video_store(request: Request) -> VideoStore:
    # Built in the app lifespan; one store per app instance
    return request.app.state.video_store
