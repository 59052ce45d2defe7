"""Test support: wipe all data between test runs."""
from fastapi import APIRouter, Depends, Response, status
from app.database import get_video_store
from app.services.video_store import VideoStore

router = APIRouter(prefix="/testing", tags=["testing"])


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_data(store: VideoStore = Depends(get_video_store)):
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
