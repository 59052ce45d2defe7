"""
Process-local video store. Sole owner and mutator of video records.

One lock guards the mapping: id generation + insert, and lookup + in-place update,
each run inside a single critical section. Callers get copies, never the stored objects.
"""
import logging
import random
import string
import threading
from dataclasses import replace
from typing import Callable

from app.models.video import Video
from app.schemas.video import VideoCreate, VideoUpdate
from app.services.errors import VideoNotFoundError
from app.services.video_validation import normalize_date

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_ID_LENGTH = 9
DEFAULT_ID_MAX_ATTEMPTS = 5


def random_video_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Opaque id, not cryptographically strong. Uniqueness is checked by the store."""
    return "".join(random.choices(ID_ALPHABET, k=length))


def _copy(video: Video) -> Video:
    return replace(video, available_resolutions=list(video.available_resolutions))


class VideoStore:
    def __init__(
        self,
        id_length: int = DEFAULT_ID_LENGTH,
        id_max_attempts: int = DEFAULT_ID_MAX_ATTEMPTS,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._videos: dict[str, Video] = {}
        self._id_max_attempts = max(1, id_max_attempts)
        self._id_factory = id_factory or (lambda: random_video_id(id_length))

    def __len__(self) -> int:
        with self._lock:
            return len(self._videos)

    def _new_id(self) -> str:
        """Caller must hold the lock."""
        for _ in range(self._id_max_attempts):
            candidate = self._id_factory()
            if candidate not in self._videos:
                return candidate
            logger.warning("Video id collision on %s, drawing again", candidate)
        raise RuntimeError(f"Could not generate a unique video id after {self._id_max_attempts} attempts")

    def list(self) -> list[Video]:
        with self._lock:
            return [_copy(v) for v in self._videos.values()]

    def get(self, video_id: str) -> Video:
        with self._lock:
            video = self._videos.get(video_id)
            if video is None:
                raise VideoNotFoundError(video_id)
            return _copy(video)

    def create(self, fields: VideoCreate) -> Video:
        """fields must already have passed create-mode validation."""
        date = normalize_date(fields.date)
        resolutions = [r.value for r in fields.available_resolutions]
        with self._lock:
            video = Video(
                id=self._new_id(),
                title=fields.title,
                description=fields.description,
                date=date,
                available_resolutions=resolutions,
            )
            self._videos[video.id] = video
            logger.info("Video created: %s", video.id)
            return _copy(video)

    def update(self, video_id: str, fields: VideoUpdate) -> Video:
        """Apply only the keys the client sent. fields must have passed update-mode validation."""
        changes = fields.model_dump(exclude_unset=True)
        if "date" in changes:
            changes["date"] = normalize_date(changes["date"])
        if "available_resolutions" in changes:
            changes["available_resolutions"] = [r.value for r in fields.available_resolutions]
        with self._lock:
            video = self._videos.get(video_id)
            if video is None:
                raise VideoNotFoundError(video_id)
            for name, value in changes.items():
                setattr(video, name, value)
            return _copy(video)

    def delete(self, video_id: str) -> None:
        with self._lock:
            if self._videos.pop(video_id, None) is None:
                raise VideoNotFoundError(video_id)
        logger.info("Video deleted: %s", video_id)

    def clear(self) -> int:
        """Remove every video. Always succeeds; returns how many were removed."""
        with self._lock:
            removed = len(self._videos)
            self._videos.clear()
        logger.info("Video store cleared (%d removed)", removed)
        return removed
