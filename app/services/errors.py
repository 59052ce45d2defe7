class VideoNotFoundError(Exception):
    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class VideoValidationError(Exception):
    """One or more field rule violations. errors keeps the order they were found in."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)
