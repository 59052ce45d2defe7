from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "Video Store API"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"

    # Video ids: random lowercase alphanumeric, re-drawn on collision
    video_id_length: int = 9
    video_id_max_attempts: int = 5

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
