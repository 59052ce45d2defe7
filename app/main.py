import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import get_settings
from app.database import create_video_store
from app.routers import testing, videos
from app.services.errors import VideoNotFoundError, VideoValidationError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.video_store = create_video_store()
    logger.info("Server started on http://%s:%s", settings.host, settings.port)
    try:
        yield
    finally:
        app.state.video_store.clear()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(VideoNotFoundError)
    async def video_not_found_handler(_request: Request, _exc: VideoNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Video not found"})

    @app.exception_handler(VideoValidationError)
    async def video_validation_handler(_request: Request, exc: VideoValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})

    app.include_router(videos.router)
    app.include_router(testing.router)

    @app.get("/")
    def root():
        return {"message": settings.app_name, "docs": "/docs"}

    return app


app = create_app()


def run() -> None:
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
