"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from kakaolink.api.router import router as links_router
from kakaolink.config import get_settings
from kakaolink.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="KakaoLink Extractor",
    lifespan=lifespan,
)
app.include_router(links_router)


@app.get("/health")
async def health():
    """Health check endpoint for deployments and local development."""
    return {
        "status": "ok",
        "service": "kakaolink",
        "version": "0.1.0",
    }
