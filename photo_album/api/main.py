"""FastAPI application entry point."""

from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from photo_album.api.dependencies import get_index_path
from photo_album.api.logging import setup_logging, get_logger
from photo_album.api.routers import photos
from photo_album.config import get_global_config

logger = get_logger(__name__)

config = get_global_config()

app = FastAPI(
    title="Photo Album API",
    description="API for browsing a photo directory and generating PDF albums",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(photos.router)
app.include_router(photos.files_router)


@app.on_event("startup")
def startup():
    """Configure logging on startup."""
    log_dir = setup_logging(
        base_dir=config.get('logging.base_dir', 'logs'),
        level=config.get('logging.level', 'INFO'),
        console=config.get_bool('logging.log_to_console', True),
    )
    logger.info("Starting Photo Album API")
    logger.info(f"Logs directory: {log_dir}")
    logger.info(f"Photo directory: {config.get_path('photos.directory')}")


@app.on_event("shutdown")
def shutdown():
    """Log shutdown."""
    logger.info("Shutting down Photo Album API")


@app.get("/", include_in_schema=False)
def index(index_path: Path = Depends(get_index_path)):
    """Serve the single-page frontend."""
    if not index_path.is_file():
        raise HTTPException(status_code=404, detail="index.html not found")
    return FileResponse(index_path, media_type="text/html")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def run():
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn
    uvicorn.run(
        app,
        host=config.get('server.host', '0.0.0.0'),
        port=config.get_int('server.port', 8000)
    )


if __name__ == "__main__":
    run()
