"""Logging configuration for the API."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Union


def setup_logging(
    base_dir: str = "logs",
    level: Union[int, str] = logging.INFO,
    console: bool = True
) -> Path:
    """
    Configure logging with timestamped folder.

    Creates: logs/2024-01-30_10-30-00/api.log

    Args:
        base_dir: Base directory for logs (default: "logs")
        level: Logging level, numeric or name (default: INFO)
        console: Whether to also log to console (default: True)

    Returns:
        Path to the log directory for this run
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_dir = Path(base_dir) / timestamp
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "api.log"

    handlers = [logging.FileHandler(log_file, encoding='utf-8')]
    if console:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True  # Override any existing config
    )

    # Quiet noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)

    return log_dir


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger by name.

    Usage:
        from photo_album.api.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
