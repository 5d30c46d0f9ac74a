"""Album generation service - main business logic.

Pure business logic - no HTTP dependencies.
Can be called from FastAPI, a script, or tests.
"""

import logging
import time
from datetime import datetime
from typing import Callable, Optional, Sequence

from photo_album.album.errors import NoMatchError, NoSelectionError
from photo_album.album.export.base import BaseRenderer
from photo_album.album.planner import PageLayoutPlanner
from photo_album.album.services.photo_source import PhotoSource, sort_by_modified

logger = logging.getLogger(__name__)


def album_filename(prefix: str, now: Optional[datetime] = None) -> str:
    """Download name for an album, e.g. Album_Mai_20240130_103000.pdf."""
    now = now or datetime.now()
    return f"Album_{prefix}_{now:%Y%m%d_%H%M%S}.pdf"


class AlbumService:
    """
    Builds album documents from selected photos.

    Holds no per-request state: every call plans with a fresh planner, and
    so with its own random source.
    """

    def __init__(
        self,
        photo_source: PhotoSource,
        renderer: BaseRenderer,
        planner_factory: Callable[[], PageLayoutPlanner] = PageLayoutPlanner
    ):
        self._photo_source = photo_source
        self._renderer = renderer
        self._planner_factory = planner_factory

    def generate_album(self, selected_paths: Sequence[str]) -> bytes:
        """
        Generate an album from the selected photos.

        Args:
            selected_paths: Photo URLs or paths; only the file names are used

        Returns:
            Rendered document bytes

        Raises:
            NoSelectionError: If no paths were given
            NoMatchError: If none of the paths match an existing photo
        """
        if not selected_paths:
            raise NoSelectionError()

        start_time = time.time()
        photos = self._photo_source.get_by_paths(selected_paths)
        if not photos:
            logger.warning(f"None of {len(selected_paths)} selected paths resolved")
            raise NoMatchError()

        photos = sort_by_modified(photos)
        logger.info(f"Generating album from {len(photos)}/{len(selected_paths)} selected photos")

        plan = self._planner_factory().plan(photos)
        logger.info(f"Album plan: {plan.page_count} pages, sizes {plan.sizes}")

        data = self._renderer.render(plan)
        logger.info(f"Album generated in {time.time() - start_time:.2f}s")
        return data
