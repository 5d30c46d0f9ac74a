"""
Base renderer interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from photo_album.album.domain.models import AlbumPlan


class BaseRenderer(ABC):
    """
    Abstract base class for album renderers.

    Config-only constructor - reads from config['album']['page'] and
    config['album']['document'].
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize renderer with configuration.

        Args:
            config: Full configuration dictionary
        """
        self._config = config
        album = config.get('album', {})
        page = album.get('page', {})
        document = album.get('document', {})

        self._page_size_name = str(page.get('size', 'A4')).upper()
        self._orientation = str(page.get('orientation', 'landscape')).lower()
        self._margin = float(page.get('margin', 10))
        self._padding = float(page.get('padding', 2))
        self._dpi = int(page.get('dpi', 200))
        self._title = document.get('title', 'Photo Album')
        self._creator = document.get('creator', 'photo-album')

    @abstractmethod
    def render(self, plan: AlbumPlan) -> bytes:
        """
        Render an album plan into a document.

        Args:
            plan: Page groups to render, one page each

        Returns:
            Complete document as bytes

        Raises:
            EmptyPlanError: If the plan has no pages
        """
        pass
