"""
PDF album renderer.
"""

import io
import logging
from typing import Any, Dict, List, Tuple

from reportlab.lib import pagesizes
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from photo_album.album.domain.models import AlbumPlan, PageGroup, PhotoRecord
from photo_album.album.errors import EmptyPlanError
from photo_album.album.export.base import BaseRenderer
from photo_album.album.images import encode_for_page, load_image_or_placeholder

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    'A3': pagesizes.A3,
    'A4': pagesizes.A4,
    'A5': pagesizes.A5,
    'LETTER': pagesizes.letter,
}

# (x, y, width, height) in PDF points, origin bottom-left
Box = Tuple[float, float, float, float]


def fit_box(image_width: float, image_height: float, cell: Box) -> Box:
    """
    Scale an image to fit a cell, preserving aspect ratio, centered.

    Args:
        image_width: Source width in pixels
        image_height: Source height in pixels
        cell: Target cell

    Returns:
        Placement of the scaled image inside the cell
    """
    x, y, width, height = cell
    scale = min(width / image_width, height / image_height)
    draw_w = image_width * scale
    draw_h = image_height * scale
    return (x + (width - draw_w) / 2, y + (height - draw_h) / 2, draw_w, draw_h)


class AlbumRenderer(BaseRenderer):
    """
    Renders an album plan as a PDF, one page per page group.

    Pages with 1, 2 or 3 photos split the content area into that many
    equal-width side-by-side cells; each photo is fit-scaled into its cell.
    """

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)

        if self._page_size_name not in PAGE_SIZES:
            raise ValueError(
                f"Unknown page size '{self._page_size_name}'. "
                f"Available: {sorted(PAGE_SIZES)}"
            )
        size = PAGE_SIZES[self._page_size_name]
        if self._orientation == 'landscape':
            size = pagesizes.landscape(size)
        elif self._orientation == 'portrait':
            size = pagesizes.portrait(size)
        else:
            raise ValueError(f"Unknown page orientation '{self._orientation}'")
        self._page_size = size

    @property
    def page_size(self) -> Tuple[float, float]:
        return self._page_size

    def render(self, plan: AlbumPlan) -> bytes:
        if plan.page_count == 0:
            raise EmptyPlanError()

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=self._page_size)
        pdf.setTitle(self._title)
        pdf.setCreator(self._creator)

        for page_number, group in enumerate(plan.groups, start=1):
            if page_number > 1:
                pdf.showPage()
            logger.debug(f"Rendering page {page_number} ({group.kind.name.lower()})")
            self._draw_page(pdf, group)

        pdf.save()
        data = buffer.getvalue()

        logger.info(
            f"Rendered album: {plan.page_count} pages, "
            f"{plan.photo_count} photos, {len(data)} bytes"
        )
        return data

    def cell_boxes(self, count: int) -> List[Box]:
        """
        Split the page content area into `count` equal-width columns.

        Cells are returned left to right, already shrunk by the padding.
        """
        page_w, page_h = self._page_size
        area_w = page_w - 2 * self._margin
        area_h = page_h - 2 * self._margin
        cell_w = area_w / count

        boxes = []
        for i in range(count):
            x = self._margin + i * cell_w
            boxes.append((
                x + self._padding,
                self._margin + self._padding,
                cell_w - 2 * self._padding,
                area_h - 2 * self._padding,
            ))
        return boxes

    def _draw_page(self, pdf: canvas.Canvas, group: PageGroup):
        for photo, cell in zip(group.photos, self.cell_boxes(group.size)):
            self._draw_photo(pdf, photo, cell)

    def _draw_photo(self, pdf: canvas.Canvas, photo: PhotoRecord, cell: Box):
        img = load_image_or_placeholder(photo.path)
        try:
            x, y, w, h = fit_box(img.width, img.height, cell)
            encoded = encode_for_page(img, w, h, dpi=self._dpi)
            pdf.drawImage(ImageReader(encoded), x, y, w, h, mask='auto')
        finally:
            img.close()
