"""
Page layout planning for albums.

Splits an ordered photo sequence into pages of 1-3 photos. While three or
more photos remain, a roll of a ten-sided die picks a full three-photo page
(1-7) or a two-photo page (8-10), which keeps consecutive pages varied.
"""

import logging
import random
from typing import List, Optional, Protocol, Sequence

from photo_album.album.domain.models import AlbumPlan, PageGroup, PhotoRecord

logger = logging.getLogger(__name__)

ROLL_SIDES = 10
TRIPLE_ROLL_MAX = 7
MAX_PHOTOS_PER_PAGE = 3


class RandomSource(Protocol):
    """Anything with random.Random's randint signature."""

    def randint(self, a: int, b: int) -> int:
        ...


class PageLayoutPlanner:
    """
    Greedy left-to-right page planner.

    Each planner owns its random source. Build one per album so concurrent
    requests never share a random stream.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        """
        Args:
            rng: Random source; defaults to a new random.Random seeded from
                OS entropy
        """
        self._rng = rng if rng is not None else random.Random()

    def plan(self, photos: Sequence[PhotoRecord]) -> AlbumPlan:
        """
        Partition photos into page groups, preserving their order.

        Args:
            photos: Photos in album order

        Returns:
            AlbumPlan whose groups concatenate back to `photos`
        """
        groups: List[PageGroup] = []
        index = 0
        total = len(photos)

        while index < total:
            size = self.choose_page_size(total - index)
            groups.append(PageGroup(tuple(photos[index:index + size])))
            logger.debug(f"Page {len(groups)}: {size} photos (index {index})")
            index += size

        return AlbumPlan(tuple(groups))

    def choose_page_size(self, remaining: int) -> int:
        """
        Decide how many of the remaining photos go on the next page.

        Args:
            remaining: Photos not yet placed on a page

        Returns:
            Page size in 1..3, never more than `remaining`
        """
        if remaining < 1:
            raise ValueError(f"remaining must be >= 1, got {remaining}")
        if remaining == 1:
            return 1
        if remaining == 2:
            return 2

        roll = self._rng.randint(1, ROLL_SIDES)
        size = MAX_PHOTOS_PER_PAGE if roll <= TRIPLE_ROLL_MAX else 2
        # Unreachable while remaining >= 3; kept as a bound on the result.
        size = min(size, remaining)

        logger.debug(f"Remaining: {remaining}, roll: {roll}, chosen: {size}")
        return size
