"""Type definitions and enums for album module."""

from enum import Enum


class ArrangementKind(Enum):
    """Visual layout template of a single album page."""
    SINGLE = 1
    PAIR = 2
    TRIPLE = 3

    @property
    def size(self) -> int:
        """Number of photos placed on a page of this kind."""
        return self.value

    @classmethod
    def for_size(cls, size: int) -> 'ArrangementKind':
        """
        Look up the arrangement for a page holding `size` photos.

        Raises:
            ValueError: If no arrangement holds that many photos
        """
        for kind in cls:
            if kind.value == size:
                return kind
        raise ValueError(f"No page arrangement for {size} photos")
