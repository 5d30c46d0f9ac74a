"""Core domain models for album generation.

These are pure data structures - no business logic, no external dependencies.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

from photo_album.album.domain.types import ArrangementKind


PHOTOS_URL_PREFIX = "/photos"


@dataclass(frozen=True)
class PhotoRecord:
    """A single image file available to the album."""
    name: str
    path: str
    size_bytes: int
    modified_at: datetime

    def __post_init__(self):
        if self.size_bytes < 0:
            raise ValueError(f"size_bytes must be >= 0, got {self.size_bytes}")

    @property
    def url(self) -> str:
        """Public URL the photo is served under."""
        return f"{PHOTOS_URL_PREFIX}/{self.name}"


@dataclass(frozen=True)
class PageGroup:
    """The 1-3 photos assigned to one album page."""
    photos: Tuple[PhotoRecord, ...]
    kind: ArrangementKind = field(init=False)

    def __post_init__(self):
        photos = tuple(self.photos)
        object.__setattr__(self, 'photos', photos)
        object.__setattr__(self, 'kind', ArrangementKind.for_size(len(photos)))

    @property
    def size(self) -> int:
        return len(self.photos)


@dataclass(frozen=True)
class AlbumPlan:
    """
    Ordered page groups for a whole album.

    Concatenating the groups reproduces the planner's input sequence.
    """
    groups: Tuple[PageGroup, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'groups', tuple(self.groups))

    @property
    def page_count(self) -> int:
        return len(self.groups)

    @property
    def photo_count(self) -> int:
        return sum(group.size for group in self.groups)

    @property
    def sizes(self) -> List[int]:
        """Photo count of each page, in page order."""
        return [group.size for group in self.groups]

    @property
    def photos(self) -> List[PhotoRecord]:
        """All photos of the album in page order."""
        return [photo for group in self.groups for photo in group.photos]

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups)
