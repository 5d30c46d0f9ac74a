"""Exceptions raised while building an album."""


class AlbumError(Exception):
    """Base class for album generation errors."""


class NoSelectionError(AlbumError):
    """The caller selected no photos."""

    def __init__(self, message: str = "No photos were selected"):
        super().__init__(message)


class NoMatchError(AlbumError):
    """None of the selected paths matched an existing photo."""

    def __init__(self, message: str = "None of the selected photos were found"):
        super().__init__(message)


class EmptyPlanError(AlbumError):
    """The renderer was handed a plan without pages."""

    def __init__(self, message: str = "Album plan contains no pages"):
        super().__init__(message)


class ImageLoadError(AlbumError):
    """A photo could not be read or decoded. Always recovered by the renderer."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Could not load image {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
