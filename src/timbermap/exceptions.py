"""Custom exceptions for map generation."""


class MapGenError(Exception):
    """Base exception for map generation errors."""

    pass


class OutOfRangeError(MapGenError):
    """Raised when a grid is accessed outside its bounds."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"could not access {x},{y} as it is out-of-range for a {width}x{height} grid"
        )


class SourceNotFoundError(MapGenError):
    """Raised when no map edge has a long enough flat low stretch for water."""

    def __init__(self, message: str = "could not generate water sources, try another seed"):
        super().__init__(message)


class EncodingError(MapGenError):
    """Raised when the document or its archive cannot be written."""

    pass
