"""Recoverable error kinds raised by the palette engine."""


class PolineError(Exception):
    """Base class for recoverable poline errors."""


class MissingArgumentError(PolineError):
    """Neither a position nor a color was supplied for a ColorPoint."""

    def __init__(self, message: str = "At least one is required") -> None:
        super().__init__(message)


class PointNotFoundError(PolineError):
    """An anchor lookup by value equality found no matching point."""

    def __init__(self, message: str = "Point not found") -> None:
        super().__init__(message)


__all__ = ["PolineError", "MissingArgumentError", "PointNotFoundError"]
