"""Color parsing and shade generation errors."""


class ShadeError(Exception):
    """Base class for shadecraft errors."""
    pass


class ColorFormatError(ShadeError, ValueError):
    """Input is not a color in any recognized notation."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
