"""Error kinds raised by pixelops.

Each error also derives from the built-in exception a caller would expect, so
``except ValueError`` keeps working around parameter and geometry checks.
"""


class PixelopsError(Exception):
    """Base class for all pixelops failures."""


class DimensionMismatch(PixelopsError, ValueError):
    """Two grids that must share a geometry do not."""


class OutOfRangeParameter(PixelopsError, ValueError):
    """A transform parameter lies outside its legal domain."""


class IndexOutOfBounds(PixelopsError, IndexError):
    """A pixel coordinate or selection rank lies outside its extent."""


class EmptyInput(PixelopsError, ValueError):
    """An order statistic was requested over zero values."""
