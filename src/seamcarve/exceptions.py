"""Errors raised by the seam carving engine."""


class SeamCarvingError(ValueError):
    """Base class for errors raised by seamcarve."""


class InvalidInput(SeamCarvingError):
    """A pixel grid, energy field or seam has degenerate or mismatched dimensions."""


class InvalidParameter(SeamCarvingError):
    """A target width, seam count or ratio lies outside its valid range."""
