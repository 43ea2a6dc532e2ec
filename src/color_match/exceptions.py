"""Custom exceptions for color-match."""


class ColorMatchError(Exception):
    """Base exception for color-match."""

    pass


class InvalidRequestError(ColorMatchError):
    """Raised when required match inputs are missing or malformed."""

    pass


class ScoringError(ColorMatchError):
    """Raised when a similarity scorer fails on its inputs."""

    pass
