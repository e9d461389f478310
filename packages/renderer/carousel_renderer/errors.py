"""Export failure kinds surfaced to callers as a single reason string."""

from __future__ import annotations


class CarouselError(Exception):
    """Base class for every failed export; ``reason`` is user-facing."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InputValidationError(CarouselError):
    """The deck is empty or a request argument is unusable."""


class AssetDecodeError(CarouselError):
    """The avatar image could not be decoded."""


class RenderFailure(CarouselError):
    """A backend draw, text, image or encode call failed."""


class PackagingError(CarouselError):
    """Archiving or writing the output file failed."""
