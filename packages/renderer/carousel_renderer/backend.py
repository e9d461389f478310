"""Shared pieces of the paged and raster backends."""

from __future__ import annotations

from functools import partial
from io import BytesIO

from PIL import Image, ImageChops, ImageDraw

from .errors import AssetDecodeError
from .layout import QUOTE_STYLE, Wrapper
from .models import TextMeasurer, TextRun
from .wrap import wrap_text


def decode_avatar(data: bytes) -> Image.Image:
    """Decode avatar bytes into a fully loaded RGBA image."""
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except Exception as exc:
        raise AssetDecodeError(f"avatar image could not be decoded: {exc}") from exc
    return image.convert("RGBA")


def circle_crop(image: Image.Image, diameter: int) -> Image.Image:
    """Scale ``image`` into a ``diameter`` square and mask it to a circle."""
    avatar = image.convert("RGBA").resize((diameter, diameter), Image.Resampling.LANCZOS)
    mask = Image.new("L", (diameter, diameter), 0)
    ImageDraw.Draw(mask).ellipse((0, 0, diameter - 1, diameter - 1), fill=255)
    avatar.putalpha(ImageChops.multiply(avatar.getchannel("A"), mask))
    return avatar


class SlideBackend:
    # Per-role (dx, dy) correction for this backend's baseline convention.
    BASELINE_NUDGE: dict[str, tuple[float, float]] = {}

    def measurer(self, weight: str, size: int) -> TextMeasurer:
        raise NotImplementedError

    def wrapper(self) -> Wrapper:
        measure = self.measurer(QUOTE_STYLE.weight, QUOTE_STYLE.size)
        return partial(wrap_text, measure=measure)

    def text_origin(self, run: TextRun) -> tuple[float, float]:
        dx, dy = self.BASELINE_NUDGE.get(run.role, (0, 0))
        return (run.x + dx, run.y + dy)
