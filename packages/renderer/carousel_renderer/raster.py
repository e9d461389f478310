"""Per-slide PNG renderer built on Pillow, scheduled with asyncio."""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from io import BytesIO
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from .backend import SlideBackend, circle_crop, decode_avatar
from .errors import CarouselError, InputValidationError, RenderFailure
from .models import Color, SlideLayout, TextMeasurer

logger = logging.getLogger("carousel.renderer.raster")

_FONT_CANDIDATES = {
    "bold": ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf", "LiberationSans-Bold.ttf"),
    "normal": ("DejaVuSans.ttf", "Arial.ttf", "arial.ttf", "LiberationSans-Regular.ttf"),
}


def slide_image_name(index: int, extension: str = "png") -> str:
    return f"slide-{index + 1:02d}.{extension}"


def _blend(color: Color, background: Color, opacity: float) -> Color:
    return tuple(round(b + (c - b) * opacity) for c, b in zip(color, background))  # type: ignore[return-value]


@dataclass(frozen=True)
class RasterSlide:
    index: int
    name: str
    data: bytes | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None


class RasterRenderer(SlideBackend):
    """Draws each slide on its own surface and encodes it to an image buffer."""

    # Canvas-style baselines sit 5 units lower for the profile header, counter 20 units right.
    BASELINE_NUDGE = {"name": (0, 5), "handle": (0, 5), "counter": (20, 0)}

    def __init__(
        self,
        font_regular: str | None = None,
        font_bold: str | None = None,
        image_format: str = "PNG",
    ) -> None:
        self.font_paths = {"normal": font_regular, "bold": font_bold}
        self.image_format = image_format
        self._fonts: dict[tuple[str, int], ImageFont.FreeTypeFont] = {}
        self._lock = threading.RLock()

    def measurer(self, weight: str, size: int) -> TextMeasurer:
        font = self._font(weight, size)
        return lambda text: float(font.getlength(text))

    def _font(self, weight: str, size: int):
        key = ("bold" if weight == "bold" else "normal", size)
        with self._lock:
            if key in self._fonts:
                return self._fonts[key]
            preferred = self.font_paths.get(key[0])
            candidates = ((preferred,) if preferred else ()) + _FONT_CANDIDATES[key[0]]
            font = None
            for candidate in candidates:
                try:
                    font = ImageFont.truetype(candidate, size)
                    break
                except OSError:
                    continue
            if font is None:
                logger.warning(
                    f"no truetype font for weight={key[0]}, using default",
                    extra={"event": "raster_font_fallback"},
                )
                font = ImageFont.load_default(size)
            self._fonts[key] = font
            return font

    async def render_deck(self, layouts: Sequence[SlideLayout], strict: bool = True) -> list[RasterSlide]:
        if not layouts:
            raise InputValidationError("Please add at least one quote!")

        avatars = await self._decode_avatars(layouts)
        jobs = [self._render_slide(layout, avatars.get(layout.avatar.image)) for layout in layouts]

        if strict:
            slides = list(await asyncio.gather(*jobs))
        else:
            slides = []
            results = await asyncio.gather(*jobs, return_exceptions=True)
            for layout, result in zip(layouts, results):
                if isinstance(result, CarouselError):
                    logger.warning(
                        f"slide {layout.index + 1} failed: {result.reason}",
                        extra={"event": "raster_slide_failed"},
                    )
                    name = slide_image_name(layout.index, self.image_format.lower())
                    slides.append(RasterSlide(layout.index, name, None, result.reason))
                elif isinstance(result, BaseException):
                    raise result
                else:
                    slides.append(result)

        logger.info(
            f"raster rendered slides={len(slides)} failed={sum(1 for s in slides if not s.ok)}",
            extra={"event": "raster_rendered"},
        )
        return slides

    async def _decode_avatars(self, layouts: Sequence[SlideLayout]) -> dict[bytes, Image.Image]:
        # Decoded once per blob, reused by every slide's composite.
        avatars: dict[bytes, Image.Image] = {}
        for layout in layouts:
            blob = layout.avatar.image
            if blob is None or blob in avatars:
                continue
            image = await asyncio.to_thread(decode_avatar, blob)
            avatars[blob] = circle_crop(image, int(layout.avatar.diameter))
        return avatars

    async def _render_slide(self, layout: SlideLayout, avatar: Image.Image | None) -> RasterSlide:
        data = await asyncio.to_thread(self._draw_and_encode, layout, avatar)
        return RasterSlide(index=layout.index, name=slide_image_name(layout.index, self.image_format.lower()), data=data)

    def _draw_and_encode(self, layout: SlideLayout, avatar: Image.Image | None) -> bytes:
        try:
            image = self.render_image(layout, avatar)
            buf = BytesIO()
            image.save(buf, format=self.image_format)
        except CarouselError:
            raise
        except Exception as exc:
            raise RenderFailure(f"Error generating image for slide {layout.index + 1}: {exc}") from exc
        return buf.getvalue()

    def render_image(self, layout: SlideLayout, avatar: Image.Image | None = None) -> Image.Image:
        image = Image.new("RGB", (layout.size, layout.size), layout.background)
        draw = ImageDraw.Draw(image)

        slot = layout.avatar
        if avatar is not None:
            image.paste(avatar, (int(slot.x), int(slot.y)), avatar)
        else:
            x0, y0, x1, y1 = slot.box
            draw.ellipse((x0, y0, x1 - 1, y1 - 1), fill=slot.placeholder)

        for run in layout.runs:
            if not run.text:
                continue
            fill = run.color if run.opacity >= 1.0 else _blend(run.color, layout.background, run.opacity)
            draw.text(
                self.text_origin(run),
                run.text,
                font=self._font(run.weight, run.size),
                fill=fill,
                anchor="ls",
            )
        return image
