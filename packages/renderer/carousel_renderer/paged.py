"""Multi-page PDF writer: one square page per slide."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Sequence

from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .backend import SlideBackend, circle_crop, decode_avatar
from .errors import CarouselError, InputValidationError, RenderFailure
from .models import AvatarSlot, Color, SlideLayout, TextMeasurer, TextRun

logger = logging.getLogger("carousel.renderer.paged")

_FONTS = {"bold": "Helvetica-Bold", "normal": "Helvetica"}


def _rgb(color: Color) -> tuple[float, float, float]:
    return (color[0] / 255, color[1] / 255, color[2] / 255)


class PagedRenderer(SlideBackend):
    """Draws slide layouts onto reportlab pages; coordinates are flipped to PDF space."""

    def __init__(self, title: str | None = None, compress: bool = True) -> None:
        self.title = title
        self.compress = compress

    def measurer(self, weight: str, size: int) -> TextMeasurer:
        font_name = _FONTS.get(weight, _FONTS["normal"])
        return lambda text: pdfmetrics.stringWidth(text, font_name, size)

    def render_deck(self, layouts: Sequence[SlideLayout]) -> bytes:
        if not layouts:
            raise InputValidationError("Please add at least one quote!")

        avatars = self._prepare_avatars(layouts)
        buffer = BytesIO()
        size = layouts[0].size
        pdf = canvas.Canvas(buffer, pagesize=(size, size), pageCompression=int(self.compress))
        if self.title:
            pdf.setTitle(self.title)

        try:
            for layout in layouts:
                pdf.setPageSize((layout.size, layout.size))
                self._draw_slide(pdf, layout, avatars.get(layout.avatar.image))
                pdf.showPage()
            pdf.save()
        except CarouselError:
            raise
        except Exception as exc:
            logger.error("pdf render failed", exc_info=True, extra={"event": "paged_render_failed"})
            raise RenderFailure(f"Error generating PDF: {exc}") from exc

        data = buffer.getvalue()
        logger.info(
            f"pdf rendered pages={len(layouts)} bytes={len(data)}",
            extra={"event": "paged_rendered"},
        )
        return data

    def _prepare_avatars(self, layouts: Sequence[SlideLayout]) -> dict[bytes, ImageReader]:
        # Decoded once per blob, reused on every page.
        avatars: dict[bytes, ImageReader] = {}
        for layout in layouts:
            blob = layout.avatar.image
            if blob is None or blob in avatars:
                continue
            image = circle_crop(decode_avatar(blob), int(layout.avatar.diameter) * 4)
            avatars[blob] = ImageReader(image)
        return avatars

    def _draw_slide(self, pdf: canvas.Canvas, layout: SlideLayout, avatar: ImageReader | None) -> None:
        size = layout.size
        pdf.setFillColorRGB(*_rgb(layout.background))
        pdf.rect(0, 0, size, size, stroke=0, fill=1)

        self._draw_avatar(pdf, layout.avatar, size, avatar)

        for run in layout.runs:
            self._draw_run(pdf, run, size)

    def _draw_avatar(self, pdf: canvas.Canvas, slot: AvatarSlot, size: int, avatar: ImageReader | None) -> None:
        cx, cy = slot.center
        if avatar is None:
            pdf.setFillColorRGB(*_rgb(slot.placeholder))
            pdf.circle(cx, size - cy, slot.radius, stroke=0, fill=1)
            return

        pdf.saveState()
        path = pdf.beginPath()
        path.circle(cx, size - cy, slot.radius)
        pdf.clipPath(path, stroke=0, fill=0)
        pdf.drawImage(
            avatar,
            slot.x,
            size - slot.y - slot.diameter,
            width=slot.diameter,
            height=slot.diameter,
            mask="auto",
        )
        pdf.restoreState()

    def _draw_run(self, pdf: canvas.Canvas, run: TextRun, size: int) -> None:
        if not run.text:
            return
        x, y = self.text_origin(run)
        pdf.saveState()
        pdf.setFont(_FONTS.get(run.weight, _FONTS["normal"]), run.size)
        pdf.setFillColorRGB(*_rgb(run.color))
        if run.opacity < 1.0:
            pdf.setFillAlpha(run.opacity)
        pdf.drawString(x, size - y, run.text)
        pdf.restoreState()
