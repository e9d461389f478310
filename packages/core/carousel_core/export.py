"""Export orchestration: raw quotes in, rendered paged or raster payload out."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from carousel_renderer import (
    CarouselError,
    InputValidationError,
    PagedRenderer,
    Profile,
    RasterRenderer,
    RenderFailure,
    Theme,
    build_deck_layouts,
)

from .naming import PAGED_FALLBACK, RASTER_FALLBACK, archive_filename, derive_name, paged_filename
from .packaging import NamedBuffer

logger = logging.getLogger("carousel.export")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class ExportFormat(str, Enum):
    PAGED = "paged"
    RASTER = "raster"


@dataclass(frozen=True)
class ExportResult:
    format: ExportFormat
    filename: str
    payload: bytes | list[NamedBuffer]
    slide_count: int
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        if isinstance(self.payload, bytes):
            return self.slide_count
        return len(self.payload)


def split_deck(raw: str) -> list[str]:
    lines = (line.strip() for line in _LINE_BREAK_RE.split(raw))
    return [line for line in lines if line]


async def export_deck(
    raw: str,
    profile: Profile,
    theme: Theme,
    fmt: ExportFormat | str,
    *,
    strict: bool = True,
    renderer_options: dict[str, Any] | None = None,
) -> ExportResult:
    try:
        fmt = ExportFormat(fmt)
    except ValueError as exc:
        raise InputValidationError(f"Unknown export format: {fmt}") from exc
    deck = split_deck(raw)
    if not deck:
        raise InputValidationError("Please add at least one quote!")

    options = renderer_options or {}
    started = time.perf_counter()
    logger.info(
        f"export started format={fmt.value} slides={len(deck)} theme={theme.name}",
        extra={"event": "export_started", "format": fmt.value, "slides": len(deck), "theme": theme.name},
    )

    try:
        if fmt is ExportFormat.PAGED:
            result = _export_paged(deck, profile, theme, options)
        else:
            result = await _export_raster(deck, profile, theme, options, strict)
    except CarouselError as exc:
        logger.error(f"export failed: {exc.reason}", extra={"event": "export_failed", "format": fmt.value})
        raise

    logger.info(
        f"export finished file={result.filename} duration_s={time.perf_counter() - started:.3f}",
        extra={"event": "export_finished", "format": fmt.value, "slides": result.page_count},
    )
    return result


def _export_paged(deck: list[str], profile: Profile, theme: Theme, options: dict[str, Any]) -> ExportResult:
    renderer = PagedRenderer(**options)
    layouts = build_deck_layouts(deck, profile, theme, renderer.wrapper())
    data = renderer.render_deck(layouts)
    name = derive_name(deck[0], PAGED_FALLBACK)
    return ExportResult(format=ExportFormat.PAGED, filename=paged_filename(name), payload=data, slide_count=len(deck))


async def _export_raster(
    deck: list[str],
    profile: Profile,
    theme: Theme,
    options: dict[str, Any],
    strict: bool,
) -> ExportResult:
    renderer = RasterRenderer(**options)
    layouts = build_deck_layouts(deck, profile, theme, renderer.wrapper())
    slides = await renderer.render_deck(layouts, strict=strict)
    failures = {s.name: s.error for s in slides if s.error}
    if len(failures) == len(slides):
        # Partial mode never hands back an empty archive.
        raise RenderFailure("No slides could be rendered: " + "; ".join(failures.values()))
    name = derive_name(deck[0], RASTER_FALLBACK)
    return ExportResult(
        format=ExportFormat.RASTER,
        filename=archive_filename(name),
        payload=[NamedBuffer(name=s.name, data=s.data) for s in slides if s.data is not None],
        slide_count=len(deck),
        failures=failures,
    )


def export_carousel(
    raw: str,
    profile: Profile,
    theme: Theme,
    fmt: ExportFormat | str,
    *,
    strict: bool = True,
    renderer_options: dict[str, Any] | None = None,
) -> ExportResult:
    return asyncio.run(export_deck(raw, profile, theme, fmt, strict=strict, renderer_options=renderer_options))
