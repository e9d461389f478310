"""Output file naming derived from the first quote."""

from __future__ import annotations

import re

PAGED_FALLBACK = "linkedin-carousel"
RASTER_FALLBACK = "carousel-images"
MAX_NAME_LENGTH = 50

_SEPARATOR_RE = re.compile(r"[\s-]")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9 ]")
_SPACE_RE = re.compile(r" +")


def derive_name(first_quote: str, fallback: str) -> str:
    # Dashes count as spaces so the result survives being derived again.
    text = _UNSAFE_RE.sub("", _SEPARATOR_RE.sub(" ", first_quote)).strip()
    text = text[:MAX_NAME_LENGTH].strip()
    name = _SPACE_RE.sub("-", text).lower()
    return name or fallback


def paged_filename(name: str) -> str:
    return f"{name}.pdf"


def archive_filename(name: str) -> str:
    return f"{name}-images.zip"
