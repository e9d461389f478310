"""Greedy line wrapping against an injected text measurer."""

from __future__ import annotations

from .models import TextMeasurer


def wrap_text(text: str, max_width: float, measure: TextMeasurer) -> list[str]:
    """Split ``text`` into lines no wider than ``max_width`` under ``measure``.

    Words are accumulated greedily. A word that is wider than ``max_width`` on
    its own is emitted unsplit on its own line; it may overflow the slide.
    Only plain spaces separate words, so a non-breaking space keeps its
    neighbours together.
    """
    lines: list[str] = []
    current = ""

    for word in (w for w in text.split(" ") if w):
        candidate = f"{current} {word}" if current else word
        if measure(candidate) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines
