"""Built-in carousel color themes."""

from __future__ import annotations

from .models import Theme, parse_hex

DEFAULT_THEME_NAME = "Clean White"

THEMES: dict[str, Theme] = {
    "Clean White": Theme.from_hex("Clean White", "#ffffff", "#1a1a1a", "#0a66c2"),
    "Dark Mode": Theme.from_hex("Dark Mode", "#1a1a1a", "#ffffff", "#70b5f9"),
    "Soft Cream": Theme.from_hex("Soft Cream", "#faf8f5", "#2d2d2d", "#d4a574"),
    "Ocean Blue": Theme.from_hex("Ocean Blue", "#0a66c2", "#ffffff", "#ffffff"),
    "Mint Fresh": Theme.from_hex("Mint Fresh", "#e8f5e9", "#1b5e20", "#2e7d32"),
    "Sunset": Theme.from_hex("Sunset", "#fff3e0", "#e65100", "#ff6d00"),
}


def list_themes() -> list[str]:
    return list(THEMES.keys())


def get_theme(name: str | None) -> Theme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])


def custom_theme(background: str, text: str, accent: str, name: str = "Custom") -> Theme:
    return Theme(name=name, background=parse_hex(background), text=parse_hex(text), accent=parse_hex(accent))
