"""Renderer package for carousel slide layout and export backends."""

from .errors import AssetDecodeError, CarouselError, InputValidationError, PackagingError, RenderFailure
from .layout import MAX_TEXT_WIDTH, QUOTE_STYLE, SLIDE_SIZE, build_deck_layouts, build_layout
from .models import AvatarSlot, Color, Profile, SlideLayout, TextRun, Theme, parse_hex, to_hex
from .paged import PagedRenderer
from .raster import RasterRenderer, RasterSlide, slide_image_name
from .themes import DEFAULT_THEME_NAME, THEMES, custom_theme, get_theme, list_themes
from .wrap import wrap_text

__all__ = [
    "AssetDecodeError",
    "AvatarSlot",
    "CarouselError",
    "Color",
    "DEFAULT_THEME_NAME",
    "InputValidationError",
    "MAX_TEXT_WIDTH",
    "PackagingError",
    "PagedRenderer",
    "Profile",
    "QUOTE_STYLE",
    "RasterRenderer",
    "RasterSlide",
    "RenderFailure",
    "SLIDE_SIZE",
    "SlideLayout",
    "THEMES",
    "TextRun",
    "Theme",
    "build_deck_layouts",
    "build_layout",
    "custom_theme",
    "get_theme",
    "list_themes",
    "parse_hex",
    "slide_image_name",
    "to_hex",
    "wrap_text",
]
