"""Core services for config, naming, export orchestration and packaging."""

from .config import AppConfig, load_config, profile_from_config, renderer_options, save_config, theme_from_config
from .export import ExportFormat, ExportResult, export_carousel, export_deck, split_deck
from .naming import PAGED_FALLBACK, RASTER_FALLBACK, archive_filename, derive_name, paged_filename
from .packaging import ArchiveWriter, NamedBuffer, ZipArchiveWriter, save_export

__all__ = [
    "AppConfig",
    "ArchiveWriter",
    "ExportFormat",
    "ExportResult",
    "NamedBuffer",
    "PAGED_FALLBACK",
    "RASTER_FALLBACK",
    "ZipArchiveWriter",
    "archive_filename",
    "derive_name",
    "export_carousel",
    "export_deck",
    "load_config",
    "paged_filename",
    "profile_from_config",
    "renderer_options",
    "save_config",
    "save_export",
    "split_deck",
    "theme_from_config",
]
