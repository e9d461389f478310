"""Persisted profile, theme and export defaults with load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from carousel_renderer import DEFAULT_THEME_NAME, THEMES, Profile, Theme, get_theme

logger = logging.getLogger("carousel.config")

CONFIG_VERSION = 2


@dataclass
class ProfileConfig:
    display_name: str = "Your Name"
    handle: str = "@yourhandle"
    avatar_path: str | None = None


@dataclass
class UiConfig:
    theme: str = DEFAULT_THEME_NAME


@dataclass
class ExportConfig:
    output_dir: str | None = None
    format: str = "paged"
    strict: bool = True


@dataclass
class RenderConfig:
    font_regular: str | None = None
    font_bold: str | None = None
    compress_pdf: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


def app_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Carousel"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Carousel"
    return Path.home() / ".config" / "carousel"


def config_path() -> Path:
    return app_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_ui(cfg: AppConfig) -> None:
    if cfg.ui.theme not in THEMES:
        cfg.ui.theme = DEFAULT_THEME_NAME


def _normalize_export(cfg: AppConfig) -> None:
    if cfg.export.format not in ("paged", "raster"):
        cfg.export.format = "paged"
    cfg.export.strict = bool(cfg.export.strict)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 stored the editor profile flat: name/handle/theme at top level.
        profile = dict(data.get("profile", {}) or {})
        if "name" in data:
            profile.setdefault("display_name", data.pop("name"))
        if "handle" in data:
            profile.setdefault("handle", data.pop("handle"))
        data["profile"] = profile
        if "theme" in data:
            ui = dict(data.get("ui", {}) or {})
            ui.setdefault("theme", data.pop("theme"))
            data["ui"] = ui
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning(f"unreadable config at {path}, using defaults", extra={"event": "config_unreadable"})
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        profile=_merge(ProfileConfig, data.get("profile", {})),
        ui=_merge(UiConfig, data.get("ui", {})),
        export=_merge(ExportConfig, data.get("export", {})),
        render=_merge(RenderConfig, data.get("render", {})),
    )

    _normalize_ui(cfg)
    _normalize_export(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def profile_from_config(cfg: AppConfig) -> Profile:
    avatar: bytes | None = None
    if cfg.profile.avatar_path:
        avatar_file = Path(cfg.profile.avatar_path).expanduser()
        try:
            avatar = avatar_file.read_bytes()
        except OSError:
            logger.warning(f"avatar not readable at {avatar_file}, using placeholder", extra={"event": "avatar_missing"})
    return Profile(display_name=cfg.profile.display_name, handle=cfg.profile.handle, avatar=avatar)


def theme_from_config(cfg: AppConfig) -> Theme:
    return get_theme(cfg.ui.theme)


def renderer_options(cfg: AppConfig, fmt: str) -> dict[str, Any]:
    if fmt == "raster":
        return {"font_regular": cfg.render.font_regular, "font_bold": cfg.render.font_bold}
    return {"compress": cfg.render.compress_pdf}
