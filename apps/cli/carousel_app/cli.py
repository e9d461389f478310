"""CLI entrypoints for carousel export, theme listing and the saved profile."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from carousel_core import (
    ExportFormat,
    export_carousel,
    load_config,
    profile_from_config,
    renderer_options,
    save_config,
    save_export,
    theme_from_config,
)
from carousel_core.logging_setup import configure_logging, get_logger
from carousel_renderer import THEMES, CarouselError, InputValidationError, Profile, custom_theme, list_themes, to_hex


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _read_quotes(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input in (None, "-"):
        return sys.stdin.read()
    try:
        return Path(args.input).expanduser().read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(f"Could not read quotes from {args.input}: {exc}") from exc


def _resolve_profile(args: argparse.Namespace, base: Profile) -> Profile:
    avatar = base.avatar
    if args.avatar:
        try:
            avatar = Path(args.avatar).expanduser().read_bytes()
        except OSError as exc:
            raise InputValidationError(f"Could not read avatar {args.avatar}: {exc}") from exc
    return Profile(
        display_name=base.display_name if args.name is None else args.name,
        handle=base.handle if args.handle is None else args.handle,
        avatar=avatar,
    )


def cmd_export(args: argparse.Namespace) -> int:
    cfg = load_config()
    fmt = args.format or cfg.export.format
    profile = _resolve_profile(args, profile_from_config(cfg))

    if args.colors:
        parts = [p.strip() for p in args.colors.split(",")]
        if len(parts) != 3:
            raise InputValidationError("--colors expects BACKGROUND,TEXT,ACCENT hex values")
        theme = custom_theme(*parts)
    elif args.theme:
        if args.theme not in THEMES:
            raise InputValidationError(f"Unknown theme: {args.theme}")
        theme = THEMES[args.theme]
    else:
        theme = theme_from_config(cfg)

    strict = cfg.export.strict and not args.partial
    result = export_carousel(
        _read_quotes(args),
        profile,
        theme,
        fmt,
        strict=strict,
        renderer_options=renderer_options(cfg, fmt),
    )

    out_dir = Path(args.out_dir or cfg.export.output_dir or ".").expanduser().resolve()
    path = save_export(result, out_dir)
    _print_json(
        {
            "success": True,
            "format": result.format.value,
            "filename": result.filename,
            "path": str(path),
            "pages": result.page_count,
            "failures": result.failures,
        }
    )
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json(
        [
            {
                "name": name,
                "background": to_hex(THEMES[name].background),
                "text": to_hex(THEMES[name].text),
                "accent": to_hex(THEMES[name].accent),
            }
            for name in list_themes()
        ]
    )
    return 0


def cmd_profile_show(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json(
        {
            "display_name": cfg.profile.display_name,
            "handle": cfg.profile.handle,
            "avatar_path": cfg.profile.avatar_path,
            "theme": cfg.ui.theme,
        }
    )
    return 0


def cmd_profile_set(args: argparse.Namespace) -> int:
    cfg = load_config()
    if args.name is not None:
        cfg.profile.display_name = args.name
    if args.handle is not None:
        cfg.profile.handle = args.handle
    if args.avatar is not None:
        cfg.profile.avatar_path = str(Path(args.avatar).expanduser().resolve()) if args.avatar else None
    if args.theme is not None:
        if args.theme not in THEMES:
            raise InputValidationError(f"Unknown theme: {args.theme}")
        cfg.ui.theme = args.theme
    path = save_config(cfg)
    _print_json({"success": True, "config": str(path)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carousel", description="Quote carousel exporter (PDF pages or PNG slides)")
    parser.add_argument("--verbose", action="store_true", help="Log debug events and echo logs to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    export_cmd = sub.add_parser("export", help="Render quotes into a carousel")
    export_cmd.add_argument("--input", default=None, help="Quotes file, one quote per line ('-' for stdin)")
    export_cmd.add_argument("--text", default=None, help="Quotes given inline; newlines separate slides")
    export_cmd.add_argument("--format", choices=[f.value for f in ExportFormat], default=None)
    export_cmd.add_argument("--theme", default=None, help="Catalog theme name")
    export_cmd.add_argument("--colors", default=None, help="Custom theme as BACKGROUND,TEXT,ACCENT hex")
    export_cmd.add_argument("--name", default=None, help="Display name override")
    export_cmd.add_argument("--handle", default=None, help="Handle override")
    export_cmd.add_argument("--avatar", default=None, help="Avatar image override")
    export_cmd.add_argument("--out-dir", default=None, help="Directory for the output file")
    export_cmd.add_argument("--partial", action="store_true", help="Keep successful slides when a raster slide fails")
    export_cmd.set_defaults(func=cmd_export)

    themes_cmd = sub.add_parser("themes", help="List built-in themes")
    themes_cmd.set_defaults(func=cmd_themes)

    profile_cmd = sub.add_parser("profile", help="Saved profile and theme")
    profile_sub = profile_cmd.add_subparsers(dest="profile_cmd", required=True)
    show_cmd = profile_sub.add_parser("show", help="Print the saved profile")
    show_cmd.set_defaults(func=cmd_profile_show)
    set_cmd = profile_sub.add_parser("set", help="Update the saved profile")
    set_cmd.add_argument("--name", default=None)
    set_cmd.add_argument("--handle", default=None)
    set_cmd.add_argument("--avatar", default=None, help="Avatar image path ('' clears it)")
    set_cmd.add_argument("--theme", default=None)
    set_cmd.set_defaults(func=cmd_profile_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(console=args.verbose, verbose=args.verbose)
    try:
        return int(args.func(args))
    except CarouselError as exc:
        get_logger().error(f"command failed: {exc.reason}", extra={"event": "command_failed"})
        print(f"error: {exc.reason}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
