"""Unified CLI for sky culture metadata.

Usage:
    skyculture culture list [--localized]
    skyculture culture show <id>
    skyculture culture describe [<id>]
    skyculture culture current
    skyculture culture set-default <id>
"""

import argparse
import logging
import sys

from skyculture_engine.cli.culture import (
    cmd_culture_current,
    cmd_culture_describe,
    cmd_culture_list,
    cmd_culture_set_default,
    cmd_culture_show,
)
from skyculture_engine.paths import app_language, settings_path, skycultures_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyculture",
        description="Inspect and select planetarium sky cultures",
    )
    parser.add_argument(
        "--root", default=str(skycultures_dir()),
        help="Path to the skycultures directory",
    )
    parser.add_argument(
        "--settings", default=str(settings_path()),
        help="Path to settings.yaml",
    )
    parser.add_argument(
        "--lang", default=app_language(),
        help="Application language tag (e.g. en, de, pt_BR)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # culture
    cul = sub.add_parser("culture", help="Sky culture operations")
    cul_sub = cul.add_subparsers(dest="subcommand")

    ls = cul_sub.add_parser("list", help="List installed sky cultures")
    ls.add_argument(
        "--localized", action="store_true",
        help="Show translated names sorted for display",
    )

    show = cul_sub.add_parser("show", help="Show a sky culture's metadata")
    show.add_argument("culture_id")

    desc = cul_sub.add_parser("describe", help="Print the description html")
    desc.add_argument(
        "culture_id", nargs="?", default=None,
        help="Culture id (default: current culture)",
    )

    cul_sub.add_parser("current", help="Show the current sky culture")

    setd = cul_sub.add_parser("set-default", help="Persist the default sky culture")
    setd.add_argument("culture_id")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatch = {
        ("culture", "list"): cmd_culture_list,
        ("culture", "show"): cmd_culture_show,
        ("culture", "describe"): cmd_culture_describe,
        ("culture", "current"): cmd_culture_current,
        ("culture", "set-default"): cmd_culture_set_default,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
