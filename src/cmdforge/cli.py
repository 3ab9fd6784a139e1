"""Command line interface for cmdforge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import CommandConfig, ProjectConfig, Settings
from .errors import CmdForgeError
from .licenses import (
    License,
    LicenseRegistry,
    build_registry,
    copyright_line,
    resolve_from_settings,
)
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdforge",
        description="Scaffold argparse applications and their commands",
    )
    parser.add_argument("--config", type=Path, help="Config file (default is ~/.cmdforge.toml)")
    parser.add_argument("-a", "--author", help="Author name for copyright attribution")
    parser.add_argument("-l", "--license", help="Name of license for the project")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what is being done")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new application")
    init_parser.add_argument("name", nargs="?", help="Application name (default: directory name)")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory where the application should be created",
    )
    init_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )

    add_parser = subparsers.add_parser(
        "add",
        aliases=["command"],
        help="add a command to an application",
        description=(
            "Create a new command module with a license header and register it "
            "under its parent (default root)."
        ),
    )
    add_parser.add_argument("name", nargs="?", help="Name of the new command")
    add_parser.add_argument(
        "-p",
        "--parent",
        default="root",
        help="Name of the parent command for this command",
    )
    add_parser.add_argument(
        "-t",
        "--package",
        help="Deprecated: this operation has been removed",
    )
    add_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Root directory of the application",
    )
    add_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the command module if it exists",
    )

    subparsers.add_parser("licenses", help="list the built-in licenses")

    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.load(args.config)
    return settings.with_overrides(author=args.author)


def _legal(
    args: argparse.Namespace, settings: Settings, registry: LicenseRegistry
) -> tuple[License, str]:
    legal = resolve_from_settings(registry, settings, explicit=args.license)
    copyright = copyright_line(settings.get_string("author"), settings.get_string("year"))
    return legal, copyright


def _handle_init(args: argparse.Namespace, registry: LicenseRegistry) -> int:
    settings = _load_settings(args)
    target = args.directory.expanduser().resolve()
    project = ProjectConfig.from_name(args.name or target.name)
    legal, copyright = _legal(args, settings, registry)

    scaffolder = ProjectScaffolder(TemplateRenderer())
    project_path = scaffolder.create_project(project, legal, copyright, target, force=args.force)
    print(f"Your application is ready at {project_path}")
    return 0


def _handle_add(args: argparse.Namespace, registry: LicenseRegistry) -> int:
    if args.package:
        LOGGER.warning("Flag --package has been deprecated, this operation has been removed.")

    command = CommandConfig.from_name(args.name, parent=args.parent)
    settings = _load_settings(args)
    legal, copyright = _legal(args, settings, registry)

    scaffolder = ProjectScaffolder(TemplateRenderer())
    path = scaffolder.add_command(command, legal, copyright, args.directory, force=args.force)
    print(f"{command.identifier} created at {path}")
    return 0


def _handle_licenses(registry: LicenseRegistry) -> int:
    width = max(len(key) for key in registry)
    for key, legal in registry.items():
        aliases = ", ".join(alias for alias in legal.possible_matches if alias != key)
        alias_text = f" (aliases: {aliases})" if aliases else ""
        print(f"{key.ljust(width)} - {legal.name}{alias_text}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    registry = build_registry()

    try:
        if args.command == "init":
            return _handle_init(args, registry)
        if args.command in {"add", "command"}:
            return _handle_add(args, registry)
        if args.command == "licenses":
            return _handle_licenses(registry)
    except (CmdForgeError, FileExistsError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
