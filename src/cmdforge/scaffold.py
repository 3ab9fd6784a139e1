"""Application and command scaffolding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .config import DEFAULT_PARENT, CommandConfig, ProjectConfig
from .errors import InvalidCommandNameError
from .licenses import License
from .template import TemplateRenderer

__all__ = ["COMMANDS_PACKAGE", "ProjectScaffolder"]

LOGGER = logging.getLogger(__name__)

COMMANDS_PACKAGE = "commands"


MAIN_TEMPLATE = '''{{ notice|comment }}

"""Entry point for {{ name }}."""

from {{ commands_package }}.root import main

if __name__ == "__main__":
    raise SystemExit(main())
'''

PACKAGE_TEMPLATE = '''{{ notice|comment }}

"""Commands of {{ name }}."""
'''

ROOT_TEMPLATE = '''{{ notice|comment }}

"""Root command of {{ name }}.

Every other module in this package describes one command through its ``NAME``
and ``PARENT`` attributes and a ``register`` function. Commands are attached to
the parser of their parent when the parser is built.
"""

from __future__ import annotations

import argparse
import importlib
import pkgutil
from types import ModuleType
from typing import Sequence

NAME = "root"


def _discover() -> list[ModuleType]:
    package = importlib.import_module(__package__)
    modules = []
    for info in pkgutil.iter_modules(package.__path__):
        if info.name == NAME:
            continue
        modules.append(importlib.import_module(f"{__package__}.{info.name}"))
    return modules


def _attach(parser: argparse.ArgumentParser, parent: str, modules: list[ModuleType]) -> None:
    children = [module for module in modules if module.PARENT == parent]
    if not children:
        return
    subparsers = parser.add_subparsers(dest=f"{parent}_command")
    for module in children:
        _attach(module.register(subparsers), module.NAME, modules)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog={{ name|repr }}, description={{ description|repr }})
    _attach(parser, NAME, _discover())
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)
'''

COMMAND_TEMPLATE = '''{{ notice|comment }}

"""The {{ command_name }} command."""

from __future__ import annotations

import argparse

NAME = {{ command_name|repr }}
PARENT = {{ parent|repr }}


def register(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(NAME, help="A brief description of your command")
    parser.set_defaults(handler=run)
    return parser


def run(args: argparse.Namespace) -> int:
    print("{{ command_name }} called")
    return 0
'''


def notice(legal: License, copyright: str) -> str:
    """Return the notice placed at the top of generated source files."""

    header = legal.header.strip("\n")
    if not header:
        return copyright
    return f"{copyright}\n\n{header}"


@dataclass(slots=True)
class ProjectScaffolder:
    """Create applications and add commands to them."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def _context(self, legal: License, copyright: str, *parts: Mapping[str, str]) -> dict[str, Any]:
        context: dict[str, Any] = {
            "copyright": copyright,
            "notice": self.renderer.render_string(notice(legal, copyright), {"copyright": copyright}),
            "commands_package": COMMANDS_PACKAGE,
        }
        for part in parts:
            context.update(part)
        return context

    def _write(
        self,
        target_path: Path,
        files: list[tuple[str, str]],
        context: Mapping[str, Any],
        *,
        force: bool,
    ) -> list[Path]:
        destinations = [target_path / relative_path for relative_path, _ in files]
        if not force:
            for destination in destinations:
                if destination.exists():
                    raise FileExistsError(f"{destination} already exists")

        for destination, (_, template) in zip(destinations, files):
            destination.parent.mkdir(parents=True, exist_ok=True)
            rendered = self.renderer.render_string(template, context)
            destination.write_text(rendered, encoding="utf-8")
            LOGGER.info("wrote %s", destination)
        return destinations

    def create_project(
        self,
        project: ProjectConfig,
        legal: License,
        copyright: str,
        target_dir: str | Path,
        *,
        force: bool = False,
    ) -> Path:
        """Create the application described by ``project`` inside ``target_dir``."""

        target_path = Path(target_dir).expanduser().resolve()
        target_path.mkdir(parents=True, exist_ok=True)
        context = self._context(legal, copyright, project.context())

        files: list[tuple[str, str]] = [
            ("main.py", MAIN_TEMPLATE),
            (f"{COMMANDS_PACKAGE}/__init__.py", PACKAGE_TEMPLATE),
            (f"{COMMANDS_PACKAGE}/root.py", ROOT_TEMPLATE),
        ]
        if legal.text:
            files.append(("LICENSE", legal.text))

        self._write(target_path, files, context, force=force)
        return target_path

    def add_command(
        self,
        command: CommandConfig,
        legal: License,
        copyright: str,
        target_dir: str | Path,
        *,
        force: bool = False,
    ) -> Path:
        """Write the module for ``command`` and return its path.

        The identifier names the module under ``commands/``, so it must be a
        Python identifier other than the root command name.
        """

        if command.identifier == DEFAULT_PARENT or not command.identifier.isidentifier():
            raise InvalidCommandNameError(command.name)

        target_path = Path(target_dir).expanduser().resolve()
        context = self._context(legal, copyright, command.context())
        relative_path = f"{COMMANDS_PACKAGE}/{command.identifier}.py"
        (destination,) = self._write(
            target_path, [(relative_path, COMMAND_TEMPLATE)], context, force=force
        )
        return destination
