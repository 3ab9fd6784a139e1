"""Scaffolding for argparse based command line applications.

The package turns command names such as ``add-user`` into identifiers
(``addUser``), picks the license stamped onto generated files from the command
line, the configuration file or a default, and writes application skeletons and
command modules. Everything is available both programmatically and through the
``cmdforge`` command line interface.
"""

from __future__ import annotations

from .config import CommandConfig, ProjectConfig, Settings
from .errors import (
    CmdForgeError,
    ConfigError,
    InvalidCommandNameError,
    MissingCommandNameError,
    UnknownLicenseError,
)
from .licenses import (
    License,
    LicenseRegistry,
    build_registry,
    copyright_line,
    resolve_from_settings,
    resolve_license,
)
from .naming import normalize_command_name
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CmdForgeError",
    "CommandConfig",
    "ConfigError",
    "InvalidCommandNameError",
    "License",
    "LicenseRegistry",
    "MissingCommandNameError",
    "ProjectConfig",
    "ProjectScaffolder",
    "Settings",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnknownLicenseError",
    "build_registry",
    "copyright_line",
    "normalize_command_name",
    "resolve_from_settings",
    "resolve_license",
]

__version__ = "0.1.0"
