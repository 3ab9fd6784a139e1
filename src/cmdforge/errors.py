"""Exception types raised by cmdforge."""

from __future__ import annotations

__all__ = [
    "CmdForgeError",
    "ConfigError",
    "InvalidCommandNameError",
    "MissingCommandNameError",
    "UnknownLicenseError",
]


class CmdForgeError(RuntimeError):
    """Base class for errors reported to the user by the command line."""


class UnknownLicenseError(CmdForgeError):
    """Raised when a license name matches none of the registered aliases."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown license: {name}")
        self.name = name


class MissingCommandNameError(CmdForgeError):
    """Raised when ``add`` is invoked without a command name."""

    def __init__(self) -> None:
        super().__init__("add needs a name for the command")


class InvalidCommandNameError(CmdForgeError):
    """Raised when a command name cannot become a module of the generated app."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid command name: {name}")
        self.name = name


class ConfigError(CmdForgeError):
    """Raised when the configuration file cannot be read or parsed."""
