"""Configuration helpers shared by the scaffolder and CLI."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError, MissingCommandNameError
from .naming import normalize_command_name

__all__ = ["CommandConfig", "DEFAULT_CONFIG_PATH", "ProjectConfig", "Settings"]

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.cmdforge.toml")

DEFAULT_PARENT = "root"


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


@dataclass(slots=True)
class Settings:
    """User settings addressed by dotted keys such as ``license.header``.

    Nested TOML tables are flattened, so ``[license]`` with a ``header`` entry
    is read back as ``license.header``. The keys understood by cmdforge are
    ``author``, ``year``, ``license``, ``license.header`` and ``license.text``.
    """

    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        return cls(values=_flatten(data))

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Settings":
        """Read settings from the TOML file at ``path``.

        Without ``path`` the file at :data:`DEFAULT_CONFIG_PATH` is read when it
        exists and empty settings are returned otherwise. An explicit ``path``
        that does not exist is an error.
        """

        if path is None:
            config_path = DEFAULT_CONFIG_PATH.expanduser()
            if not config_path.is_file():
                return cls()
        else:
            config_path = Path(path).expanduser()
            if not config_path.is_file():
                raise ConfigError(f"config file {config_path} does not exist")

        try:
            with config_path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid config file {config_path}: {exc}") from exc

        LOGGER.debug("loaded settings from %s", config_path)
        return cls.from_mapping(data)

    def is_set(self, key: str) -> bool:
        return key in self.values

    def get_string(self, key: str, default: str = "") -> str:
        """Return the value of ``key`` as a string, or ``default`` when unset."""

        value = self.values.get(key)
        if value is None:
            return default
        return str(value)

    def with_overrides(self, **overrides: str | None) -> "Settings":
        """Return a copy where every non-empty override replaces the stored value."""

        values = dict(self.values)
        for key, value in overrides.items():
            if value:
                values[key] = value
        return Settings(values=values)


@dataclass(slots=True)
class CommandConfig:
    """Identifiers describing a new sub-command.

    Attributes
    ----------
    name:
        The command name exactly as typed by the user.
    identifier:
        :attr:`name` normalised into a single token. Used for the module file
        name and for the name the command is registered under.
    parent:
        Identifier of the command the new command is attached to. Normalised
        like :attr:`name` so it matches the parent's ``NAME``, otherwise passed
        through to the generated module without validation.
    """

    name: str
    identifier: str
    parent: str = DEFAULT_PARENT

    @classmethod
    def from_name(cls, name: str | None, *, parent: str | None = None) -> "CommandConfig":
        if not name:
            raise MissingCommandNameError()

        return cls(
            name=name,
            identifier=normalize_command_name(name),
            parent=normalize_command_name(parent or DEFAULT_PARENT),
        )

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "command_name": self.identifier,
            "parent": self.parent,
        }


@dataclass(slots=True)
class ProjectConfig:
    """Derived identifiers describing a new application."""

    name: str
    description: str = ""

    @classmethod
    def from_name(cls, name: str, *, description: str = "") -> "ProjectConfig":
        normalized_name = " ".join(name.split())
        if not normalized_name:
            raise ValueError("project name must not be empty")

        summary = description.strip() or "A brief description of your application"
        return cls(name=normalized_name, description=summary)

    def context(self) -> Mapping[str, str]:
        return {
            "name": self.name,
            "description": self.description,
        }
