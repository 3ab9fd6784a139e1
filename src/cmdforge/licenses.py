"""Built-in software licenses and the rules for choosing one.

A project picks its license from, in order of precedence:

1. the ``--license`` flag,
2. a custom ``license.header`` / ``license.text`` pair from the configuration,
3. the ``license`` name from the configuration,
4. no license at all.

Names given by the user are matched case-insensitively against the aliases of
every built-in license, so ``MIT``, ``mit`` and ``Mit`` all select the same
entry. An unmatched name raises :class:`~cmdforge.errors.UnknownLicenseError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from importlib import resources

from .config import Settings
from .errors import UnknownLicenseError

__all__ = [
    "BUILTIN_LICENSES",
    "License",
    "LicenseRegistry",
    "NONE_KEY",
    "build_registry",
    "copyright_line",
    "resolve_from_settings",
    "resolve_license",
]

LOGGER = logging.getLogger(__name__)

NONE_KEY = "none"

LICENSES_ROOT = resources.files(__package__) / "data" / "licenses"


@dataclass(frozen=True, slots=True)
class License:
    """A software license agreement.

    Attributes
    ----------
    name:
        Human readable name of the license.
    possible_matches:
        Aliases a user may type to select the license. Matching ignores case.
    header:
        Notice placed at the top of every generated source file.
    text:
        Full license text written to the project's ``LICENSE`` file.
    """

    name: str
    possible_matches: tuple[str, ...]
    header: str = ""
    text: str = ""


class LicenseRegistry(Mapping[str, License]):
    """Read-only catalog of licenses keyed by their canonical name.

    Entries are registered while the registry is constructed; afterwards the
    registry cannot be modified. Alias sets must be disjoint across entries.
    """

    def __init__(self, entries: Iterable[tuple[str, License]] = ()) -> None:
        self._licenses: dict[str, License] = {}
        self._aliases: dict[str, str] = {}
        for key, license_ in entries:
            self._register(key, license_)

    def _register(self, key: str, license_: License) -> None:
        if key in self._licenses:
            raise ValueError(f"license '{key}' is already registered")
        if not license_.possible_matches:
            raise ValueError(f"license '{key}' has no aliases")

        claimed: dict[str, str] = {}
        for alias in license_.possible_matches:
            folded = alias.casefold()
            owner = self._aliases.get(folded)
            if owner is not None:
                raise ValueError(
                    f"alias '{alias}' of license '{key}' is already used by '{owner}'"
                )
            claimed[folded] = key

        self._licenses[key] = license_
        self._aliases.update(claimed)

    def __getitem__(self, key: str) -> License:
        return self._licenses[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._licenses)

    def __len__(self) -> int:
        return len(self._licenses)

    def lookup(self, key: str) -> License | None:
        """Return the license registered under ``key``, if any."""

        return self._licenses.get(key)

    def match(self, name: str) -> str | None:
        """Return the key of the license with an alias equal to ``name``.

        Returns ``None`` for an empty ``name`` or when no alias matches.
        """

        if not name:
            return None
        return self._aliases.get(name.casefold())

    def find(self, name: str) -> License:
        """Return the license selected by ``name`` or raise ``UnknownLicenseError``."""

        key = self.match(name)
        if key is None:
            raise UnknownLicenseError(name)
        return self._licenses[key]


# key, display name, aliases, data file stem
BUILTIN_LICENSES: tuple[tuple[str, str, tuple[str, ...], str | None], ...] = (
    (NONE_KEY, "None", ("none", "false"), None),
    (
        "Apache-2.0",
        "Apache 2.0",
        ("Apache-2.0", "apache", "apache20", "apache 2.0", "apache2.0"),
        "apache-2.0",
    ),
    ("MIT", "MIT License", ("MIT",), "mit"),
    (
        "BSD-2-Clause",
        "Simplified BSD License",
        ("BSD-2-Clause", "freebsd", "bsd2", "simplified bsd"),
        "bsd-2-clause",
    ),
    (
        "BSD-3-Clause",
        "NewBSD",
        ("BSD-3-Clause", "bsd", "bsd3", "newbsd", "new bsd"),
        "bsd-3-clause",
    ),
    (
        "GPL-2.0",
        "GNU General Public License 2.0",
        ("GPL-2.0", "gpl2", "gnu gpl2", "gplv2"),
        "gpl-2.0",
    ),
    (
        "GPL-3.0",
        "GNU General Public License 3.0",
        ("GPL-3.0", "gpl3", "gplv3", "gpl", "gnu gpl3", "gnu gpl"),
        "gpl-3.0",
    ),
    (
        "LGPL",
        "GNU Lesser General Public License",
        ("LGPL", "lgpl3", "lesser gpl", "gnu lgpl"),
        "lgpl-3.0",
    ),
    (
        "AGPL",
        "GNU Affero General Public License",
        ("AGPL", "agpl3", "affero gpl", "gnu agpl"),
        "agpl-3.0",
    ),
)


def _read(filename: str) -> str:
    return (LICENSES_ROOT / filename).read_text(encoding="utf-8")


def build_registry() -> LicenseRegistry:
    """Build the registry of built-in licenses.

    Call once at start-up and pass the result to :func:`resolve_license`.
    """

    entries = []
    for key, name, aliases, stem in BUILTIN_LICENSES:
        if stem is None:
            entries.append((key, License(name, aliases)))
            continue
        header = _read(f"{stem}.header.txt")
        text = _read(f"{stem}.txt")
        entries.append((key, License(name, aliases, header=header, text=text)))
    return LicenseRegistry(entries)


def resolve_license(
    registry: LicenseRegistry,
    explicit: str | None = None,
    custom_header: str | None = None,
    custom_text: str | None = None,
    configured: str | None = None,
) -> License:
    """Pick the license for a project.

    Parameters
    ----------
    registry:
        The licenses to choose from.
    explicit:
        Name given on the command line. Always wins when non-empty.
    custom_header, custom_text:
        User supplied notice and text. When either is non-empty a license built
        from them is returned without consulting ``registry``.
    configured:
        Default license name from the configuration file.

    Raises
    ------
    UnknownLicenseError
        If ``explicit`` or ``configured`` is used and matches no alias.
    """

    if explicit:
        LOGGER.debug("using license '%s' given on the command line", explicit)
        return registry.find(explicit)

    if custom_header or custom_text:
        LOGGER.debug("using custom license header and text from the configuration")
        return License(
            name="",
            possible_matches=(),
            header=custom_header or "",
            text=custom_text or "",
        )

    if configured:
        LOGGER.debug("using license '%s' from the configuration", configured)
        return registry.find(configured)

    LOGGER.debug("no license selected")
    return registry[NONE_KEY]


def resolve_from_settings(
    registry: LicenseRegistry, settings: Settings, explicit: str | None = None
) -> License:
    """Resolve the license using the ``license*`` keys of ``settings``.

    A ``license`` key that is set but empty names no license and raises
    :class:`UnknownLicenseError` when it is consulted.
    """

    def optional(key: str) -> str | None:
        return settings.get_string(key) if settings.is_set(key) else None

    custom_header = optional("license.header")
    custom_text = optional("license.text")
    configured = optional("license")
    if configured == "" and not (explicit or custom_header or custom_text):
        raise UnknownLicenseError(configured)

    return resolve_license(
        registry,
        explicit=explicit,
        custom_header=custom_header,
        custom_text=custom_text,
        configured=configured,
    )


def copyright_line(author: str = "", year: str | int | None = None) -> str:
    """Return the copyright line stamped on generated files.

    ``year`` defaults to the current year; pass it explicitly for reproducible
    output.
    """

    if year is None or year == "":
        year = datetime.now().year
    return f"Copyright © {year} {author}"
