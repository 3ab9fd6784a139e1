"""Command name normalisation.

Command names typed on the command line often use ``-`` or ``_`` to separate
words (``add-user``, ``list_all``). Generated modules and parsers need a single
token instead, so separators are removed and the letter following each run of
separators is uppercased: ``add-user`` becomes ``addUser``.

Only single-byte ASCII input is supported. The behaviour for other characters
is whatever :meth:`str.upper` does with them.
"""

from __future__ import annotations

import re

__all__ = ["SEPARATORS", "has_separator", "normalize_command_name"]


SEPARATORS = frozenset("-_")

_SEPARATOR_RUNS = re.compile(r"[-_]+")


def has_separator(value: str) -> bool:
    """Return ``True`` when ``value`` contains a dash or an underscore."""

    return any(char in SEPARATORS for char in value)


def _upper_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def normalize_command_name(source: str) -> str:
    """Return ``source`` as a single identifier token.

    Text before the first separator is kept verbatim. Every later segment has
    its first character uppercased, so ``"foo_bar-baz"`` becomes
    ``"fooBarBaz"``. Runs of separators collapse into one boundary
    (``"foo--bar"`` -> ``"fooBar"``), a trailing separator is dropped
    (``"foo-"`` -> ``"foo"``) and a leading one uppercases the first letter
    (``"-foo"`` -> ``"Foo"``).

    A name made up only of separators has nothing to keep and is returned
    unchanged.
    """

    if not has_separator(source):
        return source

    head, *rest = _SEPARATOR_RUNS.split(source)
    output = head + "".join(_upper_first(segment) for segment in rest)

    if not output:
        return source
    return output
