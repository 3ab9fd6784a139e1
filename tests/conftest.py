from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cmdforge.licenses import LicenseRegistry, build_registry  # noqa: E402


@pytest.fixture(scope="session")
def registry() -> LicenseRegistry:
    """The built-in license registry, built once for the whole run."""

    return build_registry()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep a real ``~/.cmdforge.toml`` from leaking into the tests."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
