from __future__ import annotations

from pathlib import Path
import tomllib

from cmdforge import __version__
from cmdforge.licenses import BUILTIN_LICENSES

REPO_ROOT = Path(__file__).resolve().parents[2]
README_PATH = REPO_ROOT / "README.md"
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"
LICENSE_DATA = REPO_ROOT / "src" / "cmdforge" / "data" / "licenses"


def load_pyproject() -> dict:
    with PYPROJECT_PATH.open("rb") as handle:
        return tomllib.load(handle)


def test_readme_and_pyproject_descriptions_are_in_sync() -> None:
    pyproject = load_pyproject()
    description = pyproject["project"]["description"]
    readme_text = README_PATH.read_text(encoding="utf-8")

    assert description in readme_text, "README must include the project description from pyproject.toml"


def test_package_version_matches_pyproject() -> None:
    assert load_pyproject()["project"]["version"] == __version__


def test_every_builtin_license_ships_its_data_files() -> None:
    for _, _, _, stem in BUILTIN_LICENSES:
        if stem is None:
            continue
        assert (LICENSE_DATA / f"{stem}.txt").is_file()
        assert (LICENSE_DATA / f"{stem}.header.txt").is_file()
