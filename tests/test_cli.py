from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cmdforge.cli import build_parser, main


def _write_config(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_parser_defaults():
    args = build_parser().parse_args(["add", "serve"])
    assert args.parent == "root"
    assert args.license is None
    assert args.force is False


def test_cli_init_creates_application(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "mytool"
    exit_code = main(
        ["--author", "Jane", "--license", "mit", "init", "--directory", str(project_dir)]
    )
    assert exit_code == 0
    assert "Your application is ready at" in capsys.readouterr().out
    assert (project_dir / "commands" / "root.py").is_file()
    license_text = (project_dir / "LICENSE").read_text(encoding="utf-8")
    assert "The MIT License (MIT)" in license_text
    assert "Jane" in license_text
    root = (project_dir / "commands" / "root.py").read_text(encoding="utf-8")
    assert "prog='mytool'" in root


def test_cli_add_creates_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    config = _write_config(tmp_path / "config.toml", 'author = "Jane"\nyear = 2020\n')
    exit_code = main(
        ["--config", str(config), "add", "add-user", "--directory", str(tmp_path)]
    )
    assert exit_code == 0
    path = tmp_path.resolve() / "commands" / "addUser.py"
    assert capsys.readouterr().out == f"addUser created at {path}\n"
    assert path.read_text(encoding="utf-8").startswith("# Copyright © 2020 Jane\n\n")


def test_cli_add_uses_configured_license(tmp_path: Path):
    config = _write_config(tmp_path / "config.toml", 'year = 2020\nlicense = "gpl2"\n')
    main(["--config", str(config), "command", "serve", "-d", str(tmp_path), "-p", "api"])
    source = (tmp_path / "commands" / "serve.py").read_text(encoding="utf-8")
    assert "# as published by the Free Software Foundation; either version 2\n" in source
    assert "PARENT = 'api'" in source


def test_cli_custom_license_from_config(tmp_path: Path):
    config = _write_config(
        tmp_path / "config.toml",
        'year = 2020\nauthor = "Jane"\n[license]\nheader = "All rights reserved."\n',
    )
    main(["--config", str(config), "add", "serve", "-d", str(tmp_path)])
    source = (tmp_path / "commands" / "serve.py").read_text(encoding="utf-8")
    assert source.startswith("# Copyright © 2020 Jane\n#\n# All rights reserved.\n")


def test_cli_unknown_license_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--license", "not-a-real-license", "add", "serve", "-d", str(tmp_path)])
    assert exit_code == 1
    assert capsys.readouterr().err == "Error: unknown license: not-a-real-license\n"
    assert not (tmp_path / "commands").exists()


def test_cli_add_without_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["add", "-d", str(tmp_path)])
    assert exit_code == 1
    assert capsys.readouterr().err == "Error: add needs a name for the command\n"


def test_cli_add_refuses_to_overwrite(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["add", "serve", "-d", str(tmp_path)]) == 0
    assert main(["add", "serve", "-d", str(tmp_path)]) == 1
    assert "already exists" in capsys.readouterr().err
    assert main(["add", "serve", "-d", str(tmp_path), "--force"]) == 0


def test_cli_package_flag_is_deprecated(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="cmdforge.cli"):
        exit_code = main(["add", "serve", "--package", "example.com/app", "-d", str(tmp_path)])
    assert exit_code == 0
    assert "Flag --package has been deprecated" in caplog.text


def test_cli_missing_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--config", str(tmp_path / "nope.toml"), "add", "serve", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_lists_licenses(capsys: pytest.CaptureFixture[str]):
    assert main(["licenses"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9
    assert lines[0].startswith("none")
    assert any(line.startswith("MIT ") and "MIT License" in line for line in lines)


def test_cli_add_root_does_not_replace_root_command(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    assert main(["init", "demo", "-d", str(tmp_path)]) == 0
    root = (tmp_path / "commands" / "root.py").read_text(encoding="utf-8")

    assert main(["add", "root", "-d", str(tmp_path), "--force"]) == 1
    assert capsys.readouterr().err == "Error: invalid command name: root\n"
    assert (tmp_path / "commands" / "root.py").read_text(encoding="utf-8") == root


def test_cli_add_rejects_separator_only_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["add", "-", "-d", str(tmp_path)]) == 1
    assert capsys.readouterr().err == "Error: invalid command name: -\n"
    assert not (tmp_path / "commands").exists()
