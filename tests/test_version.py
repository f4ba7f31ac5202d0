"""Tests for version reporting."""
import json

import pytest

from bartle import __version__
from bartle.cli import main
from bartle.version import VersionInfo, get_current_version, get_version_info


@pytest.fixture
def stub_version(monkeypatch):
    info = VersionInfo(version="v0.0.0-dev", commit="HEAD", date="unknown", built_by="local")
    monkeypatch.setattr("bartle.cli.get_version_info", lambda: info)
    return info


def test_current_version():
    assert get_current_version() == f"v{__version__}"
    assert get_version_info().version == f"v{__version__}"


def test_json_uses_camel_case():
    info = VersionInfo(version="v1.2.3", commit="abc123", date="2025-08-22", built_by="ci")
    assert json.loads(info.to_json()) == {
        "version": "v1.2.3",
        "commit": "abc123",
        "date": "2025-08-22",
        "builtBy": "ci",
    }
    assert json.loads(info.to_json(short=True)) == {"version": "v1.2.3"}


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], "bartle v0.0.0-dev (commit HEAD, built unknown, by local)\n"),
        (["-s"], "v0.0.0-dev\n"),
        (["--short"], "v0.0.0-dev\n"),
        (["-j"], '{"version":"v0.0.0-dev","commit":"HEAD","date":"unknown","builtBy":"local"}\n'),
        (["--json"], '{"version":"v0.0.0-dev","commit":"HEAD","date":"unknown","builtBy":"local"}\n'),
        (["-js"], '{"version":"v0.0.0-dev"}\n'),
        (["-j", "-s"], '{"version":"v0.0.0-dev"}\n'),
        (["-s", "-j"], '{"version":"v0.0.0-dev"}\n'),
        (["--json", "--short"], '{"version":"v0.0.0-dev"}\n'),
    ],
)
def test_version_command_variants(cli_runner, stub_version, args, expected):
    result = cli_runner.invoke(main, ["version", *args])
    assert result.exit_code == 0
    assert result.output == expected
