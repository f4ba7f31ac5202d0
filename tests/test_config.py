"""Tests for configuration functionality."""

from pathlib import Path

import pytest
import tomli

from bartle.config import DEFAULT_CONFIG_FILENAME, Config, HookSettings, RuleSettings
from bartle.errors import ConfigError
from bartle.models import DEFAULT_TYPES, Style


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.style == "conventional"
    assert config.log_file is None
    assert config.rules.scope_required is True
    assert config.rules.max_line_length == 72
    assert config.rules.lowercase_start is False
    assert config.rules.types == list(DEFAULT_TYPES)
    assert config.hook.block_on_fail is True


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config == Config()


def test_config_load_and_save(tmp_path):
    """Test saving and loading configuration."""
    config = Config(
        style="jira",
        log_file="bartle.log",
        rules=RuleSettings(scope_required=False, max_line_length=50, types=["feat"]),
        hook=HookSettings(block_on_fail=False),
    )

    written = config.save(tmp_path)
    assert written == tmp_path / DEFAULT_CONFIG_FILENAME

    loaded_config = Config.load(tmp_path)

    assert loaded_config.style == "jira"
    assert loaded_config.log_file == "bartle.log"
    assert loaded_config.rules.scope_required is False
    assert loaded_config.rules.max_line_length == 50
    assert loaded_config.rules.types == ["feat"]
    assert loaded_config.hook.block_on_fail is False


def test_save_omits_unset_log_file(tmp_path):
    Config().save(tmp_path)
    data = tomli.loads((tmp_path / DEFAULT_CONFIG_FILENAME).read_text())
    assert "log_file" not in data
    assert data["style"] == "conventional"
    assert data["rules"]["types"] == list(DEFAULT_TYPES)


def test_partial_file_keeps_defaults(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('[rules]\nmax_line_length = 100\n')
    config = Config.load(tmp_path)
    assert config.rules.max_line_length == 100
    assert config.rules.scope_required is True
    assert config.style == "conventional"


def test_config_load_with_bom_and_crlf(tmp_path):
    content = 'style = "jira"\r\n[rules]\r\nscope_required = false\r\n'
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_bytes(b"\xef\xbb\xbf" + content.encode())
    config = Config.load(tmp_path)
    assert config.style == "jira"
    assert config.rules.scope_required is False


def test_config_load_invalid_toml(tmp_path):
    """Malformed files are reported instead of silently replaced by defaults."""
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("invalid [ toml")

    with pytest.raises(ConfigError, match="malformed"):
        Config.load(tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        'styel = "jira"\n',
        '[rules]\nmax_len = 10\n',
        '[hook]\nauto_apply = true\n',
        '[rules]\nmax_line_length = "long"\n',
    ],
)
def test_config_load_rejects_unknown_or_bad_fields(tmp_path, content):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(content)

    with pytest.raises(ConfigError, match="invalid"):
        Config.load(tmp_path)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BARTLE_STYLE", "jira")
    monkeypatch.setenv("BARTLE_LOG_FILE", "logs/bartle.log")
    monkeypatch.setenv("BARTLE_MAX_LINE_LENGTH", "50")

    config = Config()
    assert config.style == "jira"
    assert config.get_log_file() == Path("logs/bartle.log")
    assert config.rules.max_line_length == 50


def test_file_values_beat_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("BARTLE_STYLE", "jira")
    monkeypatch.setenv("BARTLE_MAX_LINE_LENGTH", "50")
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        'style = "conventional"\n[rules]\nmax_line_length = 60\n'
    )

    config = Config.load(tmp_path)
    assert config.style == "conventional"
    assert config.rules.max_line_length == 60


def test_get_log_file_disabled():
    assert Config().get_log_file() is None


@pytest.mark.parametrize(
    "style, expected_style, scope_required, types",
    [
        ("conventional", "conventional", True, list(DEFAULT_TYPES)),
        ("custom", "custom", True, list(DEFAULT_TYPES)),
        ("JIRA", "jira", False, []),
    ],
)
def test_for_style(style, expected_style, scope_required, types):
    config = Config.for_style(style)
    assert config.style == expected_style
    assert config.rules.scope_required is scope_required
    assert config.rules.types == types


def test_for_style_ignores_environment(monkeypatch):
    monkeypatch.setenv("BARTLE_LOG_FILE", "x.log")
    monkeypatch.setenv("BARTLE_MAX_LINE_LENGTH", "10")
    config = Config.for_style("conventional")
    assert config.log_file is None
    assert config.rules.max_line_length == 72


def test_rule_config():
    config = Config(
        style="Jira",
        rules=RuleSettings(max_line_length=0, lowercase_start=True, types=["a", "b"]),
    )
    rules = config.rule_config()
    assert rules.style is Style.JIRA
    assert rules.max_line_length == 0
    assert rules.lowercase_start is True
    assert rules.allowed_types == ("a", "b")


@pytest.mark.parametrize("with_file", [False, True])
def test_invalid_max_line_length_environment(tmp_path, monkeypatch, with_file):
    monkeypatch.setenv("BARTLE_MAX_LINE_LENGTH", "abc")
    if with_file:
        (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('style = "jira"\n')

    with pytest.raises(ConfigError, match="BARTLE_MAX_LINE_LENGTH"):
        Config.load(tmp_path)


def test_invalid_environment_ignored_when_file_sets_value(tmp_path, monkeypatch):
    monkeypatch.setenv("BARTLE_MAX_LINE_LENGTH", "abc")
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("[rules]\nmax_line_length = 40\n")

    assert Config.load(tmp_path).rules.max_line_length == 40
