"""Configuration management for bartle."""
import os
from pathlib import Path
from typing import List, Optional

import tomli
import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .models import DEFAULT_TYPES, RuleConfig, Style

DEFAULT_CONFIG_FILENAME = ".bartle.toml"

UTF8_BOM = b"\xef\xbb\xbf"


class RuleSettings(BaseModel):
    """The ``[rules]`` table."""

    model_config = ConfigDict(extra="forbid")

    scope_required: bool = Field(
        default=True,
        description="Require a scope, e.g. feat(ui): ...",
    )
    max_line_length: int = Field(
        default=72,
        description="Maximum length of the first line (0 disables the check)",
    )
    lowercase_start: bool = Field(
        default=False,
        description="Require the subject to start with a lowercase letter",
    )
    types: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TYPES),
        description="Allowed conventional commit types",
    )


class HookSettings(BaseModel):
    """The ``[hook]`` table."""

    model_config = ConfigDict(extra="forbid")

    block_on_fail: bool = Field(
        default=True,
        description="Whether the commit-msg hook rejects commits that fail linting",
    )


class Config(BaseModel):
    """Configuration settings for bartle.

    Values come from ``.bartle.toml`` in the repository root, with
    ``BARTLE_*`` environment variables filling in anything the file
    or the caller does not set.
    """

    model_config = ConfigDict(extra="forbid")

    style: str = Field(
        default=Style.CONVENTIONAL.value,
        description="Commit message style (conventional, jira or custom)",
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Append a log of bartle operations to this file",
    )

    rules: RuleSettings = Field(default_factory=RuleSettings)

    hook: HookSettings = Field(default_factory=HookSettings)

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        if "BARTLE_STYLE" in os.environ:
            env_data["style"] = os.environ["BARTLE_STYLE"].strip()
        if "BARTLE_LOG_FILE" in os.environ:
            env_data["log_file"] = os.environ["BARTLE_LOG_FILE"].strip() or None

        merged_data = {**env_data, **data}

        if "BARTLE_MAX_LINE_LENGTH" in os.environ:
            rules = merged_data.get("rules") or {}
            if isinstance(rules, RuleSettings):
                rules = rules.model_dump()
            rules = dict(rules)
            if "max_line_length" not in rules:
                raw_length = os.environ["BARTLE_MAX_LINE_LENGTH"].strip()
                try:
                    rules["max_line_length"] = int(raw_length)
                except ValueError as e:
                    raise ConfigError(
                        f"BARTLE_MAX_LINE_LENGTH must be an integer, got {raw_length!r}"
                    ) from e
            merged_data["rules"] = rules

        super().__init__(**merged_data)

    @classmethod
    def path_for(cls, repo_path: Path) -> Path:
        return Path(repo_path) / DEFAULT_CONFIG_FILENAME

    @classmethod
    def load(cls, repo_path: Path) -> "Config":
        """Load configuration from the config file.

        Args:
            repo_path: Path to the repository work tree

        Returns:
            Config: Configuration object with values from file or defaults

        Raises:
            ConfigError: If the file exists but cannot be read or is invalid
        """
        config_path = cls.path_for(repo_path)

        if not config_path.exists():
            return cls()

        try:
            raw = config_path.read_bytes()
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        if raw.startswith(UTF8_BOM):
            raw = raw[len(UTF8_BOM):]

        try:
            config_data = tomli.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise ConfigError(f"{config_path} is malformed: {e}") from e

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigError(f"{config_path} is invalid: {e}") from e

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the repository work tree

        Returns:
            Path: The file that was written
        """
        config_path = self.path_for(repo_path)

        # TOML has no null, so unset values are left out
        config_dict = self.model_dump(exclude_none=True)

        with config_path.open("wb") as f:
            tomli_w.dump(config_dict, f)
        return config_path

    @classmethod
    def for_style(cls, style: str) -> "Config":
        """Defaults written by ``bartle init`` for the given style."""
        resolved = Style.parse(style)
        rules = RuleSettings()
        if resolved is Style.JIRA:
            rules = RuleSettings(scope_required=False, types=[])
        return cls(style=resolved.value, log_file=None, rules=rules)

    def rule_config(self) -> RuleConfig:
        """Resolve the settings the linter consumes."""
        return RuleConfig(
            style=self.style,
            scope_required=self.rules.scope_required,
            max_line_length=self.rules.max_line_length,
            lowercase_start=self.rules.lowercase_start,
            allowed_types=self.rules.types,
        )

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file, or None if logging to a file is disabled."""
        if self.log_file:
            return Path(self.log_file)
        return None
