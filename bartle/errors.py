"""Exceptions raised by bartle's collaborators (config, hooks, repository lookup).

Linting itself never raises for bad message content; those problems are
reported as findings.
"""


class BartleError(Exception):
    """Base class for bartle errors."""


class ConfigError(BartleError):
    """The configuration file could not be read or is invalid."""


class NotInRepositoryError(BartleError):
    """No git repository was found at or above the given path."""

    def __init__(self, path=None):
        message = "not inside a git repository (run `git init` first)"
        if path is not None:
            message = f"{path} is {message}"
        super().__init__(message)


class HookError(BartleError):
    """A commit-msg hook could not be installed or removed."""
