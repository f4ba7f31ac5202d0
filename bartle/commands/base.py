"""Base command class for hook operations.

This module provides the abstract base class for all hook commands,
implementing the Command Pattern with observer support.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..observers import BartleObserver


class HookCommand(ABC):
    """Abstract base class for commands that change a commit-msg hook.

    Attributes:
        hook_path (Path): The hook file the command operates on
        console (Console): Rich console for output
        observers (List[BartleObserver]): List of observers to notify
    """

    def __init__(self, hook_path: Path, console: Optional[Console] = None):
        """Initialize the command.

        Args:
            hook_path: The hook file to operate on
            console: Optional Rich console for output
        """
        self.hook_path = Path(hook_path)
        self.console = console or Console()
        self.observers: List[BartleObserver] = []

    def add_observer(self, observer: BartleObserver) -> None:
        """Add an observer to be notified of command execution."""
        self.observers.append(observer)

    def remove_observer(self, observer: BartleObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: True if the hook file was changed, False if there was nothing to do

        Raises:
            HookError: If the command refuses to touch the hook or the filesystem fails
        """
        pass

    @abstractmethod
    def undo(self) -> bool:
        """Undo the command.

        Returns:
            bool: True if the command was undone successfully, False otherwise
        """
        pass
