"""Observer pattern for bartle operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import ValidationResult


class BartleObserver(ABC):
    """Abstract base class for bartle operation observers."""

    @abstractmethod
    def on_lint_completed(self, first_line: str, result: ValidationResult) -> None:
        """Called when a commit message has been linted."""
        pass

    @abstractmethod
    def on_hook_installed(self, hook_path: Path) -> None:
        """Called when the commit-msg hook is written."""
        pass

    @abstractmethod
    def on_hook_removed(self, hook_path: Path, backup_path: Optional[Path]) -> None:
        """Called when the commit-msg hook is removed or backed up."""
        pass

    @abstractmethod
    def on_config_written(self, config_path: Path) -> None:
        """Called when a config file is written."""
        pass


class ConsoleLogObserver(BartleObserver):
    """Observer that reports bartle operations on the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_lint_completed(self, first_line: str, result: ValidationResult) -> None:
        if result.valid:
            self.console.print("[green]✅ Commit message is valid![/green]")
            return
        self.console.print("[red]❌ Invalid commit message:[/red]")
        for error in result.errors:
            self.console.print(escape(error), highlight=False, emoji=False, soft_wrap=True)

    def on_hook_installed(self, hook_path: Path) -> None:
        self.console.print(f"[green]✅ Installed bartle commit-msg hook at {hook_path}[/green]", soft_wrap=True)
        self.console.print("Commits will now be linted automatically.")

    def on_hook_removed(self, hook_path: Path, backup_path: Optional[Path]) -> None:
        if backup_path:
            self.console.print(f"[green]✅ Removed hook. Backup saved at {backup_path}[/green]", soft_wrap=True)
        else:
            self.console.print("[green]✅ Removed bartle commit-msg hook.[/green]")

    def on_config_written(self, config_path: Path) -> None:
        self.console.print(f"[green]✅ Wrote {config_path}[/green]", soft_wrap=True)
        self.console.print("Tip: run `bartle install-hook` to enforce commit checks locally.")


class FileLogObserver(BartleObserver):
    """Observer that logs bartle operations to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_lint_completed(self, first_line: str, result: ValidationResult) -> None:
        if result.valid:
            self._log(f"Lint passed: {first_line}")
        else:
            self._log(f"Lint failed ({len(result.errors)} errors): {first_line}")

    def on_hook_installed(self, hook_path: Path) -> None:
        self._log(f"Installed commit-msg hook at {hook_path}")

    def on_hook_removed(self, hook_path: Path, backup_path: Optional[Path]) -> None:
        if backup_path:
            self._log(f"Moved commit-msg hook {hook_path} to {backup_path}")
        else:
            self._log(f"Removed commit-msg hook {hook_path}")

    def on_config_written(self, config_path: Path) -> None:
        self._log(f"Wrote config {config_path}")
