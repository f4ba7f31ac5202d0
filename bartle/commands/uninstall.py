"""Command for removing the commit-msg hook."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..errors import HookError
from ..hooks import check_existing, read_hook, write_hook
from .base import HookCommand


class UninstallHookCommand(HookCommand):
    """Command for removing the commit-msg hook.

    This command handles:
    1. Doing nothing when there is no hook
    2. Deleting a hook bartle installed
    3. Moving a foreign hook to ``commit-msg.bak.<timestamp>`` when forced

    Attributes:
        force (bool): Remove a hook bartle does not manage
        backup_path (Optional[Path]): Where a foreign hook was moved
        removed_contents (Optional[str]): The deleted hook, kept for undo
    """

    def __init__(
        self,
        hook_path: Path,
        force: bool = False,
        console: Optional[Console] = None,
    ):
        super().__init__(hook_path, console)
        self.force = force
        self.backup_path: Optional[Path] = None
        self.removed_contents: Optional[str] = None

    def execute(self) -> bool:
        exists, is_ours = check_existing(self.hook_path)
        if not exists:
            return False

        try:
            if is_ours:
                self.removed_contents = read_hook(self.hook_path)
                self.hook_path.unlink()
            elif not self.force:
                raise HookError(
                    f"{self.hook_path} exists and is not managed by bartle "
                    "(use --force to remove)"
                )
            else:
                stamp = datetime.now().strftime("%Y%m%d%H%M%S")
                self.backup_path = self.hook_path.with_name(f"{self.hook_path.name}.bak.{stamp}")
                self.hook_path.rename(self.backup_path)
        except OSError as e:
            raise HookError(f"Cannot remove hook {self.hook_path}: {e}") from e

        for observer in self.observers:
            observer.on_hook_removed(self.hook_path, self.backup_path)

        return True

    def undo(self) -> bool:
        """Restore the removed hook."""
        try:
            if self.backup_path is not None:
                self.backup_path.rename(self.hook_path)
                self.backup_path = None
                return True
            if self.removed_contents is not None:
                write_hook(self.hook_path, self.removed_contents)
                self.removed_contents = None
                return True
        except (OSError, HookError) as e:
            self.console.print(f"[red]Failed to restore hook: {e}[/red]")
            return False

        self.console.print("[yellow]No hook removal to undo[/yellow]")
        return False
