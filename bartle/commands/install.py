"""Command for installing the commit-msg hook."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..errors import HookError
from ..hooks import check_existing, hook_script, read_hook, write_hook
from .base import HookCommand


class InstallHookCommand(HookCommand):
    """Command for writing bartle's commit-msg hook.

    An existing hook written by another tool is only replaced when
    ``force`` is set; its contents are kept so ``undo`` can restore it.

    Attributes:
        command (str): How the hook invokes bartle (a name on PATH or an absolute path)
        force (bool): Overwrite a hook bartle does not manage
        previous_contents (Optional[str]): The hook that was replaced, if any
    """

    def __init__(
        self,
        hook_path: Path,
        command: str = "bartle",
        force: bool = False,
        console: Optional[Console] = None,
    ):
        super().__init__(hook_path, console)
        self.command = command
        self.force = force
        self.previous_contents: Optional[str] = None
        self.installed = False

    def execute(self) -> bool:
        exists, is_ours = check_existing(self.hook_path)
        if exists and not is_ours and not self.force:
            raise HookError(
                f"{self.hook_path} already exists and is not managed by bartle "
                "(use --force to overwrite)"
            )

        self.previous_contents = read_hook(self.hook_path) if exists else None
        write_hook(self.hook_path, hook_script(self.command))
        self.installed = True

        for observer in self.observers:
            observer.on_hook_installed(self.hook_path)

        return True

    def undo(self) -> bool:
        """Put back whatever was at the hook path before ``execute``."""
        if not self.installed:
            self.console.print("[yellow]No hook installation to undo[/yellow]")
            return False

        try:
            if self.previous_contents is None:
                self.hook_path.unlink(missing_ok=True)
            else:
                write_hook(self.hook_path, self.previous_contents)
        except (OSError, HookError) as e:
            self.console.print(f"[red]Failed to undo hook installation: {e}[/red]")
            return False

        self.installed = False
        return True
