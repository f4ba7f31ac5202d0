"""Hook operations using the Command Pattern.

Example:
    ```python
    from bartle.commands import InstallHookCommand
    from bartle.hooks import find_repo, hook_path
    from bartle.observers import FileLogObserver

    command = InstallHookCommand(hook_path(find_repo(".")))
    command.add_observer(FileLogObserver("bartle.log"))
    command.execute()

    # Put the previous hook back
    command.undo()
    ```
"""

from .base import HookCommand
from .install import InstallHookCommand
from .uninstall import UninstallHookCommand

__all__ = [
    "HookCommand",
    "InstallHookCommand",
    "UninstallHookCommand",
]
