#!/usr/bin/env python3
import shutil
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import click
import pyperclip
from rich.console import Console

from .commands import InstallHookCommand, UninstallHookCommand
from .config import Config
from .errors import BartleError, NotInRepositoryError
from .hooks import find_repo, hook_path, repo_root
from .lint import first_line, validate_message
from .models import Style
from .observers import BartleObserver, ConsoleLogObserver, FileLogObserver
from .version import get_version_info

console = Console()


def strip_git_comments(text: str) -> str:
    """Remove the ``#`` lines git places in COMMIT_EDITMSG."""
    lines = [line for line in text.split("\n") if not line.strip().startswith("#")]
    return "\n".join(lines).strip()


def read_message(message: Optional[str], message_file: Optional[Path]) -> str:
    """Pick the message from -m, then the message file, then piped stdin."""
    text = (message or "").strip()

    if not text and message_file is not None:
        raw = message_file.read_text(encoding="utf-8", errors="replace")
        text = strip_git_comments(raw.strip())

    if not text:
        stdin = sys.stdin
        if not stdin.isatty():
            text = strip_git_comments(stdin.read().strip())

    return text.replace("\r", "")


def load_config(path: Path = Path(".")) -> Config:
    """Load the repository config, or defaults when outside a repository."""
    try:
        repo = find_repo(path)
    except NotInRepositoryError:
        return Config()
    return Config.load(repo_root(repo))


def build_observers(config: Config) -> List[BartleObserver]:
    observers: List[BartleObserver] = [ConsoleLogObserver(console)]
    log_file_path = config.get_log_file()
    if log_file_path:
        observers.append(FileLogObserver(str(log_file_path)))
    return observers


def fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error: {error}[/red]", soft_wrap=True)
    raise click.Abort()


@click.group()
def main():
    """Bartle helps keep your git commits to a standard and can
    offer examples when necessary.

    Configuration is read from .bartle.toml in the repository root.
    """


@main.command()
@click.argument(
    "message_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("-m", "--message", help="Commit message text to lint")
@click.option(
    "--hook",
    is_flag=True,
    help="Running as the commit-msg hook; honours hook.block_on_fail",
)
@click.pass_context
def lint(ctx, message_file: Optional[Path], message: Optional[str], hook: bool):
    """Lint a commit message against .bartle.toml rules.

    Pass a message with -m/--message, a path to a message file
    (e.g. .git/COMMIT_EDITMSG), or pipe a message on stdin.

    \b
      bartle lint -m "feat(ui): add dropdown"
      bartle lint .git/COMMIT_EDITMSG
      echo "fix(api): handle nil pointer" | bartle lint
    """
    text = read_message(message, message_file)
    if not text:
        raise click.UsageError(
            "no commit message provided (use -m, a file path, or pipe on stdin)"
        )

    try:
        config = load_config()
    except BartleError as e:
        fail(e)

    result = validate_message(text, config.rule_config())

    for observer in build_observers(config):
        observer.on_lint_completed(first_line(text), result)

    if result.valid:
        return

    if hook and not config.hook.block_on_fail:
        console.print("[yellow]Commit allowed: hook.block_on_fail is disabled[/yellow]")
        return

    ctx.exit(1)


@main.command()
@click.option(
    "-s",
    "--style",
    default=Style.CONVENTIONAL.value,
    show_default=True,
    type=click.Choice([style.value for style in Style], case_sensitive=False),
    help="Commit message style",
)
@click.option(
    "-f", "--force", is_flag=True, help="Overwrite an existing config file"
)
def init(style: str, force: bool):
    """Create a .bartle.toml in the repository root with sensible defaults."""
    try:
        root = repo_root(find_repo())
        config_path = Config.path_for(root)
        if config_path.exists() and not force:
            raise BartleError(f"{config_path} already exists (use --force to overwrite)")

        config = Config.for_style(style)
        config.save(root)
    except BartleError as e:
        fail(e)

    for observer in build_observers(config):
        observer.on_config_written(config_path)
    console.print("Next: open .bartle.toml in your editor to customize rules.")


@main.command("install-hook")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing hook")
@click.option(
    "-a",
    "--absolute",
    is_flag=True,
    help="Embed the absolute path to the bartle executable in the hook",
)
def install_hook(force: bool, absolute: bool):
    """Install a git commit-msg hook that runs bartle lint."""
    try:
        repo = find_repo()
        config = Config.load(repo_root(repo))

        command = "bartle"
        if absolute:
            command = shutil.which("bartle") or str(Path(sys.argv[0]).resolve())

        install = InstallHookCommand(hook_path(repo), command=command, force=force, console=console)
        for observer in build_observers(config):
            install.add_observer(observer)
        install.execute()
    except BartleError as e:
        fail(e)


@main.command("uninstall-hook")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Remove the hook even if bartle did not install it (a backup is kept)",
)
def uninstall_hook(force: bool):
    """Remove bartle's git commit-msg hook."""
    try:
        repo = find_repo()
        config = Config.load(repo_root(repo))

        uninstall = UninstallHookCommand(hook_path(repo), force=force, console=console)
        for observer in build_observers(config):
            uninstall.add_observer(observer)
        changed = uninstall.execute()
    except BartleError as e:
        fail(e)

    if not changed:
        console.print("[blue]No commit-msg hook to remove.[/blue]")


@main.command("config")
@click.option("--list", "list_settings", is_flag=True, help="Display current configuration settings")
@click.option("--copy-path", is_flag=True, help="Copy the config file location to the clipboard")
def config_command(list_settings: bool, copy_path: bool):
    """Show where the config file lives and what it resolves to."""
    try:
        root = repo_root(find_repo())
        config = Config.load(root)
    except BartleError as e:
        fail(e)

    config_path = Config.path_for(root)
    if config_path.exists():
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]", soft_wrap=True)
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    if copy_path:
        try:
            pyperclip.copy(str(config_path))
            console.print("[green]Path copied to clipboard![/green]")
        except pyperclip.PyperclipException as e:
            console.print(f"[yellow]Warning: could not copy to clipboard: {e}[/yellow]")

    if not list_settings:
        return

    source = "config" if config_path.exists() else "default"
    rules = config.rule_config()

    console.print(f"\n{'Setting':<20} {'Value':<30} {'Source':<10}")
    console.print("-" * 60)

    def print_setting(name: str, value):
        console.print(f"{name:<20} {str(value):<30} {source:<10}", highlight=False, soft_wrap=True)

    print_setting("style", rules.style.value)
    print_setting("scope_required", rules.scope_required)
    print_setting("max_line_length", rules.max_line_length)
    print_setting("lowercase_start", rules.lowercase_start)
    print_setting("types", ", ".join(rules.allowed_types))
    print_setting("block_on_fail", config.hook.block_on_fail)
    print_setting("log_file", config.log_file or "None")


@main.command()
@click.option("-j", "--json", "as_json", is_flag=True, help="Print version information as JSON")
@click.option("-s", "--short", is_flag=True, help="Print only the version number")
def version(as_json: bool, short: bool):
    """Output bartle version information."""
    info = get_version_info()
    if as_json:
        click.echo(info.to_json(short=short))
    elif short:
        click.echo(info.version)
    else:
        click.echo(info.summary())


if __name__ == "__main__":
    main()
