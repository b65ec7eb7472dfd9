"""Command-line interface for polyvcs."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from polyvcs import __version__
from polyvcs.config import ConfigurationError, PolyVCSConfig
from polyvcs.vcs import Repo, VCSError, VCSFactory, VCSType

app = typer.Typer(
    name="polyvcs",
    help="Work with Git, Mercurial, Subversion and Bazaar checkouts through one interface",
    add_completion=False,
)
console = Console()

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"
ENV_FILE_HELP = "Path to custom environment file (default: .env.polyvcs or .env)"
REMOTE_HELP = "Remote repository location (default: the one configured in the checkout)"
VCS_OVERRIDE_HELP = "VCS to use (default: auto-detect)"
LOCAL_PATH_HELP = "Path of the local checkout"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # GitPython logs every command it runs at DEBUG
    if not verbose:
        logging.getLogger("git").setLevel(logging.WARNING)


def open_repo(
    local: Path,
    remote: str | None,
    vcs: VCSType | None,
    env_file: str | None,
) -> Repo:
    """Load configuration and build the repository handle for a command.

    Args:
        local: Path of the local checkout
        remote: Remote location, or None to use the configured one
        vcs: VCS override, or None to auto-detect
        env_file: Optional custom env file

    Returns:
        Repository handle

    Raises:
        ConfigurationError: If configuration is invalid
        VCSError: If the handle cannot be created
    """
    config = PolyVCSConfig(env_file=env_file)
    return VCSFactory.create_repo(remote or "", local, vcs_type=vcs, config=config)


def _fail(error: Exception, verbose: bool) -> NoReturn:
    if isinstance(error, ConfigurationError):
        console.print(f"[red]Configuration error: {error}[/red]")
    else:
        console.print(f"[red]Error: {error}[/red]")
        if verbose:
            console.print_exception()
    sys.exit(1)


def _print_references(kind: str, names: list[str]) -> None:
    if not names:
        console.print(f"[yellow]No {kind} found[/yellow]")
        return
    for name in names:
        console.print(name, highlight=False)


@app.command()
def detect(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    remote: str | None = typer.Option(None, "--remote", "-r", help="Remote URL to inspect as a fallback"),
) -> None:
    """Detect which VCS manages a checkout (or, failing that, a remote URL)."""
    try:
        vcs_type = VCSFactory.detect_vcs(local)
    except VCSError as e:
        if not remote:
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        try:
            vcs_type = VCSFactory.detect_vcs_from_remote(remote)
        except VCSError as remote_error:
            console.print(f"[red]Error: {remote_error}[/red]")
            sys.exit(1)

    console.print(f"{vcs_type.value} ({vcs_type.display_name})", highlight=False)


@app.command()
def get(
    remote: str = typer.Argument(..., help="Remote repository location"),
    local: Path = typer.Argument(..., help="Destination path"),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Clone a remote repository into a local path."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, remote, vcs, env_file)
        repo.get()
        console.print(f"[green]Cloned {repo.remote} into {repo.local_path}[/green]")
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def update(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    remote: str | None = typer.Option(None, "--remote", "-r", help=REMOTE_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Update an existing checkout from its remote."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, remote, vcs, env_file)
        repo.update()
        console.print(f"[green]Updated {repo.local_path}[/green]")
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def checkout(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    version: str = typer.Argument(..., help="Tag, branch or revision to check out"),
    remote: str | None = typer.Option(None, "--remote", "-r", help=REMOTE_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Check out a specific version of an existing checkout."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, remote, vcs, env_file)
        repo.update_version(version)
        console.print(f"[green]Checked out {version} in {repo.local_path}[/green]")
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def current(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Print the revision currently checked out."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, None, vcs, env_file)
        console.print(repo.version(), highlight=False)
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def branches(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """List the branches of a checkout."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, None, vcs, env_file)
        _print_references("branches", repo.branches())
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def tags(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """List the tags of a checkout."""
    setup_logging(verbose)

    try:
        repo = open_repo(local, None, vcs, env_file)
        _print_references("tags", repo.tags())
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)


@app.command()
def info(
    local: Path = typer.Argument(..., help=LOCAL_PATH_HELP),
    remote: str | None = typer.Option(None, "--remote", "-r", help=REMOTE_HELP),
    vcs: VCSType | None = typer.Option(None, "--vcs", help=VCS_OVERRIDE_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Show VCS, remote and current revision of a checkout."""
    setup_logging(verbose)

    try:
        repo_info = open_repo(local, remote, vcs, env_file).info()
    except (ConfigurationError, VCSError) as e:
        _fail(e, verbose)

    console.print("[bold]Repository:[/bold]\n")
    console.print(f"  VCS: {repo_info.vcs_type.display_name}")
    console.print(f"  Local path: {repo_info.local_path}")
    console.print(f"  Remote: {repo_info.remote or '(none)'}")
    if repo_info.has_checkout:
        console.print(f"  Version: {repo_info.version}")
    else:
        console.print("  Version: [yellow]no checkout yet[/yellow]")


@app.command()
def config(
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
) -> None:
    """Show current configuration."""
    try:
        cfg = PolyVCSConfig(env_file=env_file)
        found = env_file or PolyVCSConfig.find_env_file()
        console.print("[bold]Current Configuration:[/bold]\n")
        console.print(f"  Env file: {found or '(none)'}")
        console.print(f"  Remote name: {cfg.remote_name}")
        if cfg.default_vcs:
            console.print(f"  Default VCS: {cfg.default_vcs.display_name}")
        else:
            console.print("  Default VCS: Auto-detect")
        console.print(f"  svn executable: {cfg.svn_executable}")
        console.print(f"  bzr executable: {cfg.bzr_executable}")
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"polyvcs version {__version__}")


if __name__ == "__main__":
    app()
