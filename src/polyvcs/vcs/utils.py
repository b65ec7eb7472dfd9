"""Helpers for running VCS command-line tools."""

import logging
import subprocess
from pathlib import Path
from typing import NamedTuple

from polyvcs.vcs.exceptions import VCSOperationError

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Result of an external command."""

    success: bool
    output: str
    exit_code: int | None = None


def run_command(cmd: list[str], cwd: Path | None = None) -> CommandResult:
    """Run an external command and capture its combined output.

    Args:
        cmd: The command to execute, as a list of strings.
        cwd: Directory to run the command in (default: current directory).

    Returns:
        A CommandResult with the outcome.

    Raises:
        OSError: If the executable cannot be started
    """
    logger.debug(f"Running {' '.join(cmd)} (cwd={cwd or Path.cwd()})")
    process = subprocess.run(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        cwd=cwd,
        check=False,
    )
    output = process.stdout.decode(errors="replace") if process.stdout else ""

    return CommandResult(
        success=process.returncode == 0,
        output=output,
        exit_code=process.returncode,
    )


def run_vcs_command(cmd: list[str], cwd: Path | None = None) -> str:
    """Run a VCS command and return its output, raising on failure.

    Args:
        cmd: The command to execute, as a list of strings.
        cwd: Directory to run the command in (default: current directory).

    Returns:
        Combined stdout/stderr of the command

    Raises:
        VCSOperationError: If the command exits non-zero or cannot be started
    """
    try:
        result = run_command(cmd, cwd=cwd)
    except OSError as e:
        msg = f"Unable to run {cmd[0]}: {e}"
        raise VCSOperationError(msg) from e

    if not result.success:
        msg = f"{' '.join(cmd[:2])} failed with exit code {result.exit_code}: {result.output.strip()}"
        raise VCSOperationError(msg, output=result.output, exit_code=result.exit_code)

    return result.output
