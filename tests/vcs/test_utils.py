"""Tests for VCS command helpers."""

import sys
from pathlib import Path

import pytest

from polyvcs.vcs.exceptions import VCSOperationError
from polyvcs.vcs.utils import run_command, run_vcs_command


class TestRunCommand:
    """Tests for run_command."""

    def test_success_captures_output(self) -> None:
        """Test stdout is captured on success."""
        result = run_command([sys.executable, "-c", "print('hello')"])

        assert result.success is True
        assert result.exit_code == 0
        assert result.output.strip() == "hello"

    def test_stderr_is_combined(self) -> None:
        """Test stderr ends up in the same output."""
        result = run_command([sys.executable, "-c", "import sys; sys.stderr.write('oops')"])

        assert "oops" in result.output

    def test_failure(self) -> None:
        """Test a non-zero exit is reported."""
        result = run_command([sys.executable, "-c", "import sys; sys.exit(3)"])

        assert result.success is False
        assert result.exit_code == 3

    def test_runs_in_given_directory(self, tmp_path: Path) -> None:
        """Test the command runs in the requested working directory."""
        result = run_command([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)

        assert Path(result.output.strip()).resolve() == tmp_path.resolve()


class TestRunVcsCommand:
    """Tests for run_vcs_command."""

    def test_returns_output(self) -> None:
        """Test output is returned on success."""
        assert run_vcs_command([sys.executable, "-c", "print('42')"]).strip() == "42"

    def test_failure_raises_with_output(self) -> None:
        """Test failures carry the tool's output and exit code."""
        cmd = [sys.executable, "-c", "import sys; print('fatal: nope', file=sys.stderr); sys.exit(2)"]

        with pytest.raises(VCSOperationError, match="exit code 2") as exc_info:
            run_vcs_command(cmd)

        assert "fatal: nope" in exc_info.value.output
        assert exc_info.value.exit_code == 2

    def test_missing_executable_raises(self) -> None:
        """Test an executable that cannot be started is a VCS failure."""
        with pytest.raises(VCSOperationError, match="Unable to run"):
            run_vcs_command(["polyvcs-no-such-binary", "info"])
