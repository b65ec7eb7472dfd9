"""Tests for the Subversion repository handle."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest
from pytest_mock import MockerFixture

from polyvcs.vcs.exceptions import VCSOperationError, WrongRemoteError
from polyvcs.vcs.factory import VCSType
from polyvcs.vcs.svn.repo import SvnRepo

SVN_INFO = """\
Path: .
Working Copy Root Path: /home/user/wc
URL: https://svn.example.com/repo/trunk
Relative URL: ^/trunk
Repository Root: https://svn.example.com/repo
Revision: 42
Node Kind: directory
"""


@pytest.fixture
def run_vcs_command(mocker: MockerFixture) -> MagicMock:
    """Patch command execution for the Subversion backend.

    Args:
        mocker: pytest-mock fixture

    Returns:
        The mock standing in for run_vcs_command
    """
    return mocker.patch("polyvcs.vcs.svn.repo.run_vcs_command", return_value=SVN_INFO)


@pytest.fixture
def working_copy(tmp_path: Path) -> Path:
    """Create a directory carrying a Subversion marker.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the fake working copy
    """
    (tmp_path / ".svn").mkdir()
    return tmp_path


class TestSvnRepoInit:
    """Tests for SvnRepo construction."""

    def test_vcs_type(self, tmp_path: Path) -> None:
        """Test the handle reports Subversion."""
        assert SvnRepo("", tmp_path).vcs_type == VCSType.SVN

    def test_adopts_url(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test the working copy URL is adopted when no remote is given."""
        repo = SvnRepo("", working_copy)

        assert repo.remote == "https://svn.example.com/repo/trunk"
        run_vcs_command.assert_called_once_with(["svn", "info"], cwd=working_copy)

    def test_wrong_remote(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test a working copy of another URL is rejected."""
        with pytest.raises(WrongRemoteError):
            SvnRepo("https://svn.example.com/repo/branches/x", working_copy)

    def test_info_without_url(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test output without a URL line yields no remote."""
        run_vcs_command.return_value = "Path: .\n"

        assert SvnRepo("", working_copy).remote == ""

    def test_custom_executable(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test the configured svn binary is used."""
        SvnRepo("", working_copy, executable="/opt/svn/bin/svn")

        run_vcs_command.assert_called_once_with(["/opt/svn/bin/svn", "info"], cwd=working_copy)


class TestSvnRepoOperations:
    """Tests for command construction."""

    def test_get(self, tmp_path: Path, run_vcs_command: MagicMock) -> None:
        """Test checkout runs from the current directory into the local path."""
        repo = SvnRepo("https://svn.example.com/repo/trunk", tmp_path / "wc")

        repo.get()

        run_vcs_command.assert_called_once_with(
            ["svn", "checkout", "https://svn.example.com/repo/trunk", str(tmp_path / "wc")],
            cwd=None,
        )

    def test_update(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test update runs inside the working copy."""
        repo = SvnRepo("", working_copy)

        repo.update()

        assert run_vcs_command.call_args == call(["svn", "update"], cwd=working_copy)

    def test_update_version(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test the revision is passed through unchanged."""
        repo = SvnRepo("", working_copy)

        repo.update_version("1234")

        assert run_vcs_command.call_args == call(["svn", "update", "-r", "1234"], cwd=working_copy)

    def test_version_is_trimmed(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test the revision number is returned without whitespace."""
        repo = SvnRepo("", working_copy)
        run_vcs_command.return_value = "42\n"

        assert repo.version() == "42"
        assert run_vcs_command.call_args == call(["svn", "info", "--show-item", "revision"], cwd=working_copy)

    def test_failure_is_raised(self, working_copy: Path, run_vcs_command: MagicMock) -> None:
        """Test command failures propagate."""
        repo = SvnRepo("", working_copy)
        run_vcs_command.side_effect = VCSOperationError("svn update failed")

        with pytest.raises(VCSOperationError, match="svn update failed"):
            repo.update()

    def test_no_references(self, tmp_path: Path, run_vcs_command: MagicMock) -> None:
        """Test Subversion exposes no branches or tags."""
        repo = SvnRepo("", tmp_path)

        assert repo.branches() == []
        assert repo.tags() == []
        run_vcs_command.assert_not_called()


@pytest.mark.skipif(
    shutil.which("svn") is None or shutil.which("svnadmin") is None,
    reason="Subversion (svn, svnadmin) is not installed",
)
class TestSvnRepoIntegration:
    """Tests against a real file:// repository."""

    def test_checkout_and_version(self, tmp_path: Path) -> None:
        """Test a checkout of an empty repository is at revision 0."""
        server = tmp_path / "server"
        subprocess.run(["svnadmin", "create", str(server)], check=True)  # noqa: S603, S607
        url = server.as_uri()

        repo = SvnRepo(url, tmp_path / "wc")
        repo.get()

        assert repo.check_local() is True
        assert repo.version() == "0"
        assert SvnRepo("", tmp_path / "wc").remote == url
