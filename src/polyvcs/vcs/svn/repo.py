"""Subversion repository handle."""

import logging
import re
from pathlib import Path

from polyvcs.vcs.base import Repo
from polyvcs.vcs.factory import VCSType
from polyvcs.vcs.utils import run_vcs_command

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"^URL: (.+)$", re.MULTILINE)


class SvnRepo(Repo):
    """Repository handle backed by the svn executable.

    Subversion has no first-class branches or tags (they are directory
    conventions), so both listings are empty.
    """

    vcs_type = VCSType.SVN

    def __init__(self, remote: str, local: str | Path, executable: str = "svn") -> None:
        """Initialize Subversion handle.

        Args:
            remote: Repository URL (may be empty)
            local: Path of the working copy
            executable: svn binary to run

        Raises:
            WrongVCSError: If local is a checkout of another VCS
            WrongRemoteError: If the working copy points at a different URL
        """
        self.executable = executable
        super().__init__(remote, local)

    def _run_svn(self, *args: str, from_dir: bool = True) -> str:
        return run_vcs_command([self.executable, *args], cwd=self.local_path if from_dir else None)

    def _configured_remote(self) -> str:
        match = _URL_PATTERN.search(self._run_svn("info"))
        return match.group(1).strip() if match else ""

    def get(self) -> None:
        logger.info(f"Checking out {self.remote} into {self.local_path}")
        self._run_svn("checkout", self.remote, str(self.local_path), from_dir=False)

    def update(self) -> None:
        logger.info(f"Updating {self.local_path}")
        self._run_svn("update")

    def update_version(self, version: str) -> None:
        self._run_svn("update", "-r", version)

    def version(self) -> str:
        return self._run_svn("info", "--show-item", "revision").strip()

    def branches(self) -> list[str]:
        return []

    def tags(self) -> list[str]:
        return []
