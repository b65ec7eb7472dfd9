"""Bazaar repository handle."""

import logging
import re
from pathlib import Path

from polyvcs.vcs.base import Repo
from polyvcs.vcs.factory import VCSType
from polyvcs.vcs.refs import LEADING_NAME_PATTERN, reference_list
from polyvcs.vcs.utils import run_vcs_command

logger = logging.getLogger(__name__)

_PARENT_PATTERN = re.compile(r"parent branch: (.+)$", re.MULTILINE)


class BazaarRepo(Repo):
    """Repository handle backed by the bzr executable (or Breezy's brz).

    Bazaar branches live in separate directories, so branch listing is empty.
    """

    vcs_type = VCSType.BAZAAR

    def __init__(self, remote: str, local: str | Path, executable: str = "bzr") -> None:
        """Initialize Bazaar handle.

        Args:
            remote: Parent branch location (may be empty)
            local: Path of the local branch
            executable: bzr (or brz) binary to run

        Raises:
            WrongVCSError: If local is a checkout of another VCS
            WrongRemoteError: If the branch has a different parent
        """
        self.executable = executable
        super().__init__(remote, local)

    def _run_bzr(self, *args: str, from_dir: bool = True) -> str:
        return run_vcs_command([self.executable, *args], cwd=self.local_path if from_dir else None)

    def _configured_remote(self) -> str:
        match = _PARENT_PATTERN.search(self._run_bzr("info"))
        return match.group(1).strip() if match else ""

    def get(self) -> None:
        logger.info(f"Branching {self.remote} into {self.local_path}")
        self._run_bzr("branch", self.remote, str(self.local_path), from_dir=False)

    def update(self) -> None:
        """Pull from the parent branch, then update the working tree.

        Raises:
            VCSOperationError: From whichever step failed first
        """
        logger.info(f"Updating {self.local_path}")
        self._run_bzr("pull")
        self._run_bzr("update")

    def update_version(self, version: str) -> None:
        self._run_bzr("update", "-r", version)

    def version(self) -> str:
        return self._run_bzr("revno", "--tree").strip()

    def branches(self) -> list[str]:
        return []

    def tags(self) -> list[str]:
        return reference_list(self._run_bzr("tags"), LEADING_NAME_PATTERN)
