"""Git repository handle."""

import logging
from pathlib import Path

import git

from polyvcs.vcs.base import Repo
from polyvcs.vcs.exceptions import VCSOperationError
from polyvcs.vcs.factory import VCSType
from polyvcs.vcs.refs import TAG_PATTERN, branch_pattern, reference_list

logger = logging.getLogger(__name__)

# `git config --get` exits with 1 when the key is not set
_CONFIG_KEY_MISSING = 1


class GitRepo(Repo):
    """Repository handle backed by the git executable.

    Commands run through GitPython's command wrapper with an explicit
    working directory, so the process working directory is never changed.
    """

    vcs_type = VCSType.GIT

    def __init__(self, remote: str, local: str | Path, remote_name: str = "origin") -> None:
        """Initialize Git handle.

        Args:
            remote: Remote repository URL (may be empty)
            local: Path of the local checkout
            remote_name: Remote tracking name used for fetch and branch listing

        Raises:
            WrongVCSError: If local is a checkout of another VCS
            WrongRemoteError: If local is configured with a different remote
        """
        self.remote_name = remote_name
        super().__init__(remote, local)

    def _run_git(self, command: str, *args: str, from_dir: bool = True) -> str:
        """Run a git subcommand.

        Args:
            command: GitPython command name (e.g. 'rev_parse' for 'git rev-parse')
            *args: Command arguments
            from_dir: Run inside the local checkout instead of the current directory

        Returns:
            Command stdout

        Raises:
            VCSOperationError: If git fails or cannot be run
        """
        working_dir = str(self.local_path) if from_dir else None
        logger.debug(f"git {command} {' '.join(args)} (cwd={working_dir or Path.cwd()})")

        try:
            return getattr(git.Git(working_dir), command)(*args)
        except git.GitCommandError as e:
            msg = f"Git {command} failed: {e}"
            raise VCSOperationError(msg, output=str(e), exit_code=e.status) from e
        except git.GitError as e:
            msg = f"Git error: {e}"
            raise VCSOperationError(msg, output=str(e)) from e

    def _configured_remote(self) -> str:
        try:
            return self._run_git("config", "--get", f"remote.{self.remote_name}.url").strip()
        except VCSOperationError as e:
            if e.exit_code == _CONFIG_KEY_MISSING:
                return ""
            raise

    def get(self) -> None:
        logger.info(f"Cloning {self.remote} into {self.local_path}")
        self._run_git("clone", self.remote, str(self.local_path), from_dir=False)

    def update(self) -> None:
        """Fetch from the tracked remote, then pull.

        The pull is not attempted when the fetch fails.

        Raises:
            VCSOperationError: From whichever step failed first
        """
        logger.info(f"Updating {self.local_path} from {self.remote_name}")
        self._run_git("fetch", self.remote_name)
        self._run_git("pull")

    def update_version(self, version: str) -> None:
        self._run_git("checkout", version)

    def version(self) -> str:
        return self._run_git("rev_parse", "HEAD").strip()

    def branches(self) -> list[str]:
        """List branches of the tracked remote.

        Returns:
            Names captured from 'git show-ref' lines ending in '<remote_name>/<name>'
        """
        return reference_list(self._run_git("show_ref"), branch_pattern(self.remote_name))

    def tags(self) -> list[str]:
        """List tags.

        Returns:
            Names captured from 'git show-ref' lines containing 'tags/<name>'
        """
        return reference_list(self._run_git("show_ref"), TAG_PATTERN)
