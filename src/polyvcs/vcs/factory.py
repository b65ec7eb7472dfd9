"""VCS detection and factory for creating repository handles.

This module provides detection of the version control system in use, either
from the metadata directory of a local checkout or from hints in a remote
URL, and a factory method that builds the matching repository handle.
"""

import logging
import re
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from polyvcs.vcs.exceptions import CannotDetectVCSError

if TYPE_CHECKING:
    from polyvcs.config import PolyVCSConfig
    from polyvcs.vcs.base import Repo

logger = logging.getLogger(__name__)


class VCSType(str, Enum):
    """Supported version control systems."""

    GIT = "git"
    MERCURIAL = "hg"
    SVN = "svn"
    BAZAAR = "bzr"

    @property
    def display_name(self) -> str:
        """Get display name for the VCS type.

        Returns:
            Human-readable name
        """
        return {
            VCSType.GIT: "Git",
            VCSType.MERCURIAL: "Mercurial",
            VCSType.SVN: "Subversion",
            VCSType.BAZAAR: "Bazaar",
        }[self]

    @property
    def marker(self) -> str:
        """Get the metadata directory that marks a checkout of this VCS.

        Returns:
            Directory name (e.g. '.git')
        """
        return f".{self.value}"


# Detection order for local checkouts
_DETECTION_ORDER = (VCSType.GIT, VCSType.SVN, VCSType.MERCURIAL, VCSType.BAZAAR)

_REMOTE_SCHEMES = {
    "git://": VCSType.GIT,
    "git+ssh://": VCSType.GIT,
    "svn://": VCSType.SVN,
    "svn+ssh://": VCSType.SVN,
    "bzr://": VCSType.BAZAAR,
    "bzr+ssh://": VCSType.BAZAAR,
    "lp:": VCSType.BAZAAR,
}

_GIT_HOSTS = re.compile(r"^(?:[a-z+]+://)?(?:[^@/]+@)?(?:github\.com|gitlab\.com|bitbucket\.org)[:/]")


def has_marker(path: Path, marker: str) -> bool:
    """Check whether a metadata marker exists inside a directory.

    Filesystem errors (e.g. permission denied) count as "not present".

    Args:
        path: Directory to inspect
        marker: Marker entry name (e.g. '.git')

    Returns:
        True if path/marker exists
    """
    try:
        return (path / marker).exists()
    except OSError:
        return False


class VCSFactory:
    """Factory for creating repository handles.

    Provides VCS detection and a factory method for creating the
    appropriate VCS-specific implementation.
    """

    @staticmethod
    def detect_vcs(repo_path: str | Path) -> VCSType:
        """Detect which VCS manages the checkout at the given path.

        Detection order: .git, .svn, .hg, .bzr. Only the directory itself is
        inspected, parent directories are not searched.

        Args:
            repo_path: Path of the local checkout

        Returns:
            VCSType enum value indicating detected VCS

        Raises:
            CannotDetectVCSError: If no VCS marker is present
        """
        path = Path(repo_path)
        for vcs_type in _DETECTION_ORDER:
            if has_marker(path, vcs_type.marker):
                return vcs_type

        msg = f"Cannot detect VCS type at {path}"
        raise CannotDetectVCSError(msg)

    @staticmethod
    def detect_vcs_from_remote(remote: str) -> VCSType:
        """Guess the VCS type from a remote URL.

        Args:
            remote: Remote repository location

        Returns:
            VCSType enum value suggested by the URL

        Raises:
            CannotDetectVCSError: If the URL carries no recognizable hint
        """
        lowered = remote.strip().lower()
        for prefix, vcs_type in _REMOTE_SCHEMES.items():
            if lowered.startswith(prefix):
                return vcs_type

        if lowered.endswith(".git") or lowered.endswith(".git/") or _GIT_HOSTS.match(lowered):
            return VCSType.GIT

        msg = f"Cannot detect VCS type from remote: {remote!r}"
        raise CannotDetectVCSError(msg)

    @staticmethod
    def create_repo(
        remote: str,
        local: str | Path,
        vcs_type: VCSType | None = None,
        config: "PolyVCSConfig | None" = None,
    ) -> "Repo":
        """Create a repository handle.

        If vcs_type is not specified, the type is detected from the local
        checkout first, then from the remote URL, then taken from
        config.default_vcs.

        Args:
            remote: Remote repository location (may be empty)
            local: Path of the local checkout
            vcs_type: VCS type (default: auto-detect)
            config: Optional configuration (remote name, executables)

        Returns:
            Repository handle (GitRepo, MercurialRepo, SvnRepo or BazaarRepo)

        Raises:
            CannotDetectVCSError: If the VCS type cannot be determined
            ValueError: If an unsupported VCS type is specified
        """
        if vcs_type is None:
            vcs_type = VCSFactory._resolve_type(remote, local, config)
        logger.debug(f"Creating {vcs_type.display_name} handle for {local}")

        remote_name = config.remote_name if config else "origin"

        if vcs_type == VCSType.GIT:
            from polyvcs.vcs.git.repo import GitRepo

            return GitRepo(remote, local, remote_name=remote_name)
        elif vcs_type == VCSType.MERCURIAL:
            from polyvcs.vcs.mercurial.repo import MercurialRepo

            return MercurialRepo(remote, local)
        elif vcs_type == VCSType.SVN:
            from polyvcs.vcs.svn.repo import SvnRepo

            executable = config.svn_executable if config else "svn"
            return SvnRepo(remote, local, executable=executable)
        elif vcs_type == VCSType.BAZAAR:
            from polyvcs.vcs.bazaar.repo import BazaarRepo

            executable = config.bzr_executable if config else "bzr"
            return BazaarRepo(remote, local, executable=executable)
        else:
            msg = f"Unsupported VCS type: {vcs_type}"
            raise ValueError(msg)

    @staticmethod
    def _resolve_type(remote: str, local: str | Path, config: "PolyVCSConfig | None") -> VCSType:
        try:
            return VCSFactory.detect_vcs(local)
        except CannotDetectVCSError:
            pass

        try:
            return VCSFactory.detect_vcs_from_remote(remote)
        except CannotDetectVCSError:
            if config is not None and config.default_vcs is not None:
                return config.default_vcs
            raise
