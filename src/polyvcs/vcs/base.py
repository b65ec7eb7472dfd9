"""Abstract base class for repository handles.

This module defines the common interface that all VCS implementations
(Git, Mercurial, Subversion, Bazaar) must implement, and the construction
logic they share: VCS detection and reconciliation of the remote location
with an existing checkout.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from polyvcs.vcs.exceptions import CannotDetectVCSError, WrongRemoteError, WrongVCSError
from polyvcs.vcs.factory import VCSFactory, VCSType, has_marker
from polyvcs.vcs.models import RepoInfo

logger = logging.getLogger(__name__)


class Repo(ABC):
    """Abstract base class for repository handles.

    A handle tracks a remote location and a local path that may or may not
    contain a checkout yet. Each concrete implementation runs the commands of
    one VCS against that pair.
    """

    vcs_type: ClassVar[VCSType]

    def __init__(self, remote: str, local: str | Path) -> None:
        """Initialize the handle and reconcile it with an existing checkout.

        Args:
            remote: Remote repository location (may be empty)
            local: Path of the local checkout

        Raises:
            WrongVCSError: If local is a checkout of another VCS
            WrongRemoteError: If local is configured with a different remote
            VCSOperationError: If reading the configured remote fails
        """
        local_path = Path(local)

        try:
            detected: VCSType | None = VCSFactory.detect_vcs(local_path)
        except CannotDetectVCSError:
            detected = None

        if detected is not None and detected != self.vcs_type:
            msg = f"{local_path} is a {detected.display_name} checkout, not {self.vcs_type.display_name}"
            raise WrongVCSError(msg)

        self._remote = remote
        self._local_path = local_path

        if detected is not None and self.check_local():
            configured = self._configured_remote()
            if remote and configured != remote:
                msg = f"{local_path} is configured for remote {configured!r}, not {remote!r}"
                raise WrongRemoteError(msg)

            if not remote and configured:
                logger.debug(f"Adopting configured remote {configured} for {local_path}")
                self._remote = configured

    @property
    def remote(self) -> str:
        """Remote repository location."""
        return self._remote

    @property
    def local_path(self) -> Path:
        """Path of the local checkout."""
        return self._local_path

    def check_local(self) -> bool:
        """Check if the local path contains a checkout of this VCS.

        Filesystem errors are treated as "not present".

        Returns:
            True if the VCS metadata directory exists
        """
        return has_marker(self._local_path, self.vcs_type.marker)

    def info(self) -> RepoInfo:
        """Summarize this handle.

        Returns:
            RepoInfo with the current version when a checkout exists

        Raises:
            VCSOperationError: If the version of an existing checkout cannot be read
        """
        version = self.version() if self.check_local() else None
        return RepoInfo(
            vcs_type=self.vcs_type,
            remote=self._remote,
            local_path=self._local_path,
            version=version,
        )

    @abstractmethod
    def _configured_remote(self) -> str:
        """Read the remote location configured in the local checkout.

        Returns:
            Configured remote location, or an empty string if none is set
        """

    @abstractmethod
    def get(self) -> None:
        """Perform the initial clone/checkout of the remote into the local path.

        Raises:
            VCSOperationError: If the clone fails
        """

    @abstractmethod
    def update(self) -> None:
        """Bring the existing checkout up to date with the remote.

        Raises:
            VCSOperationError: If any step of the update fails
        """

    @abstractmethod
    def update_version(self, version: str) -> None:
        """Check out a specific version.

        The identifier is passed to the tool unchanged; the tool decides
        whether it is valid.

        Args:
            version: Tag, branch or revision identifier

        Raises:
            VCSOperationError: If the checkout fails
        """

    @abstractmethod
    def version(self) -> str:
        """Get the identifier of the checked-out revision.

        Returns:
            Revision identifier without surrounding whitespace

        Raises:
            VCSOperationError: If the revision cannot be determined
        """

    @abstractmethod
    def branches(self) -> list[str]:
        """List available branches.

        Returns:
            Branch names in the order the tool emits them

        Raises:
            VCSOperationError: If listing fails
        """

    @abstractmethod
    def tags(self) -> list[str]:
        """List available tags.

        Returns:
            Tag names in the order the tool emits them

        Raises:
            VCSOperationError: If listing fails
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(remote={self._remote!r}, local={str(self._local_path)!r})"
