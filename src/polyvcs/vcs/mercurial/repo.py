"""Mercurial repository handle."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import hglib  # type: ignore[import-untyped]

from polyvcs.vcs.base import Repo
from polyvcs.vcs.exceptions import VCSOperationError
from polyvcs.vcs.factory import VCSType

logger = logging.getLogger(__name__)


def _command_output(error: hglib.error.CommandError) -> str:
    return b"".join(part for part in (error.out, error.err) if part).decode("utf-8", errors="replace")


class MercurialRepo(Repo):
    """Repository handle backed by a Mercurial command server (python-hglib)."""

    vcs_type = VCSType.MERCURIAL

    @contextmanager
    def _client(self) -> Iterator[hglib.client.hgclient]:
        """Open a command server on the local checkout for the duration of a block.

        Yields:
            Connected hglib client

        Raises:
            VCSOperationError: If the server cannot be started or a command fails
        """
        logger.debug(f"Opening Mercurial client on {self.local_path}")
        try:
            client = hglib.open(str(self.local_path))
        except (hglib.error.ServerError, OSError) as e:
            msg = f"Unable to open Mercurial repository {self.local_path}: {e}"
            raise VCSOperationError(msg) from e

        try:
            yield client
        except hglib.error.CommandError as e:
            msg = f"Mercurial command failed: {e}"
            raise VCSOperationError(msg, output=_command_output(e), exit_code=e.ret) from e
        finally:
            client.close()

    def _configured_remote(self) -> str:
        with self._client() as client:
            paths: dict[bytes, bytes] = client.paths()
        return paths.get(b"default", b"").decode("utf-8").strip()

    def get(self) -> None:
        logger.info(f"Cloning {self.remote} into {self.local_path}")
        try:
            hglib.clone(source=self.remote.encode("utf-8"), dest=str(self.local_path).encode("utf-8"))
        except hglib.error.CommandError as e:
            msg = f"Mercurial clone failed: {e}"
            raise VCSOperationError(msg, output=_command_output(e), exit_code=e.ret) from e
        except OSError as e:
            msg = f"Unable to run hg: {e}"
            raise VCSOperationError(msg) from e

    def update(self) -> None:
        """Pull from the default path, then update the working directory.

        Raises:
            VCSOperationError: From whichever step failed first
        """
        logger.info(f"Updating {self.local_path}")
        with self._client() as client:
            client.pull()
            client.update()

    def update_version(self, version: str) -> None:
        with self._client() as client:
            client.update(rev=version.encode("utf-8"))

    def version(self) -> str:
        with self._client() as client:
            parents = client.parents()

        if not parents:
            msg = f"No revision checked out in {self.local_path}"
            raise VCSOperationError(msg)
        return parents[0].node.decode("utf-8").strip()

    def branches(self) -> list[str]:
        with self._client() as client:
            return [name.decode("utf-8") for name, _rev, _node in client.branches()]

    def tags(self) -> list[str]:
        with self._client() as client:
            return [tag[0].decode("utf-8") for tag in client.tags()]
