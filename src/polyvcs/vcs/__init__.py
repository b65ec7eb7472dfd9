"""Version Control System abstraction for polyvcs.

This module provides a unified interface for working with different
version control systems (Git, Mercurial, Subversion, Bazaar).
"""

from polyvcs.vcs.base import Repo
from polyvcs.vcs.exceptions import (
    CannotDetectVCSError,
    VCSError,
    VCSOperationError,
    WrongRemoteError,
    WrongVCSError,
)
from polyvcs.vcs.factory import VCSFactory, VCSType
from polyvcs.vcs.models import RepoInfo

__all__ = [
    "CannotDetectVCSError",
    "Repo",
    "RepoInfo",
    "VCSError",
    "VCSFactory",
    "VCSOperationError",
    "VCSType",
    "WrongRemoteError",
    "WrongVCSError",
]
