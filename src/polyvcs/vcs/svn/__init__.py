"""Subversion VCS implementation for polyvcs."""

from polyvcs.vcs.svn.repo import SvnRepo

__all__ = [
    "SvnRepo",
]
