"""Git VCS implementation for polyvcs."""

from polyvcs.vcs.git.repo import GitRepo

__all__ = [
    "GitRepo",
]
