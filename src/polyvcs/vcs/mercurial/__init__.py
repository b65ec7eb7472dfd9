"""Mercurial VCS implementation for polyvcs."""

from polyvcs.vcs.mercurial.repo import MercurialRepo

__all__ = [
    "MercurialRepo",
]
