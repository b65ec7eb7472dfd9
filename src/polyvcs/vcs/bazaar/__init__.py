"""Bazaar VCS implementation for polyvcs."""

from polyvcs.vcs.bazaar.repo import BazaarRepo

__all__ = [
    "BazaarRepo",
]
