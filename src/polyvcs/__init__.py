"""polyvcs: one interface over Git, Mercurial, Subversion and Bazaar checkouts."""

__version__ = "0.1.0"
