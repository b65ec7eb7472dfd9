"""Common VCS exceptions for polyvcs.

Every backend (Git, Mercurial, Subversion, Bazaar) raises these instead of
the errors of the library or tool it wraps.
"""


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class WrongVCSError(VCSError):
    """Raised when the local directory is managed by a different VCS."""


class WrongRemoteError(VCSError):
    """Raised when the checkout's configured remote differs from the requested one."""


class CannotDetectVCSError(VCSError):
    """Raised when the VCS type cannot be determined from a path or remote URL."""


class VCSOperationError(VCSError):
    """Raised when a VCS command fails.

    Attributes:
        output: Combined stdout/stderr of the failed command, if captured
        exit_code: Exit status of the failed command, if it ran at all
    """

    def __init__(self, message: str, output: str = "", exit_code: int | None = None) -> None:
        super().__init__(message)
        self.output = output
        self.exit_code = exit_code
