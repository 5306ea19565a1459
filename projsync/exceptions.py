"""Custom exceptions for projsync."""

from typing import Optional, Sequence


class ProjsyncError(Exception):
    """Base exception for all projsync errors."""

    pass


class ProjsyncConfigError(ProjsyncError):
    """Raised when the configuration is invalid."""

    pass


class PathTranslationError(ProjsyncError):
    """Raised when a Windows path cannot be converted to its WSL equivalent."""

    pass


class SelfSyncError(ProjsyncError):
    """Raised when the source and target of a local WSL sync are the same."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(
            "Cannot sync a directory with itself. "
            f"target and source were: {target}"
        )


class LaunchError(ProjsyncError):
    """Raised when an external process cannot be started."""

    def __init__(self, argv: Sequence[str], cause: OSError):
        self.argv = list(argv)
        self.cause = cause
        super().__init__(f"Failed to run {self.argv[0]!r}: {cause}")


class IgnoreToolError(ProjsyncError):
    """Raised when git fails to list the ignored files."""

    def __init__(self, root: str, message: str):
        self.root = root
        super().__init__(f"git ls-files failed in {root}: {message}")


class TransferError(ProjsyncError):
    """Raised when rsync exits with a non-zero status.

    ``exit_code`` is None when the process was terminated by a signal.
    """

    def __init__(self, exit_code: Optional[int]):
        self.exit_code = exit_code
        super().__init__(
            "Failed to sync the project via rsync. "
            f"Exit status: {exit_code if exit_code is not None else 'killed by signal'}"
        )
