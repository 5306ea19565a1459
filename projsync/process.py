"""Process runner used to launch git, wsl and rsync.

Everything that spawns an external program goes through a ``ProcessRunner``
so tests can substitute a fake that records the argv instead of running it.
"""

import shlex
import subprocess
from dataclasses import dataclass
from typing import IO, Any, Optional, Protocol, Sequence

from .exceptions import LaunchError


@dataclass(frozen=True)
class CompletedCommand:
    """Result of a command whose output was captured."""

    argv: tuple[str, ...]
    """Command that was run"""

    returncode: int
    """Exit status (negative if killed by a signal)"""

    stdout: bytes = b""
    """Raw standard output"""

    stderr: bytes = b""
    """Raw standard error"""

    @property
    def ok(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Narrow interface for running external programs."""

    def capture(self, argv: Sequence[str]) -> CompletedCommand:
        """Run ``argv`` to completion and capture its output."""
        ...

    def stream(
        self, argv: Sequence[str], stdout: Optional[IO[Any]] = None
    ) -> Optional[int]:
        """Run ``argv`` attached to the terminal and wait for it.

        ``stdout`` redirects the standard output of the process; by default it
        is inherited.

        Returns the exit code, or None if the process was killed by a signal.
        """
        ...


def format_command(argv: Sequence[str]) -> str:
    """Format an argv as a shell-quoted command line for display."""
    return shlex.join(argv)


class SubprocessRunner:
    """ProcessRunner backed by the subprocess module."""

    def capture(self, argv: Sequence[str]) -> CompletedCommand:
        try:
            proc = subprocess.run(list(argv), capture_output=True, check=False)
        except OSError as e:
            raise LaunchError(argv, e) from e
        return CompletedCommand(
            argv=tuple(argv),
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )

    def stream(
        self, argv: Sequence[str], stdout: Optional[IO[Any]] = None
    ) -> Optional[int]:
        try:
            child = subprocess.Popen(list(argv), stdout=stdout)
        except OSError as e:
            raise LaunchError(argv, e) from e
        with child:
            returncode = child.wait()
        # POSIX reports signal termination as a negative return code
        if returncode < 0:
            return None
        return returncode
