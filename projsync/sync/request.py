"""Sync request definition."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from ..utils import DEFAULT_PORT, DEFAULT_TARGET
from .remote import RemoteDescriptor, parse_remote


@dataclass(frozen=True)
class SyncRequest:
    """A single source -> target sync.

    Examples:
        >>> request = SyncRequest.from_options(
        ...     source="/home/u/proj", remote="myhost", port=2222
        ... )
        >>> request.target
        '~'
    """

    source: str
    """Local source directory"""

    remote: RemoteDescriptor
    """Where to sync to"""

    target: str = DEFAULT_TARGET
    """Target directory on the remote (or in WSL)"""

    port: int = DEFAULT_PORT
    """SSH port"""

    exclude: tuple[str, ...] = field(default_factory=tuple)
    """Extra exclude patterns, passed before the git-ignored ones"""

    def __post_init__(self) -> None:
        if not self.source:
            raise ValueError("Source must not be empty")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"Port must be an integer, got {self.port!r}")
        if not 0 < self.port <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")
        # Accept any iterable but store a tuple so the request stays immutable
        if not isinstance(self.exclude, tuple):
            object.__setattr__(self, "exclude", tuple(self.exclude))

    @classmethod
    def from_options(
        cls,
        remote: Union[str, RemoteDescriptor],
        source: Optional[str] = None,
        target: Optional[str] = None,
        port: int = DEFAULT_PORT,
        exclude: Iterable[str] = (),
    ) -> "SyncRequest":
        """Create a request from command line values, applying the defaults.

        Args:
            remote: Remote value or an already parsed descriptor
            source: Source directory; defaults to the current directory.
                A leading ``~`` is expanded.
            target: Target directory; defaults to ``~``
            port: SSH port
            exclude: Extra exclude patterns

        Returns:
            SyncRequest instance
        """
        if source is None:
            source = str(Path.cwd())
        else:
            # Path() would drop a trailing slash, which rsync reads as "contents of"
            source = os.path.expanduser(source)

        if isinstance(remote, str):
            remote = parse_remote(remote)

        return cls(
            source=source,
            remote=remote,
            target=target if target is not None else DEFAULT_TARGET,
            port=port,
            exclude=tuple(exclude),
        )
