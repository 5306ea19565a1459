"""Remote descriptors.

The ``--remote`` value is resolved once at the boundary into either the local
WSL sentinel or an SSH target, so later decisions never compare raw strings.
"""

from dataclasses import dataclass
from typing import Union

LOCAL_WSL = "localwsl"
"""Remote value meaning "the WSL distribution on this Windows machine"."""


@dataclass(frozen=True)
class LocalVirtualizedLinux:
    """Sync into WSL on the same Windows host."""

    @property
    def raw(self) -> str:
        return LOCAL_WSL

    def __str__(self) -> str:
        return LOCAL_WSL


@dataclass(frozen=True)
class SshTarget:
    """Sync to a host reachable over SSH."""

    host_spec: str
    """An alias from ``~/.ssh/config`` or ``user@host``"""

    @property
    def raw(self) -> str:
        return self.host_spec

    def __str__(self) -> str:
        return self.host_spec


RemoteDescriptor = Union[LocalVirtualizedLinux, SshTarget]


def parse_remote(value: str) -> RemoteDescriptor:
    """Parse a ``--remote`` value.

    Args:
        value: ``localwsl``, an SSH alias or ``user@host``

    Returns:
        LocalVirtualizedLinux for the exact sentinel, SshTarget otherwise

    Raises:
        ValueError: If the value is empty

    Examples:
        >>> parse_remote("localwsl")
        LocalVirtualizedLinux()
        >>> parse_remote("me@example.com")
        SshTarget(host_spec='me@example.com')
    """
    if not value or not value.strip():
        raise ValueError("Remote must not be empty")
    if value == LOCAL_WSL:
        return LocalVirtualizedLinux()
    return SshTarget(value)
