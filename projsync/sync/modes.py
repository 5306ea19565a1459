"""Transfer modes."""

from enum import Enum

from ..host import HostPlatform
from .remote import LocalVirtualizedLinux, RemoteDescriptor


class TransferMode(str, Enum):
    """How rsync is launched."""

    VIRTUALIZED_LOCAL = "wsl"
    """``wsl rsync <source> <target>`` on the same Windows machine"""

    REMOTE = "ssh"
    """``rsync -e "ssh -p <port>" <source> <remote>:<target>``"""


def select_mode(remote: RemoteDescriptor, host: HostPlatform) -> TransferMode:
    """Select the transfer mode for a remote on a host.

    ``localwsl`` only means WSL on 64-bit Windows. Anywhere else it is treated
    as a plain SSH host name.
    """
    if isinstance(remote, LocalVirtualizedLinux) and host.is_windows_64bit:
        return TransferMode.VIRTUALIZED_LOCAL
    return TransferMode.REMOTE
