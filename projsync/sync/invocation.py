"""Building the rsync command line."""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import Config
from ..exceptions import SelfSyncError
from ..process import format_command
from ..utils import RSYNC_OPTIONS, remote_destination, render_excludes
from .modes import TransferMode
from .remote import RemoteDescriptor


@dataclass(frozen=True)
class TransferInvocation:
    """An executable and its arguments, run exactly once per sync."""

    executable: str
    """Program to launch (``rsync``, or ``wsl`` in local WSL mode)"""

    arguments: tuple[str, ...]
    """Arguments, in order"""

    @property
    def argv(self) -> list[str]:
        """The full argv, executable first."""
        return [self.executable, *self.arguments]

    @property
    def exclude_arguments(self) -> list[str]:
        """The ``--exclude=`` arguments, in order."""
        return [arg for arg in self.arguments if arg.startswith("--exclude=")]

    def display(self) -> str:
        """Shell-quoted command line, for logs and dry runs."""
        return format_command(self.argv)

    def to_dict(self) -> dict:
        return {"executable": self.executable, "arguments": list(self.arguments)}


def check_self_sync(mode: TransferMode, source: str, target: str) -> None:
    """Refuse to sync a WSL directory into itself.

    Only applies to local WSL mode. The comparison is on the plain strings;
    paths are not canonicalized.

    Raises:
        SelfSyncError: If ``source`` and ``target`` are equal
    """
    if mode is TransferMode.VIRTUALIZED_LOCAL and source == target:
        raise SelfSyncError(target)


def build_invocation(
    mode: TransferMode,
    source: str,
    target: str,
    remote: RemoteDescriptor,
    port: int,
    excludes: Sequence[str] = (),
    config: Optional[Config] = None,
) -> TransferInvocation:
    """Build the rsync invocation for a transfer mode.

    The self-sync guard is not applied here; callers run check_self_sync
    first, before anything is spawned (see SyncEngine.plan).

    Args:
        mode: Transfer mode
        source: Source path, already translated for the host
        target: Target path
        remote: Remote descriptor (only used in remote mode)
        port: SSH port (only used in remote mode)
        excludes: Exclude patterns, in order
        config: Tool configuration

    Returns:
        TransferInvocation
    """
    config = config or Config()

    if mode is TransferMode.VIRTUALIZED_LOCAL:
        executable = config.wsl
        arguments = [config.rsync, source, target]
    else:
        executable = config.rsync
        arguments = [
            "-e",
            f"{config.ssh} -p {port}",
            source,
            remote_destination(remote.raw, target),
        ]

    arguments.extend(RSYNC_OPTIONS)
    arguments.extend(render_excludes(excludes))
    return TransferInvocation(executable=executable, arguments=tuple(arguments))
