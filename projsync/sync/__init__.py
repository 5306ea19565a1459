"""Sync engine for projsync - rsync over SSH or into WSL, honoring .gitignore."""

from .engine import SyncEngine, SyncResult, sync
from .ignore import GitIgnoreResolver, build_ls_files_command, resolve_ignored
from .invocation import TransferInvocation, build_invocation, check_self_sync
from .modes import TransferMode, select_mode
from .remote import (
    LOCAL_WSL,
    LocalVirtualizedLinux,
    RemoteDescriptor,
    SshTarget,
    parse_remote,
)
from .request import SyncRequest

__all__ = [
    "SyncEngine",
    "SyncResult",
    "sync",
    "GitIgnoreResolver",
    "build_ls_files_command",
    "resolve_ignored",
    "TransferInvocation",
    "build_invocation",
    "check_self_sync",
    "TransferMode",
    "select_mode",
    "LOCAL_WSL",
    "LocalVirtualizedLinux",
    "RemoteDescriptor",
    "SshTarget",
    "parse_remote",
    "SyncRequest",
]
