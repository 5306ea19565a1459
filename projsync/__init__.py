"""projsync - Sync projects to remote machines over SSH or to WSL with rsync."""

from .exceptions import (
    IgnoreToolError,
    LaunchError,
    PathTranslationError,
    ProjsyncConfigError,
    ProjsyncError,
    SelfSyncError,
    TransferError,
)
from .sync import SyncEngine, SyncRequest, sync

__version__ = "0.1.0"

__all__ = [
    "SyncEngine",
    "SyncRequest",
    "sync",
    "IgnoreToolError",
    "LaunchError",
    "PathTranslationError",
    "ProjsyncConfigError",
    "ProjsyncError",
    "SelfSyncError",
    "TransferError",
]
