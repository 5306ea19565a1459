"""Utility constants and helpers for projsync."""

from typing import Iterable

# =============================================================================
# Command line defaults
# =============================================================================

# Target directory when --target is not given
DEFAULT_TARGET: str = "~"

# SSH port when --port is not given
DEFAULT_PORT: int = 22


# =============================================================================
# rsync options
# =============================================================================

# Always passed to rsync, in this order
RSYNC_OPTIONS: tuple[str, ...] = (
    "--archive",
    "--delete",
    "--human-readable",
    "--update",
    "--progress",
)


def render_excludes(patterns: Iterable[str]) -> list[str]:
    """Render exclude patterns as rsync arguments.

    Args:
        patterns: Exclude patterns, in order

    Returns:
        One ``--exclude=<pattern>`` argument per pattern

    Examples:
        >>> render_excludes(["node_modules", "*.log"])
        ['--exclude=node_modules', '--exclude=*.log']
    """
    return [f"--exclude={pattern}" for pattern in patterns]


def remote_destination(remote: str, target: str) -> str:
    """Join a remote host and a target path into rsync's ``host:path`` form.

    Examples:
        >>> remote_destination("myhost", "~")
        'myhost:~'
    """
    return f"{remote}:{target}"
