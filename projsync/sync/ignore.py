"""Discovery of git-ignored files.

rsync knows nothing about ``.gitignore``, so the ignored paths are listed with
``git ls-files`` and passed to rsync as excludes.
"""

import logging
from pathlib import Path
from typing import Optional

from ..exceptions import IgnoreToolError
from ..process import ProcessRunner, SubprocessRunner, format_command

logger = logging.getLogger(__name__)


def build_ls_files_command(root: str, git: str = "git") -> list[str]:
    """Build the git command listing ignored, untracked files under ``root``.

    ``--directory`` collapses fully ignored directories into a single entry,
    which keeps the exclude list short (``node_modules/`` instead of every
    file beneath it).
    """
    return [
        git,
        "-C",
        root,
        "ls-files",
        "--exclude-standard",
        "-oi",
        "--directory",
    ]


class GitIgnoreResolver:
    """Lists the files git ignores in a working tree."""

    def __init__(
        self, runner: Optional[ProcessRunner] = None, git: str = "git"
    ) -> None:
        """Initialize the resolver.

        Args:
            runner: Process runner used to launch git
            git: git executable
        """
        self.runner = runner or SubprocessRunner()
        self.git = git

    def resolve(self, root: str) -> list[str]:
        """Get the ignored paths under ``root``.

        Paths reported by git that do not exist on disk are dropped.

        Args:
            root: Working tree to inspect

        Returns:
            Paths relative to ``root``, in the order git printed them

        Raises:
            LaunchError: If git cannot be started
            IgnoreToolError: If git fails or prints something that is not UTF-8
        """
        argv = build_ls_files_command(root, self.git)
        logger.debug(f"Running `{format_command(argv)}`")
        result = self.runner.capture(argv)

        if not result.ok:
            try:
                message = result.stderr.decode("utf-8").strip() or "Unknown error"
            except UnicodeDecodeError:
                message = "Unknown error"
            raise IgnoreToolError(root, message)

        try:
            stdout = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IgnoreToolError(root, f"output is not valid UTF-8: {e}") from e

        base = Path(root)
        ignored = []
        for line in stdout.split("\n"):
            if not line:
                continue
            if not (base / line).exists():
                logger.debug(f"Skipping ignored path that no longer exists: {line}")
                continue
            ignored.append(line)
        return ignored


def resolve_ignored(root: str, runner: Optional[ProcessRunner] = None) -> list[str]:
    """Get the git-ignored paths under ``root``.

    See GitIgnoreResolver.resolve.
    """
    return GitIgnoreResolver(runner).resolve(root)
