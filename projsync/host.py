"""Host platform detection and source path translation.

On 64-bit Windows the source path has to be converted into the form WSL sees
it (``C:\\Users\\me\\proj`` -> ``/mnt/c/Users/me/proj``) before it is handed
to rsync. The conversion is delegated to ``wslpath`` running inside WSL; on
every other host the path is used unchanged.
"""

import logging
import platform
import sys
from dataclasses import dataclass
from typing import Optional, Protocol

from .config import Config
from .exceptions import LaunchError, PathTranslationError
from .process import ProcessRunner, SubprocessRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostPlatform:
    """The platform projsync is running on."""

    system: str
    """Operating system name as reported by ``platform.system()``"""

    is_64bit: bool
    """True if the interpreter is a 64-bit build"""

    @property
    def is_windows(self) -> bool:
        return self.system == "Windows"

    @property
    def is_windows_64bit(self) -> bool:
        """True on 64-bit Windows, the only host where WSL syncing is used."""
        return self.is_windows and self.is_64bit

    @classmethod
    def detect(cls) -> "HostPlatform":
        """Detect the current host platform."""
        return cls(system=platform.system(), is_64bit=sys.maxsize > 2**32)


class PathTranslator(Protocol):
    """Converts a local source path into the form rsync expects."""

    def translate(self, path: str) -> str: ...


class IdentityTranslator:
    """Leaves paths unchanged (every host except 64-bit Windows)."""

    def translate(self, path: str) -> str:
        return path


class WslPathTranslator:
    """Converts Windows paths to WSL paths with ``wsl -e wslpath -a -u``."""

    def __init__(
        self, runner: Optional[ProcessRunner] = None, wsl: str = "wsl"
    ) -> None:
        self.runner = runner or SubprocessRunner()
        self.wsl = wsl

    def translate(self, path: str) -> str:
        """Translate a Windows path to its WSL equivalent.

        Args:
            path: Windows path, e.g. ``C:\\Users\\me\\proj``

        Returns:
            The WSL path, e.g. ``/mnt/c/Users/me/proj``

        Raises:
            PathTranslationError: If wslpath cannot be run or rejects the path
        """
        # -e bypasses the distro shell, which would strip the backslashes
        argv = [self.wsl, "-e", "wslpath", "-a", "-u", path]
        try:
            result = self.runner.capture(argv)
        except LaunchError as e:
            raise PathTranslationError(f"Failed to convert path to WSL: {e}") from e

        if not result.ok:
            message = result.stderr.decode("utf-8", errors="replace").strip()
            raise PathTranslationError(
                f"Failed to convert path to WSL: {message or path}"
            )
        try:
            translated = result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise PathTranslationError(
                f"Failed to convert path to WSL: {e}"
            ) from e
        if not translated:
            raise PathTranslationError(
                f"Failed to convert path to WSL: no output for {path}"
            )

        logger.debug(f"Translated {path} to {translated}")
        return translated


def translator_for(
    host: HostPlatform,
    runner: Optional[ProcessRunner] = None,
    config: Optional[Config] = None,
) -> PathTranslator:
    """Choose the path translator for a host.

    Args:
        host: Host platform
        runner: Process runner used by the WSL translator
        config: Tool configuration (for the ``wsl`` executable)

    Returns:
        A WslPathTranslator on 64-bit Windows, an IdentityTranslator otherwise
    """
    if host.is_windows_64bit:
        wsl = config.wsl if config is not None else "wsl"
        return WslPathTranslator(runner, wsl=wsl)
    return IdentityTranslator()
