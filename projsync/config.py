"""Configuration for projsync.

The only persistent configuration are environment variables. Tool executables
can be overridden, which is mostly useful when rsync or git are not on PATH.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ProjsyncConfigError

ENV_PREFIX = "PROJSYNC_"

DEFAULT_RSYNC = "rsync"
DEFAULT_GIT = "git"
DEFAULT_WSL = "wsl"
DEFAULT_SSH = "ssh"


@dataclass(frozen=True)
class Config:
    """Names of the external tools projsync launches."""

    rsync: str = DEFAULT_RSYNC
    git: str = DEFAULT_GIT
    wsl: str = DEFAULT_WSL
    ssh: str = DEFAULT_SSH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Load the configuration from ``PROJSYNC_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Config instance

        Raises:
            ProjsyncConfigError: If a variable is set but empty
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in ("rsync", "git", "wsl", "ssh"):
            key = f"{ENV_PREFIX}{name.upper()}"
            if key not in env:
                continue
            value = env[key].strip()
            if not value:
                raise ProjsyncConfigError(f"{key} is set but empty")
            values[name] = value
        return cls(**values)
