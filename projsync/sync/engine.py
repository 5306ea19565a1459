"""Core sync engine: builds the rsync command for a request and runs it."""

import logging
from dataclasses import dataclass, field
from typing import IO, Any, Iterable, Optional, Union

from ..config import Config
from ..exceptions import IgnoreToolError, LaunchError, TransferError
from ..host import HostPlatform, PathTranslator, translator_for
from ..process import ProcessRunner, SubprocessRunner
from ..utils import DEFAULT_PORT
from .ignore import GitIgnoreResolver
from .invocation import TransferInvocation, build_invocation, check_self_sync
from .modes import TransferMode, select_mode
from .remote import RemoteDescriptor
from .request import SyncRequest

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of a successful (or dry) sync."""

    invocation: TransferInvocation
    """The rsync invocation that was (or would have been) run"""

    mode: TransferMode
    """Transfer mode that was selected"""

    ignored: list[str] = field(default_factory=list)
    """Paths excluded because git ignores them"""

    dry_run: bool = False
    """True if rsync was not launched"""

    exit_code: Optional[int] = None
    """rsync exit code (None for dry runs)"""

    def to_dict(self) -> dict:
        """Convert the result to a dictionary for JSON output."""
        return {
            "mode": self.mode.value,
            "command": self.invocation.to_dict(),
            "ignored": list(self.ignored),
            "dry_run": self.dry_run,
            "exit_code": self.exit_code,
        }


class SyncEngine:
    """Syncs a local directory to a remote host or WSL with rsync."""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        host: Optional[HostPlatform] = None,
        translator: Optional[PathTranslator] = None,
        resolver: Optional[GitIgnoreResolver] = None,
        config: Optional[Config] = None,
    ):
        """Initialize sync engine.

        Every collaborator can be replaced, which lets the engine run on any
        host in tests.

        Args:
            runner: Process runner used to launch rsync
            host: Host platform; detected if not given
            translator: Source path translator; chosen from ``host`` if not given
            resolver: Git ignore resolver
            config: Tool configuration
        """
        self.config = config or Config()
        self.runner = runner or SubprocessRunner()
        self.host = host or HostPlatform.detect()
        self.translator = translator or translator_for(
            self.host, self.runner, self.config
        )
        self.resolver = resolver or GitIgnoreResolver(self.runner, git=self.config.git)

    def git_excludes(self, root: str) -> list[str]:
        """Get the git-ignored paths under ``root``.

        A missing or failing git never blocks a sync: the failure is logged
        and no paths are returned.
        """
        try:
            return self.resolver.resolve(root)
        except (LaunchError, IgnoreToolError) as e:
            logger.warning(
                f"Failed to get gitignored files: {e}\n"
                "Considering no git ignored files."
            )
            return []

    def plan(self, request: SyncRequest) -> SyncResult:
        """Build the rsync invocation for a request without running it.

        Args:
            request: Sync request

        Returns:
            SyncResult with ``dry_run`` set

        Raises:
            PathTranslationError: If the source cannot be converted for WSL
            SelfSyncError: If a local WSL sync would copy a directory onto itself
        """
        source = self.translator.translate(request.source)
        mode = select_mode(request.remote, self.host)
        check_self_sync(mode, source, request.target)

        # git runs against the local path, not the translated one
        ignored = self.git_excludes(request.source)
        invocation = build_invocation(
            mode,
            source,
            request.target,
            request.remote,
            request.port,
            excludes=[*request.exclude, *ignored],
            config=self.config,
        )
        logger.info(
            f"Syncing {source} to {request.target} at {request.remote}:{request.port}"
        )
        logger.debug(f"Running `{invocation.display()}`")
        return SyncResult(
            invocation=invocation, mode=mode, ignored=ignored, dry_run=True
        )

    def sync(
        self,
        request: SyncRequest,
        dry_run: bool = False,
        stdout: Optional[IO[Any]] = None,
    ) -> SyncResult:
        """Sync a request.

        Args:
            request: Sync request
            dry_run: If True, only build the command without running rsync
            stdout: Where rsync writes its progress; inherited if not given

        Returns:
            SyncResult

        Raises:
            PathTranslationError: If the source cannot be converted for WSL
            SelfSyncError: If a local WSL sync would copy a directory onto itself
            LaunchError: If rsync (or wsl) cannot be started
            TransferError: If rsync exits with a non-zero status
        """
        result = self.plan(request)
        if dry_run:
            return result

        exit_code = self.runner.stream(result.invocation.argv, stdout=stdout)
        if exit_code != 0:
            raise TransferError(exit_code)

        result.dry_run = False
        result.exit_code = exit_code
        return result


def sync(
    source: str,
    target: str,
    remote: Union[str, RemoteDescriptor],
    port: int = DEFAULT_PORT,
    exclude: Iterable[str] = (),
    engine: Optional[SyncEngine] = None,
) -> None:
    """Sync ``source`` to ``target`` on ``remote``.

    Args:
        source: Local source directory
        target: Target directory
        remote: ``localwsl``, an SSH alias or ``user@host``
        port: SSH port
        exclude: Extra exclude patterns
        engine: Engine to use; a default one is created if not given

    Raises:
        ProjsyncError: On any failure, see SyncEngine.sync
    """
    request = SyncRequest.from_options(
        remote=remote, source=source, target=target, port=port, exclude=exclude
    )
    (engine or SyncEngine()).sync(request)
