"""CLI interface for projsync."""

import logging
import sys
from typing import Any, Optional

import click

from .config import Config
from .exceptions import ProjsyncError
from .output import OutputFormatter
from .sync import SyncEngine, SyncRequest
from .utils import DEFAULT_PORT, DEFAULT_TARGET

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, quiet: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: If True, enable debug output including the full rsync command
        quiet: If True, only show warnings and errors
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("projsync").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
        # Keep the "Syncing ... to ..." line visible by default
        logging.getLogger("projsync").setLevel(
            logging.WARNING if quiet else logging.INFO
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--source",
    "-s",
    default=None,
    help="The source path. Defaults to the current directory",
)
@click.option(
    "--target",
    "-t",
    default=None,
    envvar="PROJSYNC_TARGET",
    help=f"The target directory. Defaults to {DEFAULT_TARGET}",
)
@click.option(
    "--remote",
    "-r",
    required=True,
    envvar="PROJSYNC_REMOTE",
    help=(
        "The target remote: an alias from ~/.ssh/config, "
        "username@remoteIP_or_name, or localwsl for syncing with WSL"
    ),
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(1, 65535),
    default=DEFAULT_PORT,
    show_default=True,
    envvar="PROJSYNC_PORT",
    help="The ssh port to use for syncing the folder",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="A path to ignore when syncing (repeatable), in addition to gitignored files",
)
@click.option(
    "--dry-run", is_flag=True, help="Show the rsync command without running it"
)
@click.option("--json", is_flag=True, help="Output the result in JSON format")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="projsync")
@click.pass_context
def main(
    ctx: Any,
    source: Optional[str],
    target: Optional[str],
    remote: str,
    port: int,
    exclude: tuple[str, ...],
    dry_run: bool,
    json: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Sync projects to different remote machines over SSH or WSL.

    Files ignored by git are excluded automatically.

    \b
    Examples:
        # Sync the current directory with ~/folder_name
        projsync --remote localwsl
        projsync --remote ssh_alias
        projsync --remote username@remoteIP_or_name --port 22

    \b
        # Sync the given source to the given directory
        projsync --source ./ --target ~/folder_name --remote localwsl

    \b
        # Exclude files or folders in addition to gitignored files
        projsync --exclude some_file_or_folder --remote localwsl
    """
    out = OutputFormatter(json_output=json, quiet=quiet)
    configure_logging(verbose, quiet=quiet or json)

    try:
        request = SyncRequest.from_options(
            remote=remote,
            source=source,
            target=target,
            port=port,
            exclude=exclude,
        )
    except ValueError as e:
        out.error(str(e))
        ctx.exit(1)
        return  # Unreachable, but helps type checker

    try:
        engine = SyncEngine(config=Config.from_env())
        # stdout carries only the JSON document, so rsync progress goes to stderr
        result = engine.sync(
            request, dry_run=dry_run, stdout=sys.stderr if json else None
        )
    except KeyboardInterrupt:
        out.warning("Sync cancelled by user")
        ctx.exit(130)
        return
    except ProjsyncError as e:
        out.error(str(e))
        ctx.exit(1)
        return

    if out.json_output:
        out.output_json(result.to_dict())
        return

    if dry_run:
        out.print_summary(
            "Dry Run",
            [
                ("Mode", result.mode.value),
                ("Source", request.source),
                ("Target", request.target),
                ("Remote", str(request.remote)),
                ("Git ignored", str(len(result.ignored))),
                ("Excludes", " ".join(result.invocation.exclude_arguments) or "-"),
            ],
        )
        out.print(result.invocation.display())
    else:
        out.success("✓ Sync complete")


if __name__ == "__main__":
    main()
