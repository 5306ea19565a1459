"""Shared fixtures for projsync tests."""

from typing import IO, Any, Optional, Sequence

import pytest

from projsync.exceptions import LaunchError
from projsync.host import HostPlatform, IdentityTranslator
from projsync.process import CompletedCommand


class FakeRunner:
    """Records commands instead of running them.

    ``captures`` maps an executable name to the CompletedCommand fields (or an
    OSError to raise). ``stream_result`` is the exit code returned for the
    transfer, or an OSError to raise. The ``stdout`` given to each
    ``stream`` call is kept in ``stream_stdout``.
    """

    def __init__(
        self,
        captures: Optional[dict] = None,
        stream_result=0,
    ):
        self.captures = captures or {}
        self.stream_result = stream_result
        self.captured: list[list[str]] = []
        self.streamed: list[list[str]] = []
        self.stream_stdout: list[Optional[IO[Any]]] = []

    def capture(self, argv: Sequence[str]) -> CompletedCommand:
        self.captured.append(list(argv))
        outcome = self.captures.get(argv[0], {"returncode": 0})
        if isinstance(outcome, OSError):
            raise LaunchError(argv, outcome)
        return CompletedCommand(argv=tuple(argv), **outcome)

    def stream(
        self, argv: Sequence[str], stdout: Optional[IO[Any]] = None
    ) -> Optional[int]:
        self.streamed.append(list(argv))
        self.stream_stdout.append(stdout)
        if isinstance(self.stream_result, OSError):
            raise LaunchError(argv, self.stream_result)
        return self.stream_result


class FakeTranslator:
    """Translates every path to a fixed WSL path."""

    def __init__(self, result: str = "/mnt/c/proj"):
        self.result = result
        self.calls: list[str] = []

    def translate(self, path: str) -> str:
        self.calls.append(path)
        return self.result


def git_output(*lines: str) -> dict:
    """Build a successful git ls-files capture result."""
    return {"returncode": 0, "stdout": "".join(f"{line}\n" for line in lines).encode()}


@pytest.fixture
def linux_host():
    """A 64-bit Linux host."""
    return HostPlatform(system="Linux", is_64bit=True)


@pytest.fixture
def windows_host():
    """A 64-bit Windows host."""
    return HostPlatform(system="Windows", is_64bit=True)


@pytest.fixture
def identity():
    return IdentityTranslator()


@pytest.fixture
def project(tmp_path):
    """A project directory with a few files git would ignore."""
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "bundle.js").write_text("bundle")
    (tmp_path / "debug.log").write_text("log")
    (tmp_path / "main.py").write_text("print('hi')")
    return tmp_path
