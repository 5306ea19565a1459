"""Unit tests for host detection and path translation."""

from unittest.mock import patch

import pytest

from projsync.config import Config
from projsync.exceptions import PathTranslationError
from projsync.host import (
    HostPlatform,
    IdentityTranslator,
    WslPathTranslator,
    translator_for,
)
from tests.conftest import FakeRunner


class TestHostPlatform:
    """Tests for HostPlatform class."""

    def test_windows_64bit(self):
        assert HostPlatform("Windows", True).is_windows_64bit is True

    def test_windows_32bit(self):
        assert HostPlatform("Windows", False).is_windows_64bit is False

    @pytest.mark.parametrize("system", ["Linux", "Darwin"])
    def test_other_systems(self, system):
        assert HostPlatform(system, True).is_windows_64bit is False

    def test_detect(self):
        """Test detection from the platform module."""
        with patch("projsync.host.platform.system", return_value="Windows"):
            host = HostPlatform.detect()
        assert host.system == "Windows"
        assert isinstance(host.is_64bit, bool)


class TestIdentityTranslator:
    def test_unchanged(self):
        """Test that paths are returned unchanged."""
        assert IdentityTranslator().translate("/home/u/proj") == "/home/u/proj"


class TestWslPathTranslator:
    """Tests for WslPathTranslator class."""

    def test_translate(self):
        """Test converting a Windows path with wslpath."""
        runner = FakeRunner({"wsl": {"returncode": 0, "stdout": b"/mnt/c/proj\n"}})

        result = WslPathTranslator(runner).translate("C:\\proj")

        assert result == "/mnt/c/proj"
        assert runner.captured == [["wsl", "-e", "wslpath", "-a", "-u", "C:\\proj"]]

    def test_wslpath_runs_without_shell(self):
        """Test that wslpath is executed directly so backslashes survive."""
        runner = FakeRunner({"wsl": {"returncode": 0, "stdout": b"/mnt/c/Users/me\n"}})

        WslPathTranslator(runner).translate("C:\\Users\\me")

        argv = runner.captured[0]
        assert argv[argv.index("wslpath") - 1] == "-e"
        assert argv[-1] == "C:\\Users\\me"

    def test_custom_wsl(self):
        """Test that the wsl executable can be overridden."""
        runner = FakeRunner({"wsl.exe": {"returncode": 0, "stdout": b"/mnt/d\n"}})
        assert WslPathTranslator(runner, wsl="wsl.exe").translate("D:\\") == "/mnt/d"

    def test_wslpath_rejects_path(self):
        """Test that a wslpath error is a PathTranslationError."""
        runner = FakeRunner(
            {"wsl": {"returncode": 1, "stderr": b"wslpath: bad: Invalid argument"}}
        )

        with pytest.raises(PathTranslationError, match="Invalid argument"):
            WslPathTranslator(runner).translate("bad")

    def test_wsl_not_installed(self):
        """Test that a missing wsl is a PathTranslationError."""
        runner = FakeRunner({"wsl": FileNotFoundError("wsl")})

        with pytest.raises(PathTranslationError, match="Failed to convert path"):
            WslPathTranslator(runner).translate("C:\\proj")

    def test_empty_output(self):
        """Test that empty output is a PathTranslationError."""
        runner = FakeRunner({"wsl": {"returncode": 0, "stdout": b"\n"}})

        with pytest.raises(PathTranslationError, match="no output"):
            WslPathTranslator(runner).translate("C:\\proj")

    def test_undecodable_output(self):
        runner = FakeRunner({"wsl": {"returncode": 0, "stdout": b"\xff"}})

        with pytest.raises(PathTranslationError):
            WslPathTranslator(runner).translate("C:\\proj")


class TestTranslatorFor:
    """Tests for translator_for function."""

    def test_windows_64bit(self):
        translator = translator_for(
            HostPlatform("Windows", True), FakeRunner(), Config(wsl="wsl.exe")
        )
        assert isinstance(translator, WslPathTranslator)
        assert translator.wsl == "wsl.exe"

    @pytest.mark.parametrize(
        "host", [HostPlatform("Windows", False), HostPlatform("Linux", True)]
    )
    def test_identity_elsewhere(self, host):
        assert isinstance(translator_for(host), IdentityTranslator)
