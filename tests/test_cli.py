"""Tests for command routing and the error boundary (cli/app.py).

Results are asserted on stdout; diagnostics on stderr.  The interactive
prompt is always mocked.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from argsafe.cli import exit_codes
from argsafe.cli.app import _parse_definitions, cli, main
from argsafe.core.models import ConstantCheck, Dialect
from argsafe.exceptions import (
    InvalidConstantDefinitionError,
    InvalidEnvironmentConstantError,
)
from argsafe.infra.environment import GIT_HOST_VARIABLE, HOST_VARIABLE


# ---------------------------------------------------------------------------
# escape
# ---------------------------------------------------------------------------

class TestEscapeCommand:
    def test_posix(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["escape", "-d", "posix", "it's"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "'it'\\''s'\n"

    def test_one_line_per_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["escape", "--dialect", "windows", "a b", "50%"])
        assert capsys.readouterr().out == '"a b"\n"50"%""\n'

    def test_join(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["escape", "-d", "powershell", "--join", "a", "b"])
        assert capsys.readouterr().out == "'\"a\"' '\"b\"'\n"

    @patch(
        "argsafe.cli.dialect_prompt.prompt_dialect_selection",
        return_value=Dialect.WINDOWS_CRT,
    )
    def test_prompts_without_dialect(
        self, mock_prompt: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("argsafe.utils.platforms.current_os", return_value="linux"):
            code = main(["escape", "x"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == '"x"\n'
        mock_prompt.assert_called_once_with(["x"], Dialect.POSIX_SHELL)


# ---------------------------------------------------------------------------
# check-env
# ---------------------------------------------------------------------------

class TestCheckEnvCommand:
    def test_valid_constants(self) -> None:
        code = main(
            ["check-env", "--for-subprocess", "--target-os", "windows", "A=1", "B=two"]
        )
        assert code == exit_codes.SUCCESS

    def test_violation_propagates(self) -> None:
        with pytest.raises(InvalidEnvironmentConstantError) as exc_info:
            main(["check-env", "--for-subprocess", "--target-os", "windows", "A=x|y"])
        assert exc_info.value.check is ConstantCheck.WINDOWS_SUBPROCESS

    def test_compiled_executable_flag(self) -> None:
        with pytest.raises(InvalidEnvironmentConstantError):
            main(["check-env", "--for-compiled-executable", "--target-os", "linux", "A=1,2"])

    def test_malformed_definition(self) -> None:
        with pytest.raises(InvalidConstantDefinitionError):
            main(["check-env", "NOEQUALS"])

    def test_repeated_name_does_not_hide_later_value(self) -> None:
        with pytest.raises(InvalidConstantDefinitionError):
            main(["check-env", "--for-subprocess", "--target-os", "windows", "A=1", "A=x|y"])


class TestParseDefinitions:
    def test_value_may_contain_equals(self) -> None:
        assert _parse_definitions(["URL=a=b"]) == {"URL": "a=b"}

    def test_empty_value_allowed(self) -> None:
        assert _parse_definitions(["EMPTY="]) == {"EMPTY": ""}

    def test_keeps_order(self) -> None:
        assert list(_parse_definitions(["B=1", "A=2"])) == ["B", "A"]

    def test_missing_name(self) -> None:
        with pytest.raises(InvalidConstantDefinitionError):
            _parse_definitions(["=value"])

    def test_repeated_name_rejected(self) -> None:
        with pytest.raises(InvalidConstantDefinitionError, match="more than once"):
            _parse_definitions(["A=1", "B=2", "A=3"])


# ---------------------------------------------------------------------------
# rewrite-url
# ---------------------------------------------------------------------------

class TestRewriteUrlCommand:
    def test_unchanged_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["rewrite-url", "https://example.com/repo.git"])
        assert capsys.readouterr().out == "https://example.com/repo.git\n"

    def test_explicit_git_host(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "rewrite-url",
                "--git-host",
                "file:///tmp/fixtures",
                "https://example.com/repo.git",
            ]
        )
        assert capsys.readouterr().out == "file:///tmp/fixtures/repo.git\n"

    def test_environment_fallback(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(HOST_VARIABLE, "http://localhost:8080")
        main(["rewrite-url", "https://api.example.com/releases"])
        assert capsys.readouterr().out == "http://localhost:8080/releases\n"

    def test_option_wins_over_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(GIT_HOST_VARIABLE, "file:///from-env")
        main(["rewrite-url", "--git-host", "file:///from-flag", "https://e.com/r.git"])
        assert capsys.readouterr().out == "file:///from-flag/r.git\n"


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["argsafe", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code or 0)

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, "escape", "-d", "posix", "x") == exit_codes.SUCCESS

    def test_invalid_constant_is_general_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = self._run(
            monkeypatch, "check-env", "--for-subprocess", "--target-os", "windows", "A=|"
        )
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Hint:" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with patch("argsafe.cli.app.main", side_effect=KeyboardInterrupt):
            assert self._run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("argsafe.cli.app.main", side_effect=RuntimeError("kaboom")):
            assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "kaboom" in capsys.readouterr().err

    def test_verbose_flag_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, "-v", "escape", "-d", "windows", "x") == (
            exit_codes.SUCCESS
        )
