"""Tests for the command-line front end."""

from __future__ import annotations

from pathlib import Path

import pytest

from mediatype import cli


class TestParseCommand:
    def test_shows_parts(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["parse", "Text/HTML; charset=utf-8"]) == 0
        out = capsys.readouterr().out
        assert "text" in out
        assert "html" in out
        assert "charset" in out
        assert "utf-8" in out

    def test_malformed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["parse", "nonsense"]) == 1
        assert "Malformed media type" in capsys.readouterr().out


class TestMatchCommand:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["match", "text/*", "text/html"]) == 0
        assert "text/* matches text/html" in capsys.readouterr().out

    def test_no_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["match", "text/plain", "image/png"]) == 1
        assert "does not match" in capsys.readouterr().out

    def test_malformed_operand(self) -> None:
        assert cli.run(["match", "*/*", "bogus"]) == 1


class TestLookupCommands:
    def test_ext(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["ext", "json"]) == 0
        assert capsys.readouterr().out.strip() == "application/json"

    def test_unknown_ext(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["ext", "unknownext"]) == 1
        assert "Unknown extension" in capsys.readouterr().out

    def test_unknown_ext_with_fallback(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["ext", "unknownext", "--fallback"]) == 0
        assert capsys.readouterr().out.strip() == "application/octet-stream"

    def test_fallback_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from mediatype.util.singletons import reset_all_singletons

        monkeypatch.setenv("MEDIATYPE_FALLBACK", "text/plain")
        reset_all_singletons()
        assert cli.run(["file", "README", "--fallback"]) == 0
        assert capsys.readouterr().out.strip() == "text/plain"

    def test_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["file", "docs/Index.HTML"]) == 0
        assert capsys.readouterr().out.strip() == "text/html"


class TestHandleLine:
    def test_runs_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.handle_line("ext png") == 0
        assert "image/png" in capsys.readouterr().out

    def test_quoted_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.handle_line('parse "text/plain; format=flowed"') == 0
        assert "flowed" in capsys.readouterr().out

    def test_usage_error_does_not_exit(self) -> None:
        assert cli.handle_line("frobnicate") == 2

    def test_unbalanced_quotes(self) -> None:
        assert cli.handle_line('parse "text/plain') == 2


class TestMain:
    def test_exit_status(self) -> None:
        with pytest.raises(SystemExit) as info:
            cli.main(["ext", "json"])
        assert info.value.code == 0

    def test_exit_status_failure(self) -> None:
        with pytest.raises(SystemExit) as info:
            cli.main(["ext", "nope"])
        assert info.value.code == 1

    def test_interactive_shell(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        history_file: Path,
    ) -> None:
        lines = iter(["", "ext json", "/quit", "ext png"])
        seen: dict[str, object] = {}

        class FakeSession:
            def __init__(self, history=None) -> None:
                seen["history"] = history

            def prompt(self, message) -> str:
                return next(lines)

        monkeypatch.setattr(cli, "PromptSession", FakeSession)
        cli.main([])

        out = capsys.readouterr().out
        assert "application/json" in out
        assert "image/png" not in out
        assert "Goodbye" in out
        assert seen["history"].filename == str(history_file)

    def test_interactive_shell_eof(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        class FakeSession:
            def __init__(self, history=None) -> None:
                pass

            def prompt(self, message) -> str:
                raise EOFError

        monkeypatch.setattr(cli, "PromptSession", FakeSession)
        cli.main([])
        assert "Goodbye" in capsys.readouterr().out
