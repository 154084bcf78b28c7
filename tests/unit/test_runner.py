#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for reading files and running a search."""

import io
import os
import sys

import pytest

from minigrep import exceptions
from minigrep.config import Config
from minigrep.runner import read_contents, run


@pytest.mark.unit
class TestReadContents:
    """Test read_contents."""

    def test_reads_utf8_text(self, tmp_path):
        path = tmp_path / "text.txt"
        path.write_text("héllo\nwörld\n", encoding="utf-8")

        assert read_contents(str(path)) == "héllo\nwörld\n"

    def test_keeps_windows_line_endings(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\r\n")

        assert read_contents(str(path)) == "one\r\ntwo\r\n"

    def test_missing_file(self, tmp_path):
        missing = str(tmp_path / "missing.txt")

        with pytest.raises(exceptions.FileNotFoundError) as exc_info:
            read_contents(missing)

        assert exc_info.value.file_path == missing
        assert missing in exc_info.value.message
        assert isinstance(exc_info.value.original_error, OSError)

    def test_directory(self, tmp_path):
        with pytest.raises(exceptions.FileAccessError) as exc_info:
            read_contents(str(tmp_path))

        assert exc_info.value.file_path == str(tmp_path)

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores file permissions")
    def test_permission_denied(self, tmp_path):
        path = tmp_path / "secret.txt"
        path.write_text("hidden", encoding="utf-8")
        path.chmod(0)
        try:
            with pytest.raises(exceptions.FileAccessError, match="Permission denied"):
                read_contents(str(path))
        finally:
            path.chmod(0o600)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("caf\xe9\n".encode("latin-1"))

        with pytest.raises(exceptions.FileDecodeError) as exc_info:
            read_contents(str(path))

        assert exc_info.value.file_path == str(path)
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)


@pytest.mark.unit
class TestRun:
    """Test run."""

    def test_case_sensitive_run(self, poem_file):
        out = io.StringIO()
        count = run(Config(query="Id", file_path=str(poem_file)), stream=out)

        assert count == 1
        assert out.getvalue() == "Id adipisci harum aut vero dolorem\n"

    def test_case_insensitive_run(self, poem_file):
        out = io.StringIO()
        count = run(Config(query="doLor", file_path=str(poem_file), ignore_case=True), stream=out)

        assert count == 3
        assert out.getvalue().splitlines() == [
            "Lorem ipsum dolor sit amet.",
            "Id adipisci harum aut vero dolorem",
            "LOREM IPSuM DOLOR SIt AMET.",
        ]

    def test_no_matches_writes_nothing(self, poem_file):
        out = io.StringIO()
        assert run(Config(query="zebra", file_path=str(poem_file)), stream=out) == 0
        assert out.getvalue() == ""

    def test_crlf_file_prints_lines_without_carriage_returns(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"alpha\r\nbeta\r\nalphabet")
        out = io.StringIO()

        run(Config(query="alpha", file_path=str(path)), stream=out)

        assert out.getvalue() == "alpha\nalphabet\n"

    def test_final_bare_carriage_return_is_printed(self, tmp_path):
        path = tmp_path / "cr.txt"
        path.write_bytes(b"one\r\ntwo\r")
        out = io.StringIO()

        run(Config(query="two", file_path=str(path)), stream=out)

        assert out.getvalue() == "two\r\n"

    def test_defaults_to_stdout(self, poem_file, capsys):
        run(Config(query="vel", file_path=str(poem_file)))

        assert capsys.readouterr().out == "vel consequatur veniam aut quis\n"

    def test_read_error_propagates(self, tmp_path):
        out = io.StringIO()
        with pytest.raises(exceptions.FileNotFoundError):
            run(Config(query="x", file_path=str(tmp_path / "nope.txt")), stream=out)
        assert out.getvalue() == ""
