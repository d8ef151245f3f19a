"""Tests for the command loop."""

from __future__ import annotations

import io

import pytest

from tapehead.core.commands import Nop, Quit, Seek
from tapehead.core.seek import Absolute
from tapehead.repl.engine import Engine, EngineState, format_prompt
from tapehead.ui.hexdump import render_hexdump


class TestFormatPrompt:
    """Tests for the status prompt."""

    def test_position_only(self):
        assert format_prompt(0, 0, 0) == "[pos:0]> "

    def test_counters_shown_when_nonzero(self):
        assert format_prompt(4, 2, 10) == "[in:4, out:2, pos:10]> "
        assert format_prompt(4, 0, 10) == "[in:4, pos:10]> "
        assert format_prompt(0, 2, 10) == "[out:2, pos:10]> "

    def test_unknown_position(self):
        assert format_prompt(0, 0, None) == "[pos:*]> "


class TestRead:
    def test_read_count_bytes(self, run_engine):
        stdout, stderr, engine = run_engine(io.BytesIO(b"Hello, world!"), b"read 0 5\nquit\n")
        assert stdout == b"Hello"
        assert "[pos:0]> " in stderr
        assert "[in:5, pos:5]> " in stderr
        assert engine.state is EngineState.STOPPED

    def test_read_to_end(self, run_engine):
        stdout, stderr, _ = run_engine(io.BytesIO(b"Hello, world!"), b"read 7\n")
        assert stdout == b"world!"
        assert "[in:6, pos:13]> " in stderr

    def test_count_past_end_returns_what_is_there(self, run_engine):
        stdout, stderr, engine = run_engine(io.BytesIO(b"Hello, world!"), b"read 10 100\n")
        assert stdout == b"ld!"
        assert "[in:3, pos:13]> " in stderr

    def test_read_at_end_prints_nothing(self, run_engine):
        stdout, stderr, _ = run_engine(io.BytesIO(b"abc"), b"read <\n")
        assert stdout == b""
        assert "[pos:0]> [pos:3]> " in stderr

    def test_relative_read_advances_cursor(self, run_engine):
        stdout, _, _ = run_engine(io.BytesIO(b"abcdef"), b"read 1 1\nread +1 1\nread -3 2\n")
        assert stdout == b"bdbc"

    def test_counters_reset_each_iteration(self, run_engine):
        _, stderr, _ = run_engine(io.BytesIO(b"abcdef"), b"read 0 2\nseek 0\n")
        assert stderr.endswith("[in:2, pos:2]> [pos:0]> \n")

    def test_input_without_trailing_newline_is_accepted(self, run_engine):
        stdout, _, _ = run_engine(io.BytesIO(b"abc"), b"read 0 2")
        assert stdout == b"ab"


class TestReadHex:
    def test_hexdump_from_start(self, run_engine):
        stdout, stderr, _ = run_engine(io.BytesIO(b"Hello, world!"), b"readhex 0\n")
        assert stdout == render_hexdump(b"Hello, world!", 0).encode()
        assert "[in:13, pos:13]> " in stderr

    def test_hexdump_uses_absolute_offset(self, run_engine):
        data = bytes(range(40))
        stdout, _, _ = run_engine(io.BytesIO(data), b"readhex 20< 4\n")
        assert stdout == b"  20: 1415 1617" + b" " * 30 + b"  ....\n"

    def test_empty_hexdump(self, run_engine):
        stdout, _, _ = run_engine(io.BytesIO(b"abc"), b"readhex <\n")
        assert stdout == b""


class TestWrite:
    def test_write_payload_verbatim(self, run_engine):
        store = io.BytesIO(b"0123456789")
        _, stderr, _ = run_engine(store, b"write 2 ab cd\n")
        assert store.getvalue() == b"01ab cd789"
        assert "[out:5, pos:7]> " in stderr

    def test_empty_payload_is_noop(self, run_engine):
        store = io.BytesIO(b"0123456789")
        _, stderr, _ = run_engine(store, b"seek 3\nwrite 9   \n")
        assert store.getvalue() == b"0123456789"
        assert stderr.endswith("[pos:3]> [pos:3]> \n")
        assert "out:" not in stderr

    def test_writehex(self, run_engine):
        store = io.BytesIO(b"xyz")
        _, stderr, _ = run_engine(store, b"writehex 1< 41 42\n")
        assert store.getvalue() == b"xyAB"
        assert "[out:2, pos:4]> " in stderr

    def test_write_then_read_round_trip(self, run_engine):
        store = io.BytesIO(bytes(32))
        stdout, _, _ = run_engine(store, b"write 8 \x01payload\xfe\nread 8 9\n")
        assert stdout == b"\x01payload\xfe"

    def test_write_to_read_only_file_reports_error(self, run_engine, tmp_path):
        path = tmp_path / "ro.bin"
        path.write_bytes(b"abc")
        with open(path, "rb") as store:
            _, stderr, _ = run_engine(store, b"write 0 x\nread 0\n")
        assert "error: File not writable" in stderr
        assert path.read_bytes() == b"abc"

    def test_write_is_visible_on_disk_before_close(self, run_engine, tmp_path):
        path = tmp_path / "rw.bin"
        path.write_bytes(b"abcdef")
        with open(path, "r+b") as store:
            run_engine(store, b"writehex 0 5a\n")
            assert path.read_bytes() == b"Zbcdef"


class TestErrors:
    def test_parse_error_is_reported_and_loop_continues(self, run_engine):
        stdout, stderr, _ = run_engine(io.BytesIO(b"abc"), b"bogus\nread 0\n")
        assert 'error: Unrecognized command. Enter "help" for usage.' in stderr
        assert stdout == b"abc"

    def test_parse_error_leaves_store_untouched(self, run_engine):
        store = io.BytesIO(b"abc")
        run_engine(store, b"writehex 0 41 zz\n")
        assert store.getvalue() == b"abc"

    def test_oversized_seek_is_reported_and_loop_continues(self, run_engine):
        stdout, stderr, engine = run_engine(io.BytesIO(b"abc"), b"seek 9223372036854775808\nread 0\n")
        assert "error:" in stderr
        assert stdout == b"abc"
        assert engine.state is EngineState.STOPPED

    def test_seek_error_on_seekable_file(self, run_engine, tmp_path):
        path = tmp_path / "f.bin"
        path.write_bytes(b"abc")
        with open(path, "r+b") as store:
            _, stderr, _ = run_engine(store, b"seek -5\n")
        assert "error:" in stderr
        assert "not seekable" not in stderr

    def test_help(self, run_engine):
        _, stderr, _ = run_engine(io.BytesIO(b""), b"help\n")
        assert "TapeHead v0.1.0" in stderr
        assert "writehex <seek>" in stderr


class TestNonSeekableStore:
    def test_position_is_unknown(self, run_engine, stream_store):
        _, stderr, _ = run_engine(stream_store(b"abc"), b"\n")
        assert "[pos:*]> " in stderr
        assert "error" not in stderr

    def test_stay_read_works(self, run_engine, stream_store):
        stdout, _, _ = run_engine(stream_store(b"abcdef"), b"read . 2\nread . 2\n")
        assert stdout == b"abcd"

    def test_other_seeks_name_the_workaround(self, run_engine, stream_store):
        _, stderr, _ = run_engine(stream_store(b"abc"), b"seek 1\n")
        assert "error: File not seekable. Use `.` in seek argument." in stderr

    def test_hexdump_offsets_start_at_zero(self, run_engine, stream_store):
        stdout, _, _ = run_engine(stream_store(b"abc"), b"readhex .\n")
        assert stdout.startswith(b"   0: 6162 63")


class TestExecute:
    @pytest.fixture
    def engine(self, diagnostics):
        return Engine(io.BytesIO(b"abcdef"), stdin=io.BytesIO(), stdout=io.BytesIO())

    def test_quit_stops(self, engine):
        assert engine.execute(Quit()) is EngineState.STOPPED

    def test_nop_keeps_prompting(self, engine):
        assert engine.execute(Nop()) is EngineState.PROMPTING

    def test_seek_moves_store_cursor(self, engine):
        engine.execute(Seek(seek=Absolute(offset=4)))
        assert engine.store.tell() == 4

    def test_quit_ignores_remaining_input(self, run_engine):
        stdout, _, _ = run_engine(io.BytesIO(b"abc"), b"quit\nread 0\n")
        assert stdout == b""
