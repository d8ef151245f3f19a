"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from io import StringIO

import pytest
from rich.console import Console

from tapehead.config import TapeheadConfig
from tapehead.io.setup import setup_logging
from tapehead.repl.engine import Engine


class StreamStore(io.BytesIO):
    """In-memory store that refuses to seek, like a pipe."""

    def seekable(self) -> bool:
        return False

    def seek(self, *args, **kwargs) -> int:
        raise io.UnsupportedOperation("seek")

    def tell(self) -> int:
        raise io.UnsupportedOperation("tell")


@pytest.fixture
def diagnostics() -> StringIO:
    """Route the tapehead logger to a captured console and return its buffer."""
    output = StringIO()
    setup_logging(Console(file=output, width=200))
    return output


@pytest.fixture
def run_engine(diagnostics):
    """Run an engine over store with the given input; return (stdout, stderr, engine)."""

    def _run(store, commands: bytes) -> tuple[bytes, str, Engine]:
        stdout = io.BytesIO()
        engine = Engine(
            store,
            config=TapeheadConfig(progname="tapehead", version="0.1.0"),
            stdin=io.BytesIO(commands),
            stdout=stdout,
        )
        engine.run()
        return stdout.getvalue(), diagnostics.getvalue(), engine

    return _run


@pytest.fixture
def stream_store():
    """Factory for in-memory stores that cannot seek."""
    return StreamStore
