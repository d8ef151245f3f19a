"""Command-line entry point: open the file, print the banner, run the engine."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import BinaryIO

from tapehead.config import TapeheadConfig
from tapehead.io.setup import setup_logging
from tapehead.repl.engine import Engine
from tapehead.ui.panels import banner_text, file_info_text, usage_text


class FileMode(Enum):
    """Access the store was opened with."""

    RW = "RW"
    WO = "WO"
    RO = "RO"

    @property
    def readable(self) -> bool:
        return self is not FileMode.WO

    @property
    def writable(self) -> bool:
        return self is not FileMode.RO


def _open_read_write(path: str) -> BinaryIO:
    return open(path, "r+b")


def _open_write_only(path: str) -> BinaryIO:
    # os.open without O_TRUNC so existing contents survive.
    fd = os.open(path, os.O_WRONLY)
    return open(fd, "wb")


def _open_read_only(path: str) -> BinaryIO:
    return open(path, "rb")


# Tried in order; only a permission failure moves on to the next mode.
OPEN_LADDER: list[tuple[FileMode, Callable[[str], BinaryIO]]] = [
    (FileMode.RW, _open_read_write),
    (FileMode.WO, _open_write_only),
    (FileMode.RO, _open_read_only),
]


def try_open(path: str) -> tuple[BinaryIO, FileMode]:
    """Open path with the most capable mode permitted.

    Raises:
        OSError: No mode could be opened.
    """
    *fallbacks, (last_mode, last_opener) = OPEN_LADDER
    for mode, opener in fallbacks:
        try:
            return opener(path), mode
        except PermissionError:
            continue
    return last_opener(path), last_mode


def fatal_message(config: TapeheadConfig, error: object) -> str:
    """Format a fatal error, prefixed with the program name when known."""
    prefix = f"{config.progname}: " if config.progname else ""
    return f"{prefix}error: {error}"


def build_parser(config: TapeheadConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.progname or "tapehead",
        description="Interactive byte editor for inspecting and patching files.",
    )
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument("--version", action="version", version=f"TapeHead v{config.version}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run tapehead and return the process exit status."""
    argv = sys.argv if argv is None else argv
    config = TapeheadConfig.from_argv0(argv[0] if argv else None)
    log = setup_logging()

    args = build_parser(config).parse_args(argv[1:])
    if args.file is None:
        log.info(usage_text(config), extra={"tag": "status"})
        return 1

    try:
        store, mode = try_open(args.file)
    except OSError as e:
        log.error(fatal_message(config, e), extra={"tag": "fatal"})
        return 1

    with store:
        try:
            size = os.fstat(store.fileno()).st_size
            log.info(banner_text(config), extra={"tag": "banner"})
            log.info(file_info_text(args.file, size, mode.value), extra={"tag": "status"})
            Engine(store, config=config, log=log).run()
        except OSError as e:
            log.error(fatal_message(config, e), extra={"tag": "fatal"})
            return 1
        except KeyboardInterrupt:
            log.info("", extra={"tag": "status"})
            return 130

    return 0
