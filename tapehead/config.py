"""Program configuration passed explicitly to the engine and CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


def _default_version() -> str:
    from tapehead import __version__

    return __version__


class TapeheadConfig(BaseModel):
    """Identity and tuning for one tapehead process.

    Attributes:
        progname: Basename of argv[0], used to prefix fatal errors.
        version: Version shown in the banner and help text.
        buffer_capacity: Initial size of the engine's scratch buffer.
    """

    progname: str = ""
    version: str = Field(default_factory=_default_version)
    buffer_capacity: int = Field(default=8192, gt=0)

    @classmethod
    def from_argv0(cls, argv0: str | None) -> TapeheadConfig:
        """Build a config whose progname is the basename of argv[0]."""
        progname = Path(argv0).name if argv0 else ""
        return cls(progname=progname)
