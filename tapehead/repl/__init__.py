"""Command loop over a byte store."""

from tapehead.repl.engine import Engine, EngineState, format_prompt

__all__ = ["Engine", "EngineState", "format_prompt"]
