"""
TapeHead - a line-oriented byte editor REPL.

Move a cursor around an open file, dump bytes raw or as a hexdump, and patch
bytes at arbitrary offsets using short text commands.
"""

from tapehead.config import TapeheadConfig

__version__ = "0.1.0"
__all__ = ["TapeheadConfig", "__version__"]
