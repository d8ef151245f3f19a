"""Main entry point for running tapehead as a module.

Usage:
    python -m tapehead <file>
"""

import sys

from tapehead.cli import main

sys.exit(main())
