"""Rich console bound to the diagnostic stream."""

from rich.console import Console

# Prompts, errors and help go to stderr; stdout carries only dumped bytes.
console = Console(stderr=True, highlight=False, soft_wrap=True)
