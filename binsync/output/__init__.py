# binsync Output Module
# Rich console output

from binsync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
