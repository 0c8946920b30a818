
"""
CLI command modules for family_tree.

Each command module defines a single Typer-compatible command function.
"""

from family_tree.cli.commands.run import run_command

__all__ = [
    "run_command",
]
