"""
Interactive console layer: I/O port, prompt helpers, menu operations.
"""

from family_tree.interactive.menu import Menu
from family_tree.interactive.port import ConsolePort, RichConsolePort, ScriptedPort
from family_tree.interactive.session import FamilyTreeSession

__all__ = [
    "ConsolePort",
    "FamilyTreeSession",
    "Menu",
    "RichConsolePort",
    "ScriptedPort",
]
