"""
Centered family tree: member registry, generation layout and console menu.
"""

__version__ = "0.1.0"
