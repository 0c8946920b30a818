# src/family_tree/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/family_tree/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/family_tree/utils
#   [1] .../src/family_tree
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains:
      - src/
      - tests/
      - config/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Absolute paths are returned unchanged.

    Examples:
        resolve_project_path("config/family_tree.yml")
        resolve_project_path(Path("logs") / "family_tree.log")
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def config_file_path(filename: Union[str, Path] = "family_tree.yml") -> Path:
    """
    Return the absolute path to a file under the top-level config/ directory.
    """
    return resolve_project_path(Path("config") / filename)
