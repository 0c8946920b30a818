from __future__ import annotations

from .grouping import (
    FamilyUnit,
    ParentKey,
    UnattachedPolicy,
    group_family_units,
    parent_key,
)
from .renderer import (
    LayoutSettings,
    center,
    children_line,
    connector_cell,
    parent_line,
    render_generation,
    render_tree,
    truncate_name,
    unit_width,
)
from .walker import (
    Generation,
    GenerationWalker,
    WalkState,
    expand_generation,
    seed_generation,
)

__all__ = [
    "FamilyUnit",
    "Generation",
    "GenerationWalker",
    "LayoutSettings",
    "ParentKey",
    "UnattachedPolicy",
    "WalkState",
    "center",
    "children_line",
    "connector_cell",
    "expand_generation",
    "group_family_units",
    "parent_key",
    "parent_line",
    "render_generation",
    "render_tree",
    "seed_generation",
    "truncate_name",
    "unit_width",
]
