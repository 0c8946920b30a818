"""
Centered text layout for family units.

Each generation prints as three rows (parents, connector, children) made of
fixed-width blocks, one block per family unit, separated by a constant gap.
Every display character is assumed to occupy one column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from family_tree.core.exceptions import NoRootError
from family_tree.layout.grouping import FamilyUnit, UnattachedPolicy
from family_tree.layout.walker import GenerationWalker
from family_tree.logging import get_logger
from family_tree.registry.entities import Individual, MemberRegistry

log = get_logger(__name__)

MAX_NAME = 15
HSPACE = 6
MIN_WIDTH = 6
CONNECTOR = "│"
UNKNOWN_NAME = "Unknown"

TREE_HEADER = "=== CENTERED FAMILY TREE ==="
TREE_FOOTER = "=== END OF TREE ==="


@dataclass(frozen=True)
class LayoutSettings:
    max_name: int = MAX_NAME
    gap: int = HSPACE
    min_width: int = MIN_WIDTH
    connector: str = CONNECTOR
    seed_root_children: bool = False

    @classmethod
    def from_config(cls, layout: Mapping[str, Any]) -> "LayoutSettings":
        return cls(
            max_name=int(layout.get("max_name", MAX_NAME)),
            gap=int(layout.get("gap", HSPACE)),
            min_width=int(layout.get("min_width", MIN_WIDTH)),
            connector=str(layout.get("connector", CONNECTOR))[:1] or CONNECTOR,
            seed_root_children=bool(layout.get("seed_root_children", False)),
        )


DEFAULT_SETTINGS = LayoutSettings()


# ---------------------------------------------------------
# Text derivation
# ---------------------------------------------------------

def truncate_name(name: str, limit: int = MAX_NAME) -> str:
    """Cut ``name`` to ``limit`` characters, no ellipsis."""
    return name[:limit]


def _parent_label(parent: Optional[Individual], default_gender: str, limit: int) -> str:
    if parent is None:
        return f"{truncate_name(UNKNOWN_NAME, limit)} ({default_gender})"
    return f"{truncate_name(parent.name, limit)} ({parent.gender})"


def parent_line(unit: FamilyUnit, settings: LayoutSettings = DEFAULT_SETTINGS) -> str:
    # Missing parents display as M for the father slot and F for the mother slot.
    father = _parent_label(unit.father, "M", settings.max_name)
    mother = _parent_label(unit.mother, "F", settings.max_name)
    return f"{father} - {mother}"


def children_line(unit: FamilyUnit, settings: LayoutSettings = DEFAULT_SETTINGS) -> str:
    return " ".join(truncate_name(c.name, settings.max_name) for c in unit.children)


def unit_width(unit: FamilyUnit, settings: LayoutSettings = DEFAULT_SETTINGS) -> int:
    return max(
        len(parent_line(unit, settings)),
        len(children_line(unit, settings)),
        settings.min_width,
    )


# ---------------------------------------------------------
# Cell layout
# ---------------------------------------------------------

def left_pad(text: str, width: int) -> int:
    return (width - len(text)) // 2


def center(text: str, width: int) -> str:
    """Center ``text`` in exactly ``width`` columns, extra space on the right."""
    pad = left_pad(text, width)
    return " " * pad + text + " " * (width - pad - len(text))


def connector_offset(text: str, width: int) -> int:
    return left_pad(text, width) + len(text) // 2


def connector_cell(text: str, width: int, glyph: str = CONNECTOR) -> str:
    """A ``width``-column cell holding ``glyph`` under the middle of centered ``text``."""
    pre = connector_offset(text, width)
    return " " * pre + glyph + " " * max(width - pre - 1, 0)


# ---------------------------------------------------------
# Generation and tree rendering
# ---------------------------------------------------------

def render_generation(
    units: List[FamilyUnit],
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> List[str]:
    """
    Render one generation block: parent row, connector row, children row and
    a blank separator line.
    """
    if not units:
        return []

    parents = [parent_line(u, settings) for u in units]
    children = [children_line(u, settings) for u in units]
    widths = [unit_width(u, settings) for u in units]
    gap = " " * settings.gap

    parent_row = gap.join(center(p, w) for p, w in zip(parents, widths))
    connector_row = gap.join(
        connector_cell(p, w, settings.connector) for p, w in zip(parents, widths)
    )
    children_row = gap.join(center(c, w) for c, w in zip(children, widths))

    return [parent_row, connector_row, children_row, ""]


def render_tree(
    registry: MemberRegistry,
    settings: LayoutSettings = DEFAULT_SETTINGS,
    policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
) -> List[str]:
    """
    Render the whole tree, generation by generation, as a list of lines.
    """
    if not registry.has_root:
        raise NoRootError("No tree. Create root first.")

    lines: List[str] = ["", TREE_HEADER, ""]
    walker = GenerationWalker(
        registry,
        policy,
        seed_root_children=settings.seed_root_children,
    )

    count = 0
    for generation in walker:
        log.debug(
            "Generation %d: %d unit(s)",
            generation.index,
            len(generation.units),
        )
        lines.extend(render_generation(generation.units, settings))
        count += 1

    lines.append(TREE_FOOTER)
    log.info("Rendered tree for root %r: %d generation(s)", registry.root.name, count)
    return lines
