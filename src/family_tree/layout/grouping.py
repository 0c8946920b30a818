"""
Family grouping: partition individuals into family units keyed by their
(father, mother) pair.

Keys compare uids, never names, so two different people who happen to share
a display prefix still form separate units.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from family_tree.registry.entities import Individual, MemberRegistry

ParentKey = Tuple[Optional[int], Optional[int]]


class UnattachedPolicy(str, Enum):
    """
    How members added without parents are keyed for layout.

    PRESERVE: keyed by their recorded (None, None) parents, exactly as stored.
    ATTACH_TO_ROOT: the individual listing them as a child becomes an implicit
    layout parent.
    """
    PRESERVE = "preserve"
    ATTACH_TO_ROOT = "attach_to_root"


@dataclass(slots=True)
class FamilyUnit:
    father: Optional[Individual] = None
    mother: Optional[Individual] = None
    children: List[Individual] = field(default_factory=list)

    @property
    def key(self) -> ParentKey:
        return (
            self.father.uid if self.father is not None else None,
            self.mother.uid if self.mother is not None else None,
        )

    def child_names(self) -> List[str]:
        return [c.name for c in self.children]


def parent_key(
    member: Individual,
    registry: MemberRegistry,
    policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
) -> ParentKey:
    if member.has_parents or policy is UnattachedPolicy.PRESERVE:
        return (member.father_id, member.mother_id)

    holder = registry.structural_parent_of(member)
    if holder is None:
        return (None, None)
    if holder.gender == "M":
        return (holder.uid, None)
    return (None, holder.uid)


def group_family_units(
    members: Iterable[Individual],
    registry: MemberRegistry,
    policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
) -> List[FamilyUnit]:
    """
    Group ``members`` into family units.

    Units appear in the order their first child was met; children keep
    encounter order within a unit.
    """
    units: Dict[ParentKey, FamilyUnit] = {}

    for member in members:
        key = parent_key(member, registry, policy)
        unit = units.get(key)
        if unit is None:
            father_id, mother_id = key
            unit = FamilyUnit(
                father=registry.get(father_id),
                mother=registry.get(mother_id),
            )
            units[key] = unit
        unit.children.append(member)

    return list(units.values())
