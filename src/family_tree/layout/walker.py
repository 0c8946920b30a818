"""
Breadth-first generation walk over family units.

Generation 0 is seeded from the root; each following generation groups the
structural children of every child of the previous generation who has any.
The walk stops at the first empty generation. Parent/child data is assumed
acyclic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List

from family_tree.core.exceptions import NoRootError
from family_tree.layout.grouping import FamilyUnit, UnattachedPolicy, group_family_units
from family_tree.logging import get_logger
from family_tree.registry.entities import Individual, MemberRegistry

log = get_logger(__name__)


class WalkState(str, Enum):
    PENDING = "pending"
    RENDERED = "rendered"
    COMPLETE = "complete"


@dataclass(slots=True)
class Generation:
    index: int
    units: List[FamilyUnit] = field(default_factory=list)


def seed_generation(
    registry: MemberRegistry,
    policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
    *,
    seed_root_children: bool = False,
) -> List[FamilyUnit]:
    """
    Build generation 0.

    A parentless root forms its own (None, None) unit and its children follow
    in generation 1. A root with recorded parents is not shown as a child, so
    generation 0 holds everyone naming the root as father or mother.
    ``seed_root_children`` puts both into generation 0; the default departs
    from the original program, which seeded the children there as well and
    then drew them a second time in generation 1.
    """
    if not registry.has_root:
        raise NoRootError("No root ancestor has been created")
    root = registry.root

    seeds: List[Individual] = []
    for member in registry:
        names_root = root.uid in (member.father_id, member.mother_id)
        is_top = member.uid == root.uid and not member.has_parents
        if is_top or (names_root and (seed_root_children or root.has_parents)):
            seeds.append(member)

    units = group_family_units(seeds, registry, policy)
    if not units:
        log.debug("Generation 0 empty; falling back to the lone root unit")
        units = [FamilyUnit(children=[root])]
    return units


def expand_generation(
    units: List[FamilyUnit],
    registry: MemberRegistry,
    policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
) -> List[FamilyUnit]:
    """Compute the family units of the generation after ``units``."""
    seen: Dict[int, Individual] = {}
    for unit in units:
        for child in unit.children:
            seen.setdefault(child.uid, child)

    next_members: List[Individual] = []
    for parent in seen.values():
        if parent.has_children:
            next_members.extend(registry.children_of(parent))

    return group_family_units(next_members, registry, policy)


class GenerationWalker:
    """
    State machine driving the generation walk.

    ``PENDING``: generation ``index`` is computed but not yet emitted.
    ``RENDERED``: it has been emitted; ``advance()`` computes the next one.
    ``COMPLETE``: an expansion produced no units.
    """

    def __init__(
        self,
        registry: MemberRegistry,
        policy: UnattachedPolicy = UnattachedPolicy.PRESERVE,
        *,
        seed_root_children: bool = False,
    ):
        self.registry = registry
        self.policy = policy
        self.generation = 0
        self.units = seed_generation(registry, policy, seed_root_children=seed_root_children)
        self.state = WalkState.PENDING

    @property
    def current(self) -> Generation:
        return Generation(self.generation, list(self.units))

    def mark_rendered(self) -> None:
        if self.state is not WalkState.PENDING:
            raise RuntimeError(f"Cannot mark generation rendered from state {self.state.value}")
        self.state = WalkState.RENDERED

    def advance(self) -> WalkState:
        if self.state is not WalkState.RENDERED:
            raise RuntimeError(f"Cannot advance from state {self.state.value}")

        next_units = expand_generation(self.units, self.registry, self.policy)
        if not next_units:
            log.debug("Walk complete after %d generation(s)", self.generation + 1)
            self.units = []
            self.state = WalkState.COMPLETE
        else:
            self.generation += 1
            self.units = next_units
            self.state = WalkState.PENDING
        return self.state

    def __iter__(self) -> Iterator[Generation]:
        while self.state is not WalkState.COMPLETE:
            if self.state is WalkState.PENDING:
                yield self.current
                self.mark_rendered()
            self.advance()
