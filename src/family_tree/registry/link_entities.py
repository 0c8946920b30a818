from __future__ import annotations

from typing import Optional

from family_tree.logging import get_logger
from family_tree.registry.entities import Individual, MemberRegistry

log = get_logger(__name__)


def attach_child(parent: Individual, child: Individual) -> None:
    """Append ``child`` to the structural child list of ``parent`` (once)."""
    if child.uid not in parent.children_ids:
        parent.children_ids.append(child.uid)


def attach_under_root(registry: MemberRegistry, member: Individual) -> None:
    """Keep a member without a reachable parent visible by listing it under the root."""
    attach_child(registry.root, member)
    log.debug("Attached %r under root %r", member.name, registry.root.name)


def link_member(
    registry: MemberRegistry,
    member: Individual,
    father: Optional[Individual] = None,
    mother: Optional[Individual] = None,
) -> None:
    """
    Record the parents of a newly added member.

    Rules:
      - a known father is recorded and lists the member as his child
      - a known mother is recorded; she lists the member only when no father is known
      - with no parents at all the member is listed under the root

    Every member therefore sits in exactly one structural child list.
    """
    if father is not None:
        member.father_id = father.uid
        attach_child(father, member)

    if mother is not None:
        member.mother_id = mother.uid
        if father is None:
            attach_child(mother, member)

    if father is None and mother is None:
        attach_under_root(registry, member)

    log.info(
        "Linked %r (father=%r, mother=%r)",
        member.name,
        father.name if father else None,
        mother.name if mother else None,
    )
