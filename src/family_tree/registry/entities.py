from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from family_tree.core.exceptions import (
    DuplicateNameError,
    InvalidInputError,
    MemberNotFoundError,
    NoRootError,
    RootExistsError,
)
from family_tree.logging import get_logger

log = get_logger(__name__)

MAX_STORED_NAME = 63


def normalize_gender(value: str) -> str:
    """Anything other than m/M is stored as F."""
    return "M" if value in ("M", "m") else "F"


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    """
    One person record.

    ``uid`` is the arena index inside the owning registry and the identity
    used by every comparison. Parent/child links are uids, never objects.
    """
    uid: int
    name: str
    gender: str = "M"
    alive: bool = True

    # Genealogical parents
    father_id: Optional[int] = None
    mother_id: Optional[int] = None

    # Structural child list: who is listed under this person, in insertion order
    children_ids: List[int] = field(default_factory=list)

    @property
    def has_parents(self) -> bool:
        return self.father_id is not None or self.mother_id is not None

    @property
    def has_children(self) -> bool:
        return bool(self.children_ids)


# -----------------------------
# Registry
# -----------------------------

@dataclass(slots=True)
class MemberRegistry:
    """
    In-memory arena owning every individual, indexed by uid and by name.
    """
    max_stored_name: int = MAX_STORED_NAME
    individuals: List[Individual] = field(default_factory=list)
    by_name: Dict[str, int] = field(default_factory=dict)
    root_id: Optional[int] = None

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.individuals)

    @property
    def members(self) -> List[Individual]:
        return list(self.individuals)

    @property
    def has_root(self) -> bool:
        return self.root_id is not None

    @property
    def root(self) -> Individual:
        if self.root_id is None:
            raise NoRootError("No root ancestor has been created")
        return self.individuals[self.root_id]

    def stored_name(self, name: str) -> str:
        return name[: self.max_stored_name]

    def create(self, name: str, gender: str, alive: bool = True) -> Individual:
        stored = self.stored_name(name)
        if not stored:
            raise InvalidInputError("Empty name")
        if stored in self.by_name:
            raise DuplicateNameError(stored)

        ind = Individual(
            uid=len(self.individuals),
            name=stored,
            gender=normalize_gender(gender),
            alive=alive,
        )
        self.individuals.append(ind)
        self.by_name[stored] = ind.uid
        log.info("Created member %r (uid=%d, gender=%s, alive=%s)", ind.name, ind.uid, ind.gender, ind.alive)
        return ind

    def create_root(self, name: str, gender: str, alive: bool = True) -> Individual:
        if self.root_id is not None:
            raise RootExistsError("Root already exists")
        ind = self.create(name, gender, alive)
        self.root_id = ind.uid
        log.info("Root set to %r", ind.name)
        return ind

    def get(self, uid: Optional[int]) -> Optional[Individual]:
        if uid is None:
            return None
        return self.individuals[uid]

    def find_by_name(self, name: str) -> Optional[Individual]:
        uid = self.by_name.get(self.stored_name(name))
        return self.get(uid)

    def require(self, name: str) -> Individual:
        ind = self.find_by_name(name)
        if ind is None:
            raise MemberNotFoundError(name)
        return ind

    def father_of(self, ind: Individual) -> Optional[Individual]:
        return self.get(ind.father_id)

    def mother_of(self, ind: Individual) -> Optional[Individual]:
        return self.get(ind.mother_id)

    def children_of(self, ind: Individual) -> List[Individual]:
        return [self.individuals[uid] for uid in ind.children_ids]

    def structural_parent_of(self, ind: Individual) -> Optional[Individual]:
        for candidate in self.individuals:
            if ind.uid in candidate.children_ids:
                return candidate
        return None

    def set_alive(self, ind: Individual, alive: bool) -> None:
        ind.alive = alive
        log.info("Member %r alive=%s", ind.name, alive)
