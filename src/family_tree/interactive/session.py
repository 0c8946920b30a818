"""
Menu operations over a member registry.

Every operator-facing message is written through the injected console port.
Registry errors are reported and the operation is abandoned; nothing here
terminates the program.
"""

from __future__ import annotations

from typing import Optional

from family_tree.config import TreeConfig, get_config
from family_tree.core.exceptions import (
    DuplicateNameError,
    FamilyTreeError,
    MemberNotFoundError,
    NoRootError,
    RootExistsError,
)
from family_tree.interactive.port import ConsolePort
from family_tree.interactive.prompts import (
    read_gender,
    read_text,
    read_yes_no,
    read_yes_no_default_yes,
)
from family_tree.layout.grouping import UnattachedPolicy
from family_tree.layout.renderer import LayoutSettings, render_tree
from family_tree.logging import get_logger
from family_tree.registry.entities import Individual, MemberRegistry
from family_tree.registry.link_entities import attach_under_root, link_member

log = get_logger(__name__)


class FamilyTreeSession:
    def __init__(
        self,
        port: ConsolePort,
        registry: Optional[MemberRegistry] = None,
        config: Optional[TreeConfig] = None,
    ):
        cfg = config or get_config()
        self.port = port
        if registry is None:
            registry = MemberRegistry(
                max_stored_name=int(cfg.registry.get("max_stored_name", 63))
            )
        self.registry = registry
        self.settings = LayoutSettings.from_config(cfg.layout)
        self.policy = UnattachedPolicy(cfg.unattached_policy)

    @property
    def _max_name(self) -> int:
        return self.registry.max_stored_name

    # ---------------------------------------------------------
    # 1. Create root
    # ---------------------------------------------------------
    def create_root_interactive(self) -> bool:
        if self.registry.has_root:
            self.port.write("Root already exists.")
            return False

        name = read_text(self.port, "Enter root ancestor full name: ", self._max_name)
        if not name:
            self.port.write("Empty name. Aborted.")
            return False
        gender = read_gender(self.port, "Enter gender (M/F): ")
        alive = read_yes_no_default_yes(self.port, "Is ancestor alive? (y/n) [y]: ")

        try:
            root = self.registry.create_root(name, gender, alive)
        except RootExistsError:
            self.port.write("Root already exists.")
            return False

        self.port.write(f"Root '{root.name}' created.")
        return True

    # ---------------------------------------------------------
    # 2. Add member
    # ---------------------------------------------------------
    def _create_attached(self, name: str, role: str, suggestion: str = "") -> Individual:
        gender = read_gender(self.port, f"Enter {role}'s gender (M/F){suggestion}: ")
        alive = read_yes_no_default_yes(self.port, f"Is {role} alive? (y/n) [y]: ")
        member = self.registry.create(name, gender, alive)
        attach_under_root(self.registry, member)
        return member

    def _resolve_parent(self, role: str) -> Optional[Individual]:
        name = read_text(self.port, f"Enter {role}'s name (or blank if unknown): ", self._max_name)
        if not name:
            return None

        found = self.registry.find_by_name(name)
        if found is not None:
            return found

        title = role.capitalize()
        if not read_yes_no(self.port, f"{title} not found. Create {role} now? (y/n): "):
            return None

        member = self._create_attached(name, role)
        self.port.write(f"{title} created and attached under root for visibility.")
        return member

    def _complete_pair(self, role: str) -> Optional[Individual]:
        """Offer to set the missing parent of a half-known pair."""
        if not read_yes_no(self.port, f"{role.capitalize()} missing. Create/set {role} now? (y/n): "):
            return None

        name = read_text(self.port, f"Enter {role}'s name: ", self._max_name)
        if not name:
            return None

        found = self.registry.find_by_name(name)
        if found is not None:
            return found

        suggested = "M" if role == "father" else "F"
        return self._create_attached(name, role, f" [{suggested} suggested]")

    def add_member_interactive(self) -> Optional[Individual]:
        if not self.registry.has_root:
            self.port.write("Create root first (option 1).")
            return None

        name = read_text(self.port, "Enter new member full name: ", self._max_name)
        if not name:
            self.port.write("Empty name. Aborted.")
            return None
        if self.registry.find_by_name(name) is not None:
            self.port.write("Member already exists. Aborted.")
            return None

        gender = read_gender(self.port, "Enter gender (M/F): ")
        alive = read_yes_no_default_yes(self.port, "Is person alive? (y/n) [y]: ")

        father: Optional[Individual] = None
        mother: Optional[Individual] = None
        try:
            if read_yes_no(self.port, "Do you want to specify parents for this member? (y/n): "):
                father = self._resolve_parent("father")
                mother = self._resolve_parent("mother")

                if father is not None and mother is None:
                    mother = self._complete_pair("mother")
                elif mother is not None and father is None:
                    father = self._complete_pair("father")

            member = self.registry.create(name, gender, alive)
        except DuplicateNameError as exc:
            log.warning("Add member aborted: %s", exc)
            self.port.write("Member already exists. Aborted.")
            return None

        link_member(self.registry, member, father, mother)
        if father is None and mother is None:
            self.port.write("No parents specified; member attached under root for visibility.")

        self.port.write(f"Member '{member.name}' added successfully.")
        return member

    # ---------------------------------------------------------
    # 3. Mark late
    # ---------------------------------------------------------
    def mark_late_interactive(self) -> bool:
        if not self.registry.has_root:
            self.port.write("No tree exists.")
            return False

        name = read_text(self.port, "Enter member name to mark as Late: ", self._max_name)
        if not name:
            self.port.write("Empty name.")
            return False

        try:
            member = self.registry.require(name)
        except MemberNotFoundError:
            self.port.write("Member not found.")
            return False

        if not member.alive:
            self.port.write("Already marked Late.")
            return False

        if not read_yes_no(self.port, f"Confirm marking '{member.name}' as Late? (y/n): "):
            self.port.write("Cancelled.")
            return False

        self.registry.set_alive(member, False)
        self.port.write("Marked Late.")
        return True

    # ---------------------------------------------------------
    # 4. Show tree
    # ---------------------------------------------------------
    def show_tree(self) -> bool:
        try:
            lines = render_tree(self.registry, self.settings, self.policy)
        except NoRootError:
            self.port.write("No tree. Create root first.")
            return False

        for line in lines:
            self.port.write(line)
        return True

    # ---------------------------------------------------------
    # 5. List members
    # ---------------------------------------------------------
    def list_members(self) -> None:
        self.port.write("")
        self.port.write("All members:")
        for member in self.registry:
            status = "Alive" if member.alive else "Late"
            self.port.write(f"- {member.name} ({member.gender}, {status})")

    def dispatch(self, choice: int) -> None:
        """Run one numbered menu action (1-5)."""
        actions = {
            1: self.create_root_interactive,
            2: self.add_member_interactive,
            3: self.mark_late_interactive,
            4: self.show_tree,
            5: self.list_members,
        }
        action = actions.get(choice)
        if action is None:
            self.port.write("Invalid choice.")
            return

        try:
            action()
        except FamilyTreeError as exc:
            log.error("Menu action %d failed: %s", choice, exc)
            self.port.write(str(exc))
