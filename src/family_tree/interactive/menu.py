from __future__ import annotations

from family_tree.interactive.prompts import read_choice
from family_tree.interactive.session import FamilyTreeSession
from family_tree.logging import get_logger

log = get_logger(__name__)

BANNER = "===== CENTERED FAMILY TREE SYSTEM ====="
MENU_LINES = (
    "",
    "1. Create Root Ancestor",
    "2. Add Member",
    "3. Mark Member as Late",
    "4. Show Centered Tree",
    "5. List All Members",
    "0. Exit",
)


class Menu:
    """Numbered menu loop; returns when the operator exits or input ends."""

    def __init__(self, session: FamilyTreeSession):
        self.session = session
        self.port = session.port

    def run(self) -> None:
        self.port.write(BANNER)
        log.info("Menu started")

        while True:
            for line in MENU_LINES:
                self.port.write(line)
            try:
                choice = read_choice(self.port, "Enter choice: ")
                if choice == 0:
                    break
                self.session.dispatch(choice)
            except EOFError:
                log.info("End of input reached")
                break

        self.port.write("Exiting...")
        log.info("Menu finished")
