class FamilyTreeError(Exception):
    """Base exception for family tree operations."""


class InvalidInputError(FamilyTreeError):
    """Raised when an operator entry cannot be interpreted."""


class MemberNotFoundError(FamilyTreeError):
    """Raised when a name lookup misses."""

    def __init__(self, name: str):
        super().__init__(f"Member not found: {name!r}")
        self.name = name


class DuplicateNameError(FamilyTreeError):
    """Raised when creating a member whose name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Member already exists: {name!r}")
        self.name = name


class PreconditionError(FamilyTreeError):
    """Raised when an operation runs in the wrong tree state."""


class NoRootError(PreconditionError):
    """Raised when an operation needs a root ancestor and none exists."""


class RootExistsError(PreconditionError):
    """Raised when a second root ancestor is requested."""
