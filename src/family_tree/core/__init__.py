from .exceptions import (
    DuplicateNameError,
    FamilyTreeError,
    InvalidInputError,
    MemberNotFoundError,
    NoRootError,
    PreconditionError,
    RootExistsError,
)

__all__ = [
    "DuplicateNameError",
    "FamilyTreeError",
    "InvalidInputError",
    "MemberNotFoundError",
    "NoRootError",
    "PreconditionError",
    "RootExistsError",
]
