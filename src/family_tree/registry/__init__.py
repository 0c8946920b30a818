from __future__ import annotations

from .entities import (
    MAX_STORED_NAME,
    Individual,
    MemberRegistry,
    normalize_gender,
)
from .link_entities import attach_child, attach_under_root, link_member

__all__ = [
    "MAX_STORED_NAME",
    "Individual",
    "MemberRegistry",
    "attach_child",
    "attach_under_root",
    "link_member",
    "normalize_gender",
]
