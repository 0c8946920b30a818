from __future__ import annotations

import pytest

from family_tree.core.exceptions import (
    DuplicateNameError,
    InvalidInputError,
    MemberNotFoundError,
    NoRootError,
    RootExistsError,
)
from family_tree.registry import MemberRegistry, link_member, normalize_gender


def test_create_root_and_lookup_by_name():
    reg = MemberRegistry()
    root = reg.create_root("Alice", "F")

    assert reg.has_root
    assert reg.root is root
    assert reg.find_by_name("Alice") is root
    assert root.alive is True
    assert root.uid == 0


def test_second_root_is_rejected():
    reg = MemberRegistry()
    reg.create_root("Alice", "F")

    with pytest.raises(RootExistsError):
        reg.create_root("Bob", "M")
    assert len(reg) == 1


def test_duplicate_names_are_rejected_case_sensitively():
    reg = MemberRegistry()
    reg.create_root("Alice", "F")

    with pytest.raises(DuplicateNameError):
        reg.create("Alice", "F")

    # Different case is a different name
    other = reg.create("alice", "F")
    assert reg.find_by_name("alice") is other
    assert len(reg) == 2


def test_empty_name_is_invalid():
    reg = MemberRegistry()
    with pytest.raises(InvalidInputError):
        reg.create("", "M")


def test_names_are_stored_up_to_63_characters():
    reg = MemberRegistry()
    long_name = "N" * 80
    ind = reg.create(long_name, "M")

    assert len(ind.name) == 63
    # Lookup with the untruncated name still resolves
    assert reg.find_by_name(long_name) is ind


def test_require_raises_for_unknown_member():
    reg = MemberRegistry()
    reg.create_root("Alice", "F")

    with pytest.raises(MemberNotFoundError) as exc_info:
        reg.require("Zed")
    assert exc_info.value.name == "Zed"


def test_root_access_without_root_raises():
    reg = MemberRegistry()
    with pytest.raises(NoRootError):
        reg.root


@pytest.mark.parametrize(
    "raw, expected",
    [("M", "M"), ("m", "M"), ("F", "F"), ("f", "F"), ("x", "F")],
)
def test_normalize_gender(raw, expected):
    assert normalize_gender(raw) == expected


def test_set_alive_changes_only_that_member():
    reg = MemberRegistry()
    carol = reg.create_root("Carol", "F")
    dave = reg.create("Dave", "M")

    reg.set_alive(carol, False)

    assert carol.alive is False
    assert dave.alive is True


def test_link_member_with_father_only():
    reg = MemberRegistry()
    carol = reg.create_root("Carol", "F")
    dave = reg.create("Dave", "M")

    link_member(reg, dave, father=carol)

    assert dave.father_id == carol.uid
    assert dave.mother_id is None
    assert carol.children_ids == [dave.uid]
    assert reg.father_of(dave) is carol
    assert reg.mother_of(dave) is None


def test_link_member_with_both_parents_lists_child_under_father_only():
    reg = MemberRegistry()
    root = reg.create_root("Root", "M")
    tom = reg.create("Tom", "M")
    ann = reg.create("Ann", "F")
    link_member(reg, tom)
    link_member(reg, ann)

    kid = reg.create("Kid", "F")
    link_member(reg, kid, father=tom, mother=ann)

    assert tom.children_ids == [kid.uid]
    assert ann.children_ids == []
    assert reg.structural_parent_of(kid) is tom
    assert root.children_ids == [tom.uid, ann.uid]


def test_link_member_with_mother_only_lists_child_under_mother():
    reg = MemberRegistry()
    reg.create_root("Root", "M")
    ann = reg.create("Ann", "F")
    kid = reg.create("Kid", "M")

    link_member(reg, kid, mother=ann)

    assert ann.children_ids == [kid.uid]
    assert kid.mother_id == ann.uid
    assert kid.father_id is None


def test_member_without_parents_is_listed_under_root():
    reg = MemberRegistry()
    alice = reg.create_root("Alice", "F")
    bob = reg.create("Bob", "M")

    link_member(reg, bob)

    assert alice.children_ids == [bob.uid]
    assert not bob.has_parents
    assert reg.structural_parent_of(bob) is alice
    assert reg.structural_parent_of(alice) is None
