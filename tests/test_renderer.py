from __future__ import annotations

import pytest

from family_tree.core.exceptions import NoRootError
from family_tree.layout.grouping import FamilyUnit, UnattachedPolicy
from family_tree.layout.renderer import (
    TREE_FOOTER,
    TREE_HEADER,
    LayoutSettings,
    center,
    children_line,
    connector_cell,
    parent_line,
    render_generation,
    render_tree,
    truncate_name,
    unit_width,
)
from family_tree.registry import Individual, MemberRegistry, link_member


def person(uid, name, gender="M"):
    return Individual(uid=uid, name=name, gender=gender)


# ---------------------------------------------------------
# Text derivation
# ---------------------------------------------------------

def test_truncate_long_name_to_exactly_15_characters():
    name = "Maximilian Alexander"
    out = truncate_name(name)

    assert len(out) == 15
    assert out == "Maximilian Alex"
    assert "..." not in out


@pytest.mark.parametrize("name", ["", "Al", "Exactly15Chars!"])
def test_truncate_short_name_is_identity(name):
    assert truncate_name(name) == name


def test_parent_line_for_missing_parents_uses_default_genders():
    assert parent_line(FamilyUnit()) == "Unknown (M) - Unknown (F)"


def test_parent_line_shows_stored_gender_in_either_slot():
    carol = person(0, "Carol", "F")
    unit = FamilyUnit(father=carol)

    assert parent_line(unit) == "Carol (F) - Unknown (F)"


def test_parent_line_truncates_names():
    unit = FamilyUnit(
        father=person(0, "Bartholomew Smith-Jones", "M"),
        mother=person(1, "Anastasia Konstantinova", "F"),
    )
    assert parent_line(unit) == "Bartholomew Smi (M) - Anastasia Konst (F)"


def test_children_line_joins_truncated_names():
    unit = FamilyUnit(children=[person(1, "Kim"), person(2, "Christopher Robinson"), person(3, "Lu")])
    assert children_line(unit) == "Kim Christopher Rob Lu"


def test_unit_width_is_the_longest_line():
    kids = [person(i, f"Child number {i}") for i in range(1, 4)]
    unit = FamilyUnit(children=kids)

    assert unit_width(unit) == len(children_line(unit))
    assert unit_width(FamilyUnit(children=[person(1, "A")])) == len("Unknown (M) - Unknown (F)")


def test_unit_width_has_a_floor():
    settings = LayoutSettings(max_name=1)
    unit = FamilyUnit(children=[person(1, "A")])
    # "U (M) - U (F)" is 13 wide; a wider floor wins
    assert unit_width(unit, LayoutSettings(max_name=1, min_width=20)) == 20
    assert unit_width(unit, settings) == 13


# ---------------------------------------------------------
# Cell layout
# ---------------------------------------------------------

@pytest.mark.parametrize("text, width", [("Alice", 25), ("Dave", 23), ("odd", 8), ("exact", 5), ("", 6)])
def test_center_preserves_width(text, width):
    cell = center(text, width)

    assert len(cell) == width
    assert cell.strip() == text


def test_center_puts_extra_space_on_the_right():
    assert center("ab", 5) == " ab  "
    assert center("Alice", 25) == " " * 10 + "Alice" + " " * 10


def test_connector_sits_under_text_middle():
    text = "Unknown (M) - Unknown (F)"
    cell = connector_cell(text, 25)

    assert len(cell) == 25
    assert cell.index("│") == 12


def test_connector_accounts_for_left_padding():
    cell = connector_cell("Tom (M) - Ann (F)", 21, glyph="|")

    # left pad 2, text length 17 -> 2 + 8
    assert cell == " " * 10 + "|" + " " * 10


# ---------------------------------------------------------
# Generation blocks
# ---------------------------------------------------------

def test_render_single_unit_generation():
    unit = FamilyUnit(children=[person(0, "Alice", "F")])

    rows = render_generation([unit])

    assert rows == [
        "Unknown (M) - Unknown (F)",
        " " * 12 + "│" + " " * 12,
        " " * 10 + "Alice" + " " * 10,
        "",
    ]


def test_render_two_units_with_gap():
    tom = person(1, "Tom", "M")
    ann = person(2, "Ann", "F")
    u1 = FamilyUnit(father=tom, mother=ann, children=[person(3, "Kid1")])
    u2 = FamilyUnit(mother=ann, children=[person(4, "Kid2")])

    parent_row, connector_row, children_row, blank = render_generation([u1, u2])

    gap = " " * 6
    assert parent_row == "Tom (M) - Ann (F)" + gap + "Unknown (M) - Ann (F)"
    assert connector_row == (" " * 8 + "│" + " " * 8) + gap + (" " * 10 + "│" + " " * 10)
    assert children_row == center("Kid1", 17) + gap + center("Kid2", 21)
    assert blank == ""
    assert len(parent_row) == len(connector_row) == len(children_row) == 17 + 6 + 21


def test_render_respects_custom_gap_and_glyph():
    unit = FamilyUnit(children=[person(0, "Alice", "F")])
    settings = LayoutSettings(gap=2, connector="|")

    rows = render_generation([unit, unit], settings)

    assert rows[1] == (" " * 12 + "|" + " " * 12) + "  " + (" " * 12 + "|" + " " * 12)


def test_render_empty_generation():
    assert render_generation([]) == []


def test_settings_from_config_mapping():
    settings = LayoutSettings.from_config({"max_name": 10, "gap": 3, "connector": "|", "seed_root_children": True})

    assert settings.max_name == 10
    assert settings.gap == 3
    assert settings.min_width == 6
    assert settings.connector == "|"
    assert settings.seed_root_children is True


# ---------------------------------------------------------
# Whole tree
# ---------------------------------------------------------

def test_render_tree_requires_root():
    with pytest.raises(NoRootError):
        render_tree(MemberRegistry())


def test_render_tree_lone_root():
    reg = MemberRegistry()
    reg.create_root("Alice", "F")

    lines = render_tree(reg)

    assert lines[:3] == ["", TREE_HEADER, ""]
    assert lines[-1] == TREE_FOOTER
    assert lines[3:-1] == render_generation([FamilyUnit(children=[reg.root])])
    assert lines[5] == " " * 10 + "Alice" + " " * 10


def test_render_tree_child_with_single_parent():
    reg = MemberRegistry()
    carol = reg.create_root("Carol", "F")
    dave = reg.create("Dave", "M")
    link_member(reg, dave, father=carol)

    lines = render_tree(reg)

    assert "Carol (F) - Unknown (F)" in lines
    assert center("Dave", 23) in lines
    assert lines.count(TREE_FOOTER) == 1


def test_render_tree_unattached_member_by_policy():
    reg = MemberRegistry()
    reg.create_root("Alice", "F")
    bob = reg.create("Bob", "M")
    link_member(reg, bob)

    preserved = render_tree(reg, policy=UnattachedPolicy.PRESERVE)
    attached = render_tree(reg, policy=UnattachedPolicy.ATTACH_TO_ROOT)

    # Generation 1 parent row sits right after generation 0's block
    assert preserved[7] == "Unknown (M) - Unknown (F)"
    assert attached[7] == "Unknown (M) - Alice (F)"
    assert preserved[9].strip() == attached[9].strip() == "Bob"
