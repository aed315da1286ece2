"""Tests for instruction visibility filtering and row collapsing."""

import pytest

from runguide.core.instructions import FormatOptions, InstructionBase
from runguide.core.visibility import (
    InstructionRow,
    collapse_rows,
    filter_instructions,
    is_visible,
)


def instruction(**kwargs) -> InstructionBase:
    kwargs.setdefault("area", "Cemetery of Ash")
    return InstructionBase(**kwargs)


class TestIsVisible:
    """Tests for the ordered visibility predicates."""

    def test_plain_instruction_is_visible(self):
        assert is_visible(instruction(), FormatOptions())

    def test_hide_optional(self):
        """Test optional instructions are dropped only when asked."""
        optional = instruction(optional=True)
        assert is_visible(optional, FormatOptions())
        assert not is_visible(optional, FormatOptions(hide_optional=True))

    def test_hide_safety(self):
        """Test safety instructions are dropped only when asked."""
        safety = instruction(safety=True)
        assert is_visible(safety, FormatOptions())
        assert not is_visible(safety, FormatOptions(hide_safety=True))

    def test_hide_optional_does_not_hide_safety(self):
        assert is_visible(instruction(safety=True), FormatOptions(hide_optional=True))

    def test_show_on_ignored_rules_requires_all(self):
        """Test the instruction only shows when every listed rule is ignored."""
        conditional = instruction(show_on_ignored_rules=[1, 2])
        assert not is_visible(conditional, FormatOptions())
        assert not is_visible(conditional, FormatOptions(ignored_rules={1}))
        assert is_visible(conditional, FormatOptions(ignored_rules={1, 2}))
        assert is_visible(conditional, FormatOptions(ignored_rules={1, 2, 3}))

    def test_hide_on_ignored_rules_any(self):
        """Test the instruction hides when any listed rule is ignored."""
        conditional = instruction(hide_on_ignored_rules=[1, 2])
        assert is_visible(conditional, FormatOptions())
        assert is_visible(conditional, FormatOptions(ignored_rules={3}))
        assert not is_visible(conditional, FormatOptions(ignored_rules={2}))

    def test_show_list_takes_precedence_over_hide_list(self):
        """Test the hide list is not consulted when a show list exists."""
        both = instruction(show_on_ignored_rules=[1], hide_on_ignored_rules=[1])
        assert is_visible(both, FormatOptions(ignored_rules={1}))
        assert not is_visible(both, FormatOptions())

    def test_flag_filters_run_before_rule_filters(self):
        conditional = instruction(optional=True, show_on_ignored_rules=[1])
        assert not is_visible(conditional, FormatOptions(hide_optional=True, ignored_rules={1}))

    @pytest.mark.parametrize("rules", [[1], [1, 2], [4, 5, 6]])
    def test_hide_list_monotonicity(self, rules):
        """Test ignoring a listed rule hides; clearing all listed rules shows."""
        conditional = instruction(hide_on_ignored_rules=rules)
        for rule in rules:
            assert not is_visible(conditional, FormatOptions(ignored_rules={rule}))
            assert not is_visible(conditional, FormatOptions(ignored_rules={rule, 99}))
        assert is_visible(conditional, FormatOptions(ignored_rules={99}))


class TestFilterInstructions:
    """Tests for list filtering."""

    def test_preserves_order(self):
        instructions = [
            instruction(area="a"),
            instruction(area="b", optional=True),
            instruction(area="c"),
            instruction(area="d", hide_on_ignored_rules=[1]),
            instruction(area="e"),
        ]
        visible = filter_instructions(instructions, FormatOptions(hide_optional=True, ignored_rules={1}))
        assert [i.area for i in visible] == ["a", "c", "e"]

    def test_empty_input(self):
        assert filter_instructions([], FormatOptions()) == []


class TestCollapseRows:
    """Tests for adjacent same-area merging."""

    def test_merges_adjacent_rows(self):
        """Test consecutive rows sharing an area fuse into the first one."""
        rows = [
            InstructionRow(id=0, area="X", action="a"),
            InstructionRow(id=1, area="X", action="b"),
            InstructionRow(id=2, area="X", action="c"),
        ]
        assert collapse_rows(rows) == [InstructionRow(id=0, area="X", action="a<br><br>b<br><br>c")]

    def test_non_adjacent_rows_are_not_merged(self):
        """Test rows split by another area stay separate and ordered."""
        rows = [
            InstructionRow(id=0, area="X", action="a"),
            InstructionRow(id=1, area="X", action="b"),
            InstructionRow(id=2, area="Y", action="c"),
            InstructionRow(id=3, area="X", action="d"),
        ]
        assert collapse_rows(rows) == [
            InstructionRow(id=0, area="X", action="a<br><br>b"),
            InstructionRow(id=2, area="Y", action="c"),
            InstructionRow(id=3, area="X", action="d"),
        ]

    def test_keeps_all_content(self):
        """Test collapsing only regroups actions, never drops them."""
        rows = [InstructionRow(id=i, area=area, action=f"step {i}") for i, area in enumerate("AABBBA")]
        collapsed = collapse_rows(rows)
        actions = [part for row in collapsed for part in row.action.split("<br><br>")]
        assert actions == [row.action for row in rows]

    def test_does_not_mutate_input(self):
        rows = [InstructionRow(id=0, area="X", action="a"), InstructionRow(id=1, area="X", action="b")]
        collapse_rows(rows)
        assert rows[0].action == "a"
        assert len(rows) == 2

    def test_empty(self):
        assert collapse_rows([]) == []
