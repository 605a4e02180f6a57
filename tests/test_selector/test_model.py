"""Tests for selector part kinds and combinators."""

import pytest

from cssforge.selector import Combinator, PartKind


class TestPartKind:
    def test_order(self):
        assert [k.value for k in PartKind] == [
            "element",
            "id",
            "class",
            "attr",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_rank(self):
        assert PartKind.ELEMENT.rank == 0
        assert PartKind.PSEUDO_ELEMENT.rank == 5
        assert PartKind.CLASS.rank < PartKind.ATTRIBUTE.rank

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PartKind.ELEMENT, False),
            (PartKind.ID, False),
            (PartKind.CLASS, True),
            (PartKind.ATTRIBUTE, True),
            (PartKind.PSEUDO_CLASS, True),
            (PartKind.PSEUDO_ELEMENT, False),
        ],
    )
    def test_repeatable(self, kind, expected):
        assert kind.repeatable is expected

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PartKind.ELEMENT, "x"),
            (PartKind.ID, "#x"),
            (PartKind.CLASS, ".x"),
            (PartKind.ATTRIBUTE, "[x]"),
            (PartKind.PSEUDO_CLASS, ":x"),
            (PartKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_render(self, kind, expected):
        assert kind.render("x") == expected

    def test_lookup_by_value(self):
        assert PartKind("pseudo-element") is PartKind.PSEUDO_ELEMENT


class TestCombinator:
    def test_tokens(self):
        assert Combinator.DESCENDANT == " "
        assert Combinator.CHILD == ">"
        assert Combinator.ADJACENT_SIBLING == "+"
        assert Combinator.GENERAL_SIBLING == "~"

    def test_str(self):
        assert str(Combinator.CHILD) == ">"
