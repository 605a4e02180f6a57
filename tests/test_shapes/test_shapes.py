"""Tests for cssforge.shapes."""
from __future__ import annotations

from cssforge.shapes import Rectangle


class TestRectangle:
    def test_attributes(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).get_area() == 200

    def test_area_float(self) -> None:
        assert Rectangle(2.5, 4).get_area() == 10.0

    def test_area_zero(self) -> None:
        assert Rectangle(0, 7).get_area() == 0

    def test_area_follows_updates(self) -> None:
        r = Rectangle(1, 1)
        r.width = 5
        assert r.get_area() == 5

    def test_equality(self) -> None:
        assert Rectangle(3, 4) == Rectangle(3, 4)
