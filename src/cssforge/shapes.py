"""Shape objects with computed properties."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a width, a height and a computed area.

    >>> r = Rectangle(10, 20)
    >>> r.width, r.height, r.get_area()
    (10, 20, 200)
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
