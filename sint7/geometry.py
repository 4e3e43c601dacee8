"""Axis-aligned rectangles and their collision tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap (touching edges do not)."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True when the point lies inside; left/top edges count, right/bottom do not."""
        return self.x <= x < self.right and self.y <= y < self.bottom