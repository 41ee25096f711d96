"""
Bounding Boxes
==============

Inclusive axis-aligned boxes over grid cells. Supports adding points,
unioning, intersection tests and checking whether the interior crosses a
given horizontal/vertical grid line.

License: MIT
"""

from dataclasses import dataclass
from math import inf


@dataclass(frozen=True)
class Rect:
    """Rows [r0, r1] x columns [c0, c1], both ends inclusive.

    The empty box has r0 = c0 = +inf and r1 = c1 = -inf, so adding a
    first point (r, c) yields the single cell r0 = r1 = r, c0 = c1 = c.
    """
    r0: float = inf
    r1: float = -inf
    c0: float = inf
    c1: float = -inf

    @property
    def is_empty(self):
        return self.r0 > self.r1

    def add(self, r, c):
        return Rect(min(self.r0, r), max(self.r1, r),
                    min(self.c0, c), max(self.c1, c))

    def union(self, other):
        return Rect(min(self.r0, other.r0), max(self.r1, other.r1),
                    min(self.c0, other.c0), max(self.c1, other.c1))

    def intersects(self, other):
        if self.r0 > other.r1 or other.r0 > self.r1:
            return False
        if self.c0 > other.c1 or other.c0 > self.c1:
            return False
        return True

    def crosses_horizontal(self, r):
        """Whether the box crosses the line between rows r and r + 1."""
        return self.r0 <= r < self.r1

    def crosses_vertical(self, c):
        """Whether the box crosses the line between columns c and c + 1."""
        return self.c0 <= c < self.c1

    def contains_point(self, r, c):
        return self.r0 <= r <= self.r1 and self.c0 <= c <= self.c1

    def contains(self, other):
        if other.is_empty:
            return True
        return (self.r0 <= other.r0 and other.r1 <= self.r1 and
                self.c0 <= other.c0 and other.c1 <= self.c1)

    def touches_boundary(self, N, M):
        """Whether some side lies on the border of an N x M grid."""
        if self.is_empty:
            return False
        return self.r0 == 0 or self.r1 == N - 1 or self.c0 == 0 or self.c1 == M - 1

    def __repr__(self):
        if self.is_empty:
            return "Rect(empty)"
        return "Rect(rows {}..{}, cols {}..{})".format(self.r0, self.r1, self.c0, self.c1)


EMPTY = Rect()
