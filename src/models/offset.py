"""
Offset model

Immutable 2D displacement used by slide animations. Units are fractions of
the animated element's size (1.0 = one full width/height).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Offset:
    """2D offset (dx, dy)"""
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def zero(cls) -> "Offset":
        return cls(0.0, 0.0)

    def __neg__(self) -> "Offset":
        return Offset(-self.dx, -self.dy)

    def __add__(self, other: "Offset") -> "Offset":
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: "Offset") -> "Offset":
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, factor: float) -> "Offset":
        return Offset(self.dx * factor, self.dy * factor)

    @staticmethod
    def lerp(a: "Offset", b: "Offset", t: float) -> "Offset":
        """
        Linear interpolation between two offsets

        t is not clamped, so overshooting curves move past b.
        """
        return Offset(a.dx + (b.dx - a.dx) * t, a.dy + (b.dy - a.dy) * t)

    def __repr__(self):
        return f"Offset({self.dx:.3f}, {self.dy:.3f})"
