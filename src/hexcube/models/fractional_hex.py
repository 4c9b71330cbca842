"""Fractional cube coordinates for interpolation.

A FractionalHex only exists between :meth:`FractionalHex.lerp` and
:meth:`FractionalHex.round`; nothing outside line tracing stores one.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexcube.models.hex import Hex
from hexcube.util.constants import FRACTIONAL_TOLERANCE
from hexcube.util.errors import InvalidCoordinate


@dataclass(frozen=True)
class FractionalHex:
    """Real-valued cube coordinate with q + r + s ≈ 0."""

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        if abs(self.q + self.r + self.s) > FRACTIONAL_TOLERANCE:
            raise InvalidCoordinate(
                f"Sum of coordinates must be zero, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_hex(cls, h: Hex, offset: tuple[float, float, float] = (0.0, 0.0, 0.0)) -> FractionalHex:
        """Lift an integer Hex, optionally shifted by a zero-sum offset."""
        dq, dr, ds = offset
        return cls(h.q + dq, h.r + dr, h.s + ds)

    @staticmethod
    def lerp(a: FractionalHex | Hex, b: FractionalHex | Hex, t: float) -> FractionalHex:
        """Interpolate each coordinate independently: a + (b - a) * t."""
        return FractionalHex(
            a.q + (b.q - a.q) * t,
            a.r + (b.r - a.r) * t,
            a.s + (b.s - a.s) * t,
        )

    def round(self) -> Hex:
        """Round to the nearest integer Hex, keeping q + r + s == 0.

        Each coordinate is rounded on its own, then the one with the
        largest rounding error is recomputed from the other two. Equal
        errors resolve in the order q, r, s.
        """
        q = round(self.q)
        r = round(self.r)
        s = round(self.s)

        q_diff = abs(q - self.q)
        r_diff = abs(r - self.r)
        s_diff = abs(s - self.s)

        if q_diff >= r_diff and q_diff >= s_diff:
            q = -r - s
        elif r_diff >= s_diff:
            r = -q - s
        else:
            s = -q - r

        return Hex(q, r, s)

    def __repr__(self) -> str:
        return f"FractionalHex({self.q}, {self.r}, {self.s})"
