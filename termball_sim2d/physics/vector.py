"""
vector.py — Aritmetika titik 2D (float & integer) untuk physics dan rasterizer.

    FloatPoint : posisi / velocity / offset (unit = sel grid)
    IntPoint   : koordinat sel grid diskret

Semua operasi pure — selalu mengembalikan titik baru.
"""

from dataclasses import dataclass

import numpy as np

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _saturate(value: float) -> int:
    if np.isnan(value):
        return 0
    return int(min(max(value, INT32_MIN), INT32_MAX))


@dataclass(frozen=True)
class IntPoint:
    """Koordinat sel grid."""

    x: int
    y: int

    def to_float(self) -> 'FloatPoint':
        return FloatPoint(float(self.x), float(self.y))


@dataclass(frozen=True)
class FloatPoint:
    """Titik / vektor 2D floating-point."""

    x: float
    y: float

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def add(self, other: 'FloatPoint') -> 'FloatPoint':
        return FloatPoint(self.x + other.x, self.y + other.y)

    def sub(self, other: 'FloatPoint') -> 'FloatPoint':
        return FloatPoint(self.x - other.x, self.y - other.y)

    def mul(self, other: 'FloatPoint') -> 'FloatPoint':
        return FloatPoint(self.x * other.x, self.y * other.y)

    __add__ = add
    __sub__ = sub
    __mul__ = mul

    # ------------------------------------------------------------------
    # Rounding & conversion
    # ------------------------------------------------------------------

    def floor(self) -> 'FloatPoint':
        """Bulatkan tiap komponen ke arah −∞."""
        return FloatPoint(float(np.floor(self.x)), float(np.floor(self.y)))

    def ceil(self) -> 'FloatPoint':
        """Bulatkan tiap komponen ke arah +∞."""
        return FloatPoint(float(np.ceil(self.x)), float(np.ceil(self.y)))

    def to_int(self) -> IntPoint:
        """Truncate ke arah nol. Aman setelah floor()/ceil().

        Saturating ke rentang int32: ±inf → batas int32, NaN → 0.
        """
        return IntPoint(_saturate(self.x), _saturate(self.y))

    def squared_length(self) -> float:
        """x² + y², untuk perbandingan jarak tanpa sqrt."""
        return self.x * self.x + self.y * self.y

    @classmethod
    def splat(cls, value: float) -> 'FloatPoint':
        """Titik (value, value)."""
        return cls(value, value)
