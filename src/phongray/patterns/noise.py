"""Seeded 3-D gradient (Perlin) noise.

A thin wrapper over ``noise.pnoise3`` from the ``noise`` package. A single
octave is sampled and the result is clamped to [-1, 1]. The seed selects the
offset into the package's permutation table (its ``base`` argument), so a
given seed always produces the same field.

Properties:
    - Returns 0 at every integer lattice point
    - Continuous everywhere, output clamped to [-1, 1]

Example:
    >>> from phongray.patterns.noise import PerlinNoise
    >>> field = PerlinNoise(seed=7)
    >>> field(1.0, 2.0, 3.0) == 0.0
    True
"""

from __future__ import annotations

from noise import pnoise3

DEFAULT_SEED = 0

# Size of the permutation table; seeds are reduced modulo this
TABLE_SIZE = 256


class PerlinNoise:
    """Callable 3-D noise field.

    Args:
        seed: Selects the permutation offset (taken modulo TABLE_SIZE).
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed
        self._base = seed % TABLE_SIZE

    def __call__(self, x: float, y: float, z: float) -> float:
        value = pnoise3(x, y, z, octaves=1, base=self._base)
        return min(1.0, max(-1.0, value))

    def __repr__(self) -> str:
        return f"PerlinNoise(seed={self.seed})"


noise3 = PerlinNoise(DEFAULT_SEED)
