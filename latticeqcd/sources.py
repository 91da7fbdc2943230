"""Spacetime- and colour-diluted Z2 noise sources."""

from __future__ import annotations

import math
import random

import numpy as np

from latticeqcd.lattice import Lattice, zero_spinor_field

_Z2 = 1.0 / math.sqrt(2.0)


def random_z2(rng: random.Random) -> float:
    """Draw ``+1/sqrt(2)`` or ``-1/sqrt(2)`` with equal probability."""
    return _Z2 if rng.randint(0, 1) == 0 else -_Z2


def generate_color_source(
    T: int,
    L: int,
    site: tuple[int, int, int, int],
    color: int,
    rng: random.Random | None = None,
) -> np.ndarray:
    """A spinor field that is Z2 noise on one site and one colour, zero elsewhere.

    Each of the four spin components of colour ``color`` at ``site`` gets an
    independent Z2 value in its real and in its imaginary part, drawn in spin
    order, real part first.
    """
    lattice = Lattice(T, L)
    if color not in (0, 1, 2):
        raise ValueError(f"colour index must be 0, 1 or 2, got {color}")
    t, x, y, z = site
    if not (0 <= t < lattice.T and all(0 <= c < lattice.L for c in (x, y, z))):
        raise ValueError(f"site {site} lies outside a {T} x {L}^3 lattice")
    if rng is None:
        rng = random.Random()

    field = zero_spinor_field(T, L)
    for spin in range(4):
        real = random_z2(rng)
        imag = random_z2(rng)
        field[t, x, y, z, spin, color] = complex(real, imag)
    return field