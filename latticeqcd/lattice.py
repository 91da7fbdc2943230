"""Lattice geometry and basic operations on gauge and spinor fields.

A gauge field is a complex array of shape ``(T, L, L, L, 4, 3, 3)``: one SU(3)
link per site and direction (0 = t, 1 = x, 2 = y, 3 = z). A spinor field has
shape ``(T, L, L, L, 4, 3)``: four spin components of three colours per site.
Coordinates wrap periodically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

_GAUGE_TAIL = (4, 3, 3)
_SPINOR_TAIL = (4, 3)


@dataclass(frozen=True)
class Lattice:
    """A periodic lattice of ``T`` time slices and ``L`` sites per spatial axis."""

    T: int
    L: int

    def __post_init__(self) -> None:
        if self.T <= 0 or self.L <= 0:
            raise ValueError(f"lattice extents must be positive, got T={self.T}, L={self.L}")

    def site_index(self, t: int, x: int, y: int, z: int) -> int:
        """Lexicographic index of a site, with periodic wrapping."""
        L = self.L
        return (((t % self.T) * L + x % L) * L + y % L) * L + z % L

    def gauge_shape(self) -> tuple[int, ...]:
        """Array shape of a gauge field on this lattice."""
        return (self.T, self.L, self.L, self.L) + _GAUGE_TAIL

    def spinor_shape(self) -> tuple[int, ...]:
        """Array shape of a spinor field on this lattice."""
        return (self.T, self.L, self.L, self.L) + _SPINOR_TAIL

    @property
    def volume(self) -> int:
        return self.T * self.L ** 3


def _check_field(field: np.ndarray, tail: tuple[int, ...], kind: str) -> None:
    shape = field.shape
    if (
        len(shape) != 4 + len(tail)
        or shape[4:] != tail
        or shape[1] != shape[2]
        or shape[2] != shape[3]
    ):
        raise ValueError(f"not a {kind} field: shape {shape}")


def unit_gauge_field(T: int, L: int) -> np.ndarray:
    """A gauge field with every link set to the identity."""
    lattice = Lattice(T, L)
    field = np.zeros(lattice.gauge_shape(), dtype=np.complex128)
    field[...] = np.eye(3, dtype=np.complex128)
    return field


def zero_spinor_field(T: int, L: int) -> np.ndarray:
    """A spinor field with every component zero."""
    return np.zeros(Lattice(T, L).spinor_shape(), dtype=np.complex128)


def gauge_timeslice(gauge_field: np.ndarray, timeslice: int) -> np.ndarray:
    """Copy of the links on one time slice (index wraps periodically)."""
    _check_field(gauge_field, _GAUGE_TAIL, "gauge")
    return gauge_field[timeslice % gauge_field.shape[0]].copy()


def spinor_timeslice(spinor_field: np.ndarray, timeslice: int) -> np.ndarray:
    """Copy of the spinors on one time slice (index wraps periodically)."""
    _check_field(spinor_field, _SPINOR_TAIL, "spinor")
    return spinor_field[timeslice % spinor_field.shape[0]].copy()


def set_spinor_timeslice(
    spinor_field: np.ndarray, timeslice_field: np.ndarray, timeslice: int
) -> None:
    """Overwrite one time slice of ``spinor_field`` with ``timeslice_field``."""
    _check_field(spinor_field, _SPINOR_TAIL, "spinor")
    if timeslice_field.shape != spinor_field.shape[1:]:
        raise ValueError(
            f"time slice shape {timeslice_field.shape} does not fit field {spinor_field.shape}"
        )
    spinor_field[timeslice % spinor_field.shape[0]] = timeslice_field


def nonzero_spinor_sites(
    spinor_field: np.ndarray, epsilon: float = 1e-6
) -> Iterator[tuple[tuple[int, int, int, int], np.ndarray]]:
    """Yield ``((t, x, y, z), spinor)`` for sites with a component above ``epsilon``.

    A component counts when its real or imaginary part exceeds ``epsilon`` in
    magnitude. Sites come in t, x, y, z lexicographic order.
    """
    _check_field(spinor_field, _SPINOR_TAIL, "spinor")
    big = (np.abs(spinor_field.real) > epsilon) | (np.abs(spinor_field.imag) > epsilon)
    mask = big.reshape(spinor_field.shape[:4] + (-1,)).any(axis=-1)
    for site in np.argwhere(mask):
        coords = tuple(int(c) for c in site)
        yield coords, spinor_field[coords].copy()


def _check_transformation(g: np.ndarray, field: np.ndarray) -> None:
    if g.shape != field.shape[:4] + (3, 3):
        raise ValueError(f"gauge transformation shape {g.shape} does not fit field {field.shape}")


def apply_gauge_transformation_to_gauge_field(g: np.ndarray, gauge_field: np.ndarray) -> np.ndarray:
    """Return the transformed links ``g(x) U_mu(x) g(x + mu)^dagger``."""
    _check_field(gauge_field, _GAUGE_TAIL, "gauge")
    _check_transformation(g, gauge_field)
    result = np.empty_like(gauge_field, dtype=np.complex128)
    for mu in range(4):
        g_forward = np.roll(g, -1, axis=mu)
        result[..., mu, :, :] = g @ gauge_field[..., mu, :, :] @ np.conj(
            np.swapaxes(g_forward, -1, -2)
        )
    return result


def apply_gauge_transformation_to_spinor_field(g: np.ndarray, spinor_field: np.ndarray) -> np.ndarray:
    """Return the transformed spinors ``g(x) psi(x)`` (colour rotation per spin)."""
    _check_field(spinor_field, _SPINOR_TAIL, "spinor")
    _check_transformation(g, spinor_field)
    return np.einsum("...ab,...sb->...sa", g, spinor_field)