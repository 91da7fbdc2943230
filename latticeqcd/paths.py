"""Straight paths of spatial links on a periodic SU(3) gauge field."""

from __future__ import annotations

import numpy as np

_GAUGE_TAIL = (4, 3, 3)


def _check_gauge_field(gauge_field: np.ndarray) -> None:
    shape = gauge_field.shape
    if len(shape) != 7 or shape[4:] != _GAUGE_TAIL or not shape[1] == shape[2] == shape[3]:
        raise ValueError(f"not a gauge field: shape {shape}")


def _axis_of(dirx: int, diry: int, dirz: int) -> tuple[int, int] | None:
    """Return ``(mu, step)`` for an on-axis spatial direction, or None if none is set.

    The x component is checked first, then y, then z; once one of them is
    +-1, the other two must be zero.
    """
    for mu, (step, others) in enumerate(
        ((dirx, (diry, dirz)), (diry, (dirx, dirz)), (dirz, (dirx, diry))), start=1
    ):
        if step in (-1, 1):
            if any(others):
                raise ValueError(
                    f"direction ({dirx}, {diry}, {dirz}) does not lie along one axis"
                )
            return mu, step
    return None


def straight_path(
    gauge_field: np.ndarray,
    t: int,
    x: int,
    y: int,
    z: int,
    dirx: int,
    diry: int,
    dirz: int,
    length: int,
) -> np.ndarray:
    """Ordered product of ``length`` spatial links from ``(t, x, y, z)``.

    Exactly one of ``dirx``, ``diry``, ``dirz`` is +1 or -1. Steps in the
    negative direction use the hermitian conjugate of the link that ends at
    the current site. When no component is +-1 the identity is returned.
    """
    _check_gauge_field(gauge_field)
    if length < 0:
        raise ValueError(f"path length must be non-negative, got {length}")

    product = np.eye(3, dtype=np.complex128)
    axis = _axis_of(dirx, diry, dirz)
    if axis is None:
        return product
    mu, step = axis

    T, L = gauge_field.shape[0], gauge_field.shape[1]
    pos = [t, x, y, z]
    for _ in range(length):
        if step < 0:
            pos[mu] -= 1
            tt, xx, yy, zz = pos
            link = gauge_field[tt % T, xx % L, yy % L, zz % L, mu]
            product = product @ link.conj().T
        else:
            tt, xx, yy, zz = pos
            link = gauge_field[tt % T, xx % L, yy % L, zz % L, mu]
            product = product @ link
            pos[mu] += 1
    return product