"""Rectangular Wilson loops on a periodic SU(3) gauge field."""

from __future__ import annotations

from typing import Sequence

import numpy as np

_GAUGE_TAIL = (4, 3, 3)


def _check_gauge_field(gauge_field: np.ndarray) -> None:
    shape = gauge_field.shape
    if len(shape) != 7 or shape[4:] != _GAUGE_TAIL or not shape[1] == shape[2] == shape[3]:
        raise ValueError(f"not a gauge field: shape {shape}")


def _link(gauge_field: np.ndarray, pos: Sequence[int], mu: int) -> np.ndarray:
    T, L = gauge_field.shape[0], gauge_field.shape[1]
    t, x, y, z = pos
    return gauge_field[t % T, x % L, y % L, z % L, mu]


def _rectangle(
    fields: tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray],
    start: tuple[int, int, int, int],
    dir1: int,
    dir2: int,
    ext1: int,
    ext2: int,
) -> complex:
    """Trace/3 of the ordered link product around a rectangle.

    ``fields`` gives the gauge field used on each of the four legs:
    +dir1, +dir2, -dir1, -dir2.
    """
    if not (0 <= dir1 <= 3 and 0 <= dir2 <= 3) or dir1 == dir2:
        raise ValueError(f"invalid loop directions ({dir1}, {dir2})")
    forward1, forward2, backward1, backward2 = fields
    pos = list(start)
    product = np.eye(3, dtype=np.complex128)

    for _ in range(ext1):
        product = product @ _link(forward1, pos, dir1)
        pos[dir1] += 1
    for _ in range(ext2):
        product = product @ _link(forward2, pos, dir2)
        pos[dir2] += 1
    for _ in range(ext1):
        pos[dir1] -= 1
        product = product @ _link(backward1, pos, dir1).conj().T
    for _ in range(ext2):
        pos[dir2] -= 1
        product = product @ _link(backward2, pos, dir2).conj().T

    return complex(np.diagonal(product).sum() / 3.0)


def wilson_loop(
    gauge_field: np.ndarray,
    t: int,
    x: int,
    y: int,
    z: int,
    dir1: int,
    dir2: int,
    ext1: int,
    ext2: int,
) -> complex:
    """Normalised trace of the ``ext1 x ext2`` Wilson loop starting at ``(t, x, y, z)``.

    The path runs ``ext1`` links along ``dir1``, ``ext2`` along ``dir2``, then
    back along ``dir1`` and ``dir2``. Directions are 0 = t, 1 = x, 2 = y, 3 = z.
    """
    _check_gauge_field(gauge_field)
    fields = (gauge_field, gauge_field, gauge_field, gauge_field)
    return _rectangle(fields, (t, x, y, z), dir1, dir2, ext1, ext2)


def wilson_loop_split(
    gauge_field_1: np.ndarray,
    gauge_field_2: np.ndarray,
    t: int,
    x: int,
    y: int,
    z: int,
    dir2: int,
    ext1: int,
    ext2: int,
) -> complex:
    """Temporal Wilson loop whose closing spatial leg uses a second gauge field.

    The temporal legs and the spatial leg at the far time come from
    ``gauge_field_1``; the spatial leg back at the start time comes from
    ``gauge_field_2``.
    """
    _check_gauge_field(gauge_field_1)
    _check_gauge_field(gauge_field_2)
    if gauge_field_1.shape != gauge_field_2.shape:
        raise ValueError(
            f"gauge fields differ in shape: {gauge_field_1.shape} and {gauge_field_2.shape}"
        )
    fields = (gauge_field_1, gauge_field_1, gauge_field_1, gauge_field_2)
    return _rectangle(fields, (t, x, y, z), 0, dir2, ext1, ext2)