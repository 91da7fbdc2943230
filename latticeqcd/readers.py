"""Readers for older binary propagator and gauge-field file formats.

Spinor fields come back with shape ``(T, L, L, L, 4, 3)`` and gauge fields
with shape ``(T, L, L, L, 4, 3, 3)``, both complex. Within a site the data on
disk is spin-major: twelve complex numbers, four spins of three colours each,
and a gauge site holds four 3x3 link matrices stored row by row.
"""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np

from latticeqcd.lattice import Lattice

_WHITESPACE = b" \t\n\r\v\f"


def _skip_whitespace(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    return pos


def _read_header(data: bytes, count: int, path: str | os.PathLike) -> tuple[list[str], int]:
    """Read ``count`` whitespace-separated text tokens, then skip trailing whitespace."""
    tokens = []
    pos = 0
    for _ in range(count):
        pos = _skip_whitespace(data, pos)
        start = pos
        while pos < len(data) and data[pos] not in _WHITESPACE:
            pos += 1
        if start == pos:
            raise ValueError(f"incomplete header in {path}")
        tokens.append(data[start:pos].decode("ascii", errors="replace"))
    return tokens, _skip_whitespace(data, pos)


def _parse_header(data: bytes, kinds: tuple[type, ...], path: str | os.PathLike) -> tuple[list, int]:
    tokens, offset = _read_header(data, len(kinds), path)
    try:
        values = [kind(token) for kind, token in zip(kinds, tokens)]
    except ValueError as exc:
        raise ValueError(f"malformed header in {path}: {' '.join(tokens)}") from exc
    return values, offset


def _take(data: bytes, offset: int, dtype: str, count: int, path: str | os.PathLike) -> np.ndarray:
    itemsize = np.dtype(dtype).itemsize
    needed = count * itemsize
    if len(data) - offset < needed:
        raise ValueError(
            f"{path} holds {len(data) - offset} bytes of field data, expected {needed}"
        )
    return np.frombuffer(data, dtype=dtype, count=count, offset=offset).astype(np.float64)


def _to_complex(values: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(values, dtype=np.float64).view(np.complex128)


def read_gwc(path: str | os.PathLike, L: int, T: int, header: bool = False) -> np.ndarray:
    """Read a spinor field stored as big-endian doubles in x, y, z, t site order.

    With ``header`` set, the file starts with a text line
    ``beta m0 s L T``; a lattice size that does not match raises ValueError.
    """
    lattice = Lattice(T, L)
    data = Path(path).read_bytes()
    offset = 0
    if header:
        (_beta, _m0, _s, l_file, t_file), offset = _parse_header(
            data, (float, float, float, int, int), path
        )
        if l_file != L or t_file != T:
            raise ValueError(
                f"probably wrong lattice size for {path}: file has L={l_file}, T={t_file}"
            )
    raw = _take(data, offset, ">f8", lattice.volume * 24, path)
    ordered = raw.reshape(L, L, L, T, 24).transpose(3, 0, 1, 2, 4)
    return _to_complex(ordered).reshape(lattice.spinor_shape())


def read_cmi(path: str | os.PathLike, L: int, T: int, kappa: float) -> np.ndarray:
    """Read a spinor field of native single-precision floats in x, y, z, t order.

    Every value is multiplied by ``2 * kappa``.
    """
    lattice = Lattice(T, L)
    data = Path(path).read_bytes()
    raw = _take(data, 0, "=f4", lattice.volume * 24, path)
    ordered = raw.reshape(L, L, L, T, 24).transpose(3, 0, 1, 2, 4) * (2.0 * kappa)
    return _to_complex(ordered).reshape(lattice.spinor_shape())


def read_ukqcd(path: str | os.PathLike, L: int, T: int, kappa: float) -> np.ndarray:
    """Read a spinor field of native single-precision floats in t, z, y, x order.

    Every value is multiplied by ``2 * kappa``.
    """
    lattice = Lattice(T, L)
    data = Path(path).read_bytes()
    raw = _take(data, 0, "=f4", lattice.volume * 24, path)
    ordered = raw.reshape(T, L, L, L, 24).transpose(0, 3, 2, 1, 4) * (2.0 * kappa)
    return _to_complex(ordered).reshape(lattice.spinor_shape())


def read_gauge_field_old(path: str | os.PathLike, T: int, L: int) -> np.ndarray:
    """Read a gauge field with a ``beta L T`` text header and byte-swapped doubles.

    Sites follow in x, y, z, t order, each with 72 big-endian doubles: the
    links in directions t, x, y, z. A header that disagrees with ``T`` or
    ``L`` raises ValueError, as does a file that ends early.
    """
    lattice = Lattice(T, L)
    data = Path(path).read_bytes()
    (_beta, l_file, t_file), offset = _parse_header(data, (float, int, int), path)
    if l_file != L or t_file != T:
        raise ValueError(
            f"wrong T ({T}, {t_file}) or L ({L}, {l_file}) in {path}"
        )
    raw = _take(data, offset, ">f8", lattice.volume * 72, path)
    ordered = raw.reshape(L, L, L, T, 72).transpose(3, 0, 1, 2, 4)
    return _to_complex(ordered).reshape(lattice.gauge_shape())