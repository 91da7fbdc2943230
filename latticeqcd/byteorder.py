"""Byte-order swapping and precision conversion for binary field data."""

from __future__ import annotations

import sys
from typing import Iterable

import numpy as np


def host_is_big_endian() -> bool:
    """Return True when the running machine stores words big-endian."""
    return sys.byteorder == "big"


def _swap_groups(data: bytes | bytearray | memoryview, width: int) -> bytes:
    raw = bytes(data)
    if len(raw) % width:
        raise ValueError(f"data length {len(raw)} is not a multiple of {width}")
    dtype = np.dtype(f"u{width}")
    return np.frombuffer(raw, dtype=dtype).byteswap().tobytes()


def swap_bytes_32(data: bytes | bytearray | memoryview) -> bytes:
    """Reverse the byte order of every 4-byte word in ``data``."""
    return _swap_groups(data, 4)


def swap_bytes_64(data: bytes | bytearray | memoryview) -> bytes:
    """Reverse the byte order of every 8-byte word in ``data``."""
    return _swap_groups(data, 8)


def swap_doubles(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Return the doubles with the bytes of each one reversed."""
    return np.asarray(values, dtype=np.float64).byteswap()


def swap_singles(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Return the single-precision floats with the bytes of each one reversed."""
    return np.asarray(values, dtype=np.float32).byteswap()


def swapped_single_to_double(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Byte-swap single-precision values, then widen them to doubles."""
    return np.asarray(values, dtype=np.float32).byteswap().astype(np.float64)


def double_to_swapped_single(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Narrow doubles to single precision, then byte-swap each value."""
    return np.asarray(values, dtype=np.float64).astype(np.float32).byteswap()


def single_to_double(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Widen single-precision values to doubles."""
    return np.asarray(values, dtype=np.float32).astype(np.float64)


def double_to_single(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Narrow doubles to single precision."""
    return np.asarray(values, dtype=np.float64).astype(np.float32)