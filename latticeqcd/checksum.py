"""Rank-rotated CRC32 checksums for lattice site data (SciDAC/QIO style)."""

from __future__ import annotations

import zlib
from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


def _rotate_left(value: int, shift: int) -> int:
    return ((value << shift) & _MASK32) | (value >> (32 - shift))


@dataclass
class Checksum:
    """A pair of 32-bit checksums accumulated over lattice sites.

    Each site contributes the CRC32 of its raw bytes, rotated left by the
    site rank modulo 29 (``suma``) and modulo 31 (``sumb``), XORed in.
    """

    suma: int = 0
    sumb: int = 0

    def accumulate(self, rank: int, data: bytes | bytearray | memoryview) -> None:
        """XOR the rotated CRC32 of ``data`` for the site ``rank`` into the sums."""
        if rank < 0:
            raise ValueError(f"site rank must be non-negative, got {rank}")
        work = zlib.crc32(bytes(data)) & _MASK32
        self.suma ^= _rotate_left(work, rank % 29)
        self.sumb ^= _rotate_left(work, rank % 31)

    def combine(self) -> "Checksum":
        """Reduce the sums over all processes.

        Only a single process takes part, so the XOR reduction leaves the
        sums as they are. Returns ``self`` for chaining.
        """
        return self

    def merge(self, other: "Checksum") -> None:
        """XOR another checksum into this one."""
        self.suma ^= other.suma
        self.sumb ^= other.sumb

    def __str__(self) -> str:
        return f"{self.suma:#x} {self.sumb:#x}"