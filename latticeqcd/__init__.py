"""Gauge and spinor fields on a periodic T x L^3 lattice: Wilson loops, paths, fuzzing, Z2 sources, checksums and binary readers."""

__version__ = "0.1.0"
__all__ = ["byteorder", "checksum", "fuzz", "lattice", "paths", "readers", "sources", "wilson"]