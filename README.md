# latticeqcd

Tools for working with SU(3) gauge fields and Dirac spinor fields on a
periodic `T x L^3` lattice, built on numpy.

Gauge fields are complex arrays of shape `(T, L, L, L, 4, 3, 3)` (one 3x3
link per site and direction, 0 = t, 1 = x, 2 = y, 3 = z). Spinor fields are
complex arrays of shape `(T, L, L, L, 4, 3)` (four spins of three colours per
site). Coordinates wrap periodically.

## Modules

- `latticeqcd.lattice`: the `Lattice` geometry (`site_index`, `gauge_shape`,
  `spinor_shape`, `volume`), `unit_gauge_field`, `zero_spinor_field`,
  `gauge_timeslice`, `spinor_timeslice`, `set_spinor_timeslice`,
  `nonzero_spinor_sites`, and the gauge transformations
  `apply_gauge_transformation_to_gauge_field` (`g(x) U_mu(x) g(x+mu)^dagger`)
  and `apply_gauge_transformation_to_spinor_field` (`g(x) psi(x)`).
- `latticeqcd.wilson`: `wilson_loop`, the normalised trace of a rectangular
  loop in two directions, and `wilson_loop_split`, a temporal loop whose
  closing spatial leg at the start time is taken from a second gauge field.
- `latticeqcd.paths`: `straight_path`, the ordered product of links along a
  straight spatial path in one of the directions ±x, ±y, ±z.
- `latticeqcd.fuzz`: `fuzzed_links_timeslice`, which fills the spatial links
  of one time slice with products of `nlong` smeared links, and
  `fuzz_propagator`, which replaces one time slice of a spinor field by its
  sum over fuzzed neighbours `nlong` sites away.
- `latticeqcd.sources`: `generate_color_source`, a spinor field of Z2 noise
  on a single site and colour, and `random_z2`.
- `latticeqcd.checksum`: `Checksum`, a pair of rank-rotated CRC32 sums over
  site data, with `accumulate`, `merge` and `combine`.
- `latticeqcd.byteorder`: byte swapping of 32- and 64-bit words and
  conversions between single and double precision.
- `latticeqcd.readers`: `read_gwc`, `read_cmi` and `read_ukqcd` for spinor
  fields, and `read_gauge_field_old` for gauge fields with a `beta L T` text
  header followed by big-endian doubles. Malformed headers, a wrong lattice
  size or a short file raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from latticeqcd.lattice import unit_gauge_field
from latticeqcd.wilson import wilson_loop

gauge = unit_gauge_field(4, 4)
value = wilson_loop(gauge, 0, 0, 0, 0, 0, 1, 2, 2)
print(value)  # (1+0j) on a unit gauge field
```

```python
import random
from latticeqcd.sources import generate_color_source

source = generate_color_source(4, 4, (2, 1, 2, 3), 0, random.Random(0))
print(source[2, 1, 2, 3, :, 0])
```

```python
from latticeqcd.checksum import Checksum

checksum = Checksum()
checksum.accumulate(0, b"\x00" * 192)
print(checksum)  # suma and sumb in hexadecimal
```

## What it does not do

- It has no command-line tool; everything is used from Python.
- It neither reads nor writes LIME/ILDG/SciDAC record files. `Checksum`
  computes the site checksum used by such files, but there is no reader or
  writer for them.
- It does not apply a Dirac operator, compute two-point contractions or smear
  gauge fields; `fuzz_propagator` expects already smeared and fuzzed links.
- It runs on a single process; `Checksum.combine` leaves the sums unchanged.