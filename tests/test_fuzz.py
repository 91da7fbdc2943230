import numpy as np
import pytest

from latticeqcd.fuzz import fuzz_propagator, fuzzed_links_timeslice
from latticeqcd.lattice import unit_gauge_field, zero_spinor_field
from latticeqcd.paths import straight_path


def _random_unitary(rng, shape):
    a = rng.normal(size=shape + (3, 3)) + 1j * rng.normal(size=shape + (3, 3))
    q, r = np.linalg.qr(a)
    d = np.diagonal(r, axis1=-2, axis2=-1)
    return q * (d / np.abs(d))[..., None, :]


def _random_gauge_field(T, L, seed=1):
    return _random_unitary(np.random.default_rng(seed), (T, L, L, L, 4))


def _random_spinor(T, L, seed=2):
    rng = np.random.default_rng(seed)
    shape = (T, L, L, L, 4, 3)
    return rng.normal(size=shape) + 1j * rng.normal(size=shape)


def test_fuzzed_links_of_unit_field_are_identity():
    smeared = unit_gauge_field(3, 3)
    fuzzed = np.zeros_like(smeared)
    fuzzed_links_timeslice(fuzzed, smeared, 3, 1)
    assert np.allclose(fuzzed[1, ..., 1:, :, :], np.eye(3))
    assert np.allclose(fuzzed[1, ..., 0, :, :], 0)
    assert np.allclose(fuzzed[0], 0)
    assert np.allclose(fuzzed[2], 0)


@pytest.mark.parametrize("nlong", [2, 3])
def test_fuzzed_links_match_straight_paths(nlong):
    smeared = _random_gauge_field(2, 4)
    fuzzed = np.zeros_like(smeared)
    result = fuzzed_links_timeslice(fuzzed, smeared, nlong, 1)
    assert result is fuzzed
    for site in [(0, 0, 0), (3, 1, 2), (2, 3, 3)]:
        for mu, direction in ((1, (1, 0, 0)), (2, (0, 1, 0)), (3, (0, 0, 1))):
            expected = straight_path(smeared, 1, *site, *direction, nlong)
            assert np.allclose(fuzzed[(1,) + site + (mu,)], expected)


def test_fuzzed_links_reject_shape_mismatch():
    with pytest.raises(ValueError):
        fuzzed_links_timeslice(unit_gauge_field(2, 2), unit_gauge_field(2, 3), 2, 0)


def test_fuzzed_links_reject_negative_length():
    field = unit_gauge_field(2, 2)
    with pytest.raises(ValueError):
        fuzzed_links_timeslice(field.copy(), field, -1, 0)


def test_fuzz_propagator_point_source_spreads_to_neighbours():
    T, L = 2, 4
    links = unit_gauge_field(T, L)
    psi = zero_spinor_field(T, L)
    value = np.arange(12, dtype=np.complex128).reshape(4, 3) + 1j
    psi[1, 0, 0, 0] = value
    fuzz_propagator(links, psi, 1, 1)
    neighbours = {(1, 0, 0), (3, 0, 0), (0, 1, 0), (0, 3, 0), (0, 0, 1), (0, 0, 3)}
    for x in range(L):
        for y in range(L):
            for z in range(L):
                expected = value if (x, y, z) in neighbours else np.zeros((4, 3))
                assert np.allclose(psi[1, x, y, z], expected)


def test_fuzz_propagator_constant_field_on_unit_links():
    T, L = 2, 3
    links = unit_gauge_field(T, L)
    psi = zero_spinor_field(T, L)
    value = np.full((4, 3), 0.5 - 0.25j)
    psi[0] = value
    fuzz_propagator(links, psi, 2, 0)
    assert np.allclose(psi[0], 6 * value)
    assert np.allclose(psi[1], 0)


def test_fuzz_propagator_leaves_other_timeslices():
    T, L = 3, 3
    links = _random_gauge_field(T, L)
    psi = _random_spinor(T, L)
    original = psi.copy()
    fuzz_propagator(links, psi, 1, 2)
    assert np.array_equal(psi[0], original[0])
    assert np.array_equal(psi[1], original[1])
    assert not np.allclose(psi[2], original[2])


def test_fuzz_propagator_is_linear():
    T, L = 2, 3
    links = _random_gauge_field(T, L, seed=4)
    a = _random_spinor(T, L, seed=5)
    b = _random_spinor(T, L, seed=6)
    combined = fuzz_propagator(links, 2 * a + b, 1, 0)
    fa = fuzz_propagator(links, a.copy(), 1, 0)
    fb = fuzz_propagator(links, b.copy(), 1, 0)
    assert np.allclose(combined[0], 2 * fa[0] + fb[0])


def test_fuzz_propagator_rejects_mismatched_lattices():
    with pytest.raises(ValueError):
        fuzz_propagator(unit_gauge_field(2, 3), zero_spinor_field(2, 2), 1, 0)