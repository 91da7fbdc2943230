"""Fuzzing: long straight links from smeared links, and fuzzed propagators."""

from __future__ import annotations

import numpy as np

_GAUGE_TAIL = (4, 3, 3)
_SPINOR_TAIL = (4, 3)


def _check_field(field: np.ndarray, tail: tuple[int, ...], kind: str) -> None:
    shape = field.shape
    if (
        len(shape) != 4 + len(tail)
        or shape[4:] != tail
        or not shape[1] == shape[2] == shape[3]
    ):
        raise ValueError(f"not a {kind} field: shape {shape}")


def fuzzed_links_timeslice(
    fuzzed_gauge_field: np.ndarray,
    smeared_gauge_field: np.ndarray,
    nlong: int,
    timeslice: int,
) -> np.ndarray:
    """Fill the spatial links of one time slice with products of ``nlong`` smeared links.

    On return the link in direction ``mu`` at site ``x`` of ``fuzzed_gauge_field``
    is ``U_mu(x) U_mu(x + mu) ... U_mu(x + (nlong - 1) mu)`` of the smeared field.
    Temporal links and other time slices are left alone. With ``nlong == 1``
    nothing is written. The field is updated in place and also returned.
    """
    _check_field(fuzzed_gauge_field, _GAUGE_TAIL, "gauge")
    _check_field(smeared_gauge_field, _GAUGE_TAIL, "gauge")
    if fuzzed_gauge_field.shape != smeared_gauge_field.shape:
        raise ValueError(
            f"gauge fields differ in shape: {fuzzed_gauge_field.shape} "
            f"and {smeared_gauge_field.shape}"
        )
    if nlong < 0:
        raise ValueError(f"fuzzing length must be non-negative, got {nlong}")

    ts = timeslice % smeared_gauge_field.shape[0]
    smeared = smeared_gauge_field[ts].copy()
    current = smeared.copy()
    for ir in range(1, nlong):
        for mu in (1, 2, 3):
            shifted = np.roll(smeared[..., mu, :, :], -ir, axis=mu - 1)
            current[..., mu, :, :] = current[..., mu, :, :] @ shifted
        fuzzed_gauge_field[ts, ..., 1:, :, :] = current[..., 1:, :, :]
    return fuzzed_gauge_field


def fuzz_propagator(
    fuzzed_gauge_field: np.ndarray,
    psi: np.ndarray,
    nlong: int,
    timeslice: int,
) -> np.ndarray:
    """Replace one time slice of ``psi`` by its sum over fuzzed neighbours.

    Each site becomes the sum, over the three spatial directions, of
    ``F_mu(x) psi(x + nlong mu)`` and ``F_mu(x - nlong mu)^dagger psi(x - nlong mu)``,
    with ``F`` the fuzzed links of that time slice. No normalisation is applied.
    ``psi`` is updated in place and also returned.
    """
    _check_field(fuzzed_gauge_field, _GAUGE_TAIL, "gauge")
    _check_field(psi, _SPINOR_TAIL, "spinor")
    if fuzzed_gauge_field.shape[:4] != psi.shape[:4]:
        raise ValueError(
            f"gauge field {fuzzed_gauge_field.shape} and spinor field {psi.shape} "
            "live on different lattices"
        )
    if nlong < 0:
        raise ValueError(f"fuzzing length must be non-negative, got {nlong}")

    ts = timeslice % psi.shape[0]
    psi_old = psi[ts].copy()
    links = fuzzed_gauge_field[ts]
    result = np.zeros_like(psi_old, dtype=np.complex128)
    for mu in (1, 2, 3):
        axis = mu - 1
        link = links[..., mu, :, :]
        forward = np.roll(psi_old, -nlong, axis=axis)
        result += np.einsum("...ab,...sb->...sa", link, forward)
        back_link = np.roll(link, nlong, axis=axis)
        backward = np.roll(psi_old, nlong, axis=axis)
        result += np.einsum("...ba,...sb->...sa", back_link.conj(), backward)
    psi[ts] = result
    return psi