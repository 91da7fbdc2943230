import struct
import sys

import numpy as np
import pytest

from latticeqcd import byteorder


def _opposite() -> str:
    return "<" if byteorder.host_is_big_endian() else ">"


def test_host_endianness_matches_sys():
    assert byteorder.host_is_big_endian() == (sys.byteorder == "big")


def test_swap_bytes_32_reverses_words():
    assert byteorder.swap_bytes_32(b"\x01\x02\x03\x04\x05\x06\x07\x08") == (
        b"\x04\x03\x02\x01\x08\x07\x06\x05"
    )


def test_swap_bytes_64_reverses_words():
    data = bytes(range(16))
    swapped = byteorder.swap_bytes_64(data)
    assert swapped == bytes(range(7, -1, -1)) + bytes(range(15, 7, -1))


@pytest.mark.parametrize("func,length", [(byteorder.swap_bytes_32, 6), (byteorder.swap_bytes_64, 12)])
def test_swap_bytes_rejects_partial_words(func, length):
    with pytest.raises(ValueError):
        func(bytes(length))


def test_swap_bytes_twice_is_identity():
    data = bytes(range(64))
    assert byteorder.swap_bytes_64(byteorder.swap_bytes_64(data)) == data
    assert byteorder.swap_bytes_32(byteorder.swap_bytes_32(data)) == data


def test_swap_doubles_gives_foreign_byte_order():
    values = [1.0, -2.5, 3.25]
    out = byteorder.swap_doubles(values)
    assert out.tobytes() == struct.pack(_opposite() + "3d", *values)


def test_swap_singles_gives_foreign_byte_order():
    values = [0.5, -4.0]
    out = byteorder.swap_singles(values)
    assert out.tobytes() == struct.pack(_opposite() + "2f", *values)


def test_swap_doubles_round_trip():
    values = np.array([0.1, 2.0, -7.75])
    np.testing.assert_array_equal(byteorder.swap_doubles(byteorder.swap_doubles(values)), values)


def test_swapped_single_to_double_undoes_swap():
    values = np.array([1.5, -2.0, 8.0], dtype=np.float32)
    out = byteorder.swapped_single_to_double(byteorder.swap_singles(values))
    assert out.dtype == np.float64
    np.testing.assert_array_equal(out, values.astype(np.float64))


def test_double_to_swapped_single_matches_foreign_pack():
    values = [1.0, -0.25]
    out = byteorder.double_to_swapped_single(values)
    assert out.tobytes() == struct.pack(_opposite() + "2f", *values)


def test_precision_conversions():
    third = 1.0 / 3.0
    single = byteorder.double_to_single([third])
    assert single.dtype == np.float32
    assert single[0] == np.float32(third)
    back = byteorder.single_to_double(single)
    assert back.dtype == np.float64
    assert back[0] == float(np.float32(third))
    assert abs(back[0] - third) < 1e-7