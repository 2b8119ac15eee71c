import pytest

from sckit.crc32 import crc32c

BUF = bytes([1, 1, 2, 3]) + bytes(124)
BUF2 = bytes([2, 5, 6, 5]) + bytes(4096 * 8 - 4)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00", 1383945041),
        (b"1\x00", 2727214374),
        (bytes(10), 3822973035),
        (b"test\x00", 2440484327),
        (b"testtest\x00", 443192409),
    ],
)
def test_precomputed_values(data, expected):
    assert crc32c(data) == expected


def test_standard_check_value():
    assert crc32c(b"123456789") == 0xE3069283


def test_empty_data_is_zero():
    assert crc32c(b"") == 0


def test_partial_small_buffer():
    crc1 = crc32c(BUF[:100])
    crc2 = crc32c(BUF[100:128], crc1)
    assert crc2 == crc32c(BUF)


def test_partial_large_buffer():
    half = 4096 * 4
    crc1 = crc32c(BUF2[:half])
    crc2 = crc32c(BUF2[half:], crc1)
    assert crc2 == crc32c(BUF2)


def test_different_ranges_give_different_values():
    crc1 = crc32c(BUF[:8], 100)
    others = [
        crc32c(BUF[:7], 100),
        crc32c(BUF[7:14], 100),
        crc32c(BUF[8:15], 100),
        crc32c(BUF[8:16], 100),
        crc32c(BUF[8:8], 100),
    ]
    assert all(crc1 != other for other in others)
    assert crc32c(BUF[8:8], 100) == 100


def test_accepts_memoryview_and_bytearray():
    expected = crc32c(b"testtest\x00")
    assert crc32c(bytearray(b"testtest\x00")) == expected
    assert crc32c(memoryview(b"testtest\x00")) == expected


def test_result_fits_in_32_bits():
    assert 0 <= crc32c(BUF2, 0xFFFFFFFF) <= 0xFFFFFFFF