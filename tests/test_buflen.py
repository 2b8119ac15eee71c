import pytest

from sckit.buffer import Buffer
from sckit.buflen import blob_len, str_len


def test_str_len_of_text():
    assert str_len("test") == 13


def test_str_len_of_none():
    assert str_len(None) == 8


def test_str_len_of_empty_string():
    assert str_len("") == 9


def test_str_len_counts_utf8_bytes():
    assert str_len("é") == 11


def test_blob_len():
    assert blob_len(b"test") == 12


def test_blob_len_empty():
    assert blob_len(b"") == 8


@pytest.mark.parametrize("value", ["test", "", None, "longer text here", b"raw"])
def test_str_len_matches_put_str(value):
    buf = Buffer(0)
    buf.put_str(value)
    assert len(buf) == str_len(value)


@pytest.mark.parametrize("data", [b"test", b"", bytes(100)])
def test_blob_len_matches_put_blob(data):
    buf = Buffer(0)
    buf.put_blob(data)
    assert len(buf) == blob_len(data)