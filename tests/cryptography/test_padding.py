"""Unit tests for the NUL padding codec."""
import pytest

from aes256_encryption.cryptography.exceptions import CryptographyInputError
from aes256_encryption.cryptography.padding import pad, strip_padding


def test_pad_aligned_input_unchanged() -> None:
    """Test that input already a multiple of the block size is returned unchanged"""
    assert pad(b"abcdefgh") == b"abcdefgh"


def test_pad_short_input() -> None:
    """Test that short input is padded with NUL bytes up to the block size"""
    assert pad(b"abc") == b"abc\0\0\0\0\0"


def test_pad_empty_input() -> None:
    """Test that empty input stays empty"""
    assert pad(b"") == b""


@pytest.mark.parametrize("length", [1, 7, 8, 9, 15, 16, 17, 100])
def test_pad_length_and_prefix(length: int) -> None:
    """Test that padded output is block aligned and starts with the input"""
    data = b"x" * length
    padded = pad(data)
    assert len(padded) % 8 == 0
    assert padded.startswith(data)
    assert len(padded) - length < 8


def test_pad_custom_block_size() -> None:
    """Test padding to an explicit block size"""
    assert pad(b"hello", block_size=16) == b"hello" + b"\0" * 11


def test_strip_padding() -> None:
    """Test that trailing NUL bytes are removed"""
    assert strip_padding(pad(b"abc")) == b"abc"
    assert strip_padding(b"abcdefgh") == b"abcdefgh"


def test_strip_padding_drops_plaintext_nuls() -> None:
    """Test that NUL bytes belonging to the plaintext are also removed"""
    assert strip_padding(b"ab\0") == b"ab"


def test_pad_does_not_modify_caller_buffer() -> None:
    """Test that a bytearray argument is left untouched"""
    data = bytearray(b"abc")
    padded = pad(data)
    assert padded == b"abc\0\0\0\0\0"
    assert isinstance(padded, bytes)
    assert data == bytearray(b"abc")


def test_pad_aligned_bytearray_returns_copy() -> None:
    """Test that an aligned bytearray is returned as an independent bytes copy"""
    data = bytearray(b"abcdefgh")
    padded = pad(data)
    data[0] = ord("z")
    assert padded == b"abcdefgh"


def test_pad_string_aligned() -> None:
    """Test that aligned text is UTF-8 encoded and otherwise unchanged"""
    assert pad("abcdefgh") == b"abcdefgh"


def test_pad_string_short() -> None:
    """Test that short text is UTF-8 encoded then padded"""
    assert pad("abc") == b"abc\0\0\0\0\0"


def test_pad_string_multibyte() -> None:
    """Test that padding is computed on the encoded length"""
    assert pad("é") == "é".encode('utf-8') + b"\0" * 6


def test_pad_rejects_none() -> None:
    """Test padding failure with None input"""
    with pytest.raises(CryptographyInputError) as exc_info:
        pad(None)  # type: ignore
    assert "Cannot pad None data" in str(exc_info.value)


def test_pad_rejects_non_string() -> None:
    """Test padding failure with non-string input"""
    with pytest.raises(CryptographyInputError) as exc_info:
        pad(12345)  # type: ignore
    assert "int" in str(exc_info.value)


def test_pad_rejects_unencodable_text() -> None:
    """Test padding failure for text containing a lone surrogate"""
    with pytest.raises(CryptographyInputError) as exc_info:
        pad("\ud800")
    assert "not UTF-8 encodable" in str(exc_info.value)
