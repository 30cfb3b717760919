"""
Null-byte padding applied to plaintext before encryption.

Decryption does not reverse it: decrypted data keeps any trailing NUL bytes
added here. Callers whose plaintext never ends in NUL can use
:func:`strip_padding`.
"""

from typing import Optional, Union

from aes256_encryption.config import config
from aes256_encryption.cryptography.exceptions import CryptographyInputError

PAD_BYTE = b"\0"


def to_bytes(data: Union[str, bytes, bytearray], operation: str = "pad") -> bytes:
    """
    Return an immutable copy of ``data``, UTF-8 encoding strings.

    Raises:
        CryptographyInputError: If ``data`` is None, not text or bytes, or not encodable
    """
    if data is None:
        raise CryptographyInputError(f"Cannot {operation} None data.")
    if isinstance(data, str):
        try:
            return data.encode('utf-8')
        except UnicodeEncodeError as e:
            raise CryptographyInputError(
                f"Cannot {operation} text that is not UTF-8 encodable: {str(e)}") from e
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise CryptographyInputError(
            f"Cannot {operation} non-string data. Got type: {type(data).__name__}")
    return bytes(data)


def pad(data: Union[str, bytes, bytearray], block_size: Optional[int] = None) -> bytes:
    """
    Append NUL bytes until the length is a multiple of the block size.

    Args:
        data: The plaintext. Strings are UTF-8 encoded, the caller's buffer is never modified.
        block_size: Padding boundary, defaults to ``config.cryptography.block_size``

    Returns:
        bytes: ``data`` unchanged if already aligned (including empty input),
        otherwise ``data`` followed by ``block_size - len(data) % block_size`` NULs

    Raises:
        CryptographyInputError: If ``data`` is not text or bytes
    """
    if block_size is None:
        block_size = config.cryptography.block_size
    data = to_bytes(data)
    remainder = len(data) % block_size
    if remainder:
        data = data + PAD_BYTE * (block_size - remainder)
    return data


def strip_padding(data: bytes) -> bytes:
    """Remove trailing NUL bytes. Lossy for plaintext that itself ends in NUL."""
    return bytes(data).rstrip(PAD_BYTE)
