"""
AES256 Encryption - static helper for symmetric string encryption

Usage:

    key = generate_key()
    One strong key is usually enough for every record. Storing it is up to
    the caller.

    iv = generate_iv()
    The IV is not secret. Store it next to the encrypted data, ideally a
    unique one per row.

    encrypted = encrypt(text, key, iv)
    decrypted = decrypt(encrypted, key, iv)

Decrypted data keeps the NUL padding added on encryption, see strip_padding().
"""

__version__ = "1.0.0"

from .config import config
from .cryptography import (
    encrypt,
    decrypt,
    generate_iv,
    generate_key,
    pad,
    strip_padding,
)
from .exceptions import (
    EncryptionError,
    ConfigurationError,
    CryptographyError,
    CryptographyInputError,
    CipherError,
    DecodeError,
    RandomnessUnavailableError,
)

__all__ = [
    "encrypt",
    "decrypt",
    "generate_iv",
    "generate_key",
    "pad",
    "strip_padding",

    "config",
    "EncryptionError",
    "ConfigurationError",
    "CryptographyError",
    "CryptographyInputError",
    "CipherError",
    "DecodeError",
    "RandomnessUnavailableError",
]
