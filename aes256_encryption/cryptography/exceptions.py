"""
Cryptography-specific exceptions.
"""

from aes256_encryption.utils.errors import EncryptionError


class CryptographyError(EncryptionError):
    """Raised when there's an encryption/decryption error."""


class CryptographyInputError(CryptographyError):
    """Raised when an argument has the wrong type."""


class CipherError(CryptographyError):
    """Raised when the cipher primitive rejects its key, IV, or data."""


class DecodeError(CryptographyError):
    """Raised when ciphertext is not valid base64."""


class RandomnessUnavailableError(CryptographyError):
    """Raised when no permitted randomness source can produce bytes."""
