"""
Centralized exceptions for the AES256 encryption helper.

This module re-exports all exceptions from their respective modules
to provide a single import point.
"""

from aes256_encryption.cryptography.exceptions import (
    CryptographyError,
    CryptographyInputError,
    CipherError,
    DecodeError,
    RandomnessUnavailableError,
)
from aes256_encryption.utils.errors import EncryptionError, ConfigurationError

__all__ = [
    'EncryptionError',
    'ConfigurationError',
    'CryptographyError',
    'CryptographyInputError',
    'CipherError',
    'DecodeError',
    'RandomnessUnavailableError',
]
