"""Tests for exception classes."""

from aes256_encryption.exceptions import (
    EncryptionError,
    ConfigurationError,
    CryptographyError,
    CryptographyInputError,
    CipherError,
    DecodeError,
    RandomnessUnavailableError,
)


def test_encryption_error():
    """Test EncryptionError exception."""
    error = EncryptionError("error")
    assert str(error) == "error"
    assert isinstance(error, Exception)


def test_configuration_error():
    """Test ConfigurationError exception."""
    error = ConfigurationError("error")
    assert str(error) == "error"
    assert isinstance(error, EncryptionError)


def test_cryptography_errors_share_base():
    """Test that every cryptography error derives from CryptographyError."""
    for error_class in (CryptographyInputError, CipherError, DecodeError, RandomnessUnavailableError):
        error = error_class("error")
        assert str(error) == "error"
        assert isinstance(error, CryptographyError)
        assert isinstance(error, EncryptionError)


def test_public_api_reexports():
    """Test that the package root exposes the exceptions."""
    import aes256_encryption

    assert aes256_encryption.CipherError is CipherError
    assert aes256_encryption.RandomnessUnavailableError is RandomnessUnavailableError
