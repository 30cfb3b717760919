"""
AES256 Encryption Error Classes (General/Shared)

This module defines general custom exceptions used throughout the package.
"""


class EncryptionError(Exception):
    """Base exception for AES256 encryption errors."""


class ConfigurationError(EncryptionError):
    """Raised when there's a configuration error."""
