"""
Centralized configuration management for the AES256 encryption helper.

This module provides a single source of truth for the cipher constants and
the ambient settings (logging, environment).
"""

import os
from dataclasses import dataclass, field
import logging
from dotenv import load_dotenv

from aes256_encryption.utils.errors import ConfigurationError

# Load environment variables
load_dotenv()

LOGGER = logging.getLogger(__name__)


@dataclass
class CryptographyConfig:
    """Cryptography configuration."""
    cipher: str = os.getenv("AES_CIPHER", "aes-256-cbc")
    key_size: int = 32  # 256 bits
    iv_size: int = 16  # 128 bits
    block_size: int = 8  # null padding boundary applied before encryption
    allow_less_secure_iv: bool = os.getenv("AES_ALLOW_LESS_SECURE_IV", "false").lower() == "true"
    # Draw insecure fallback indices from [0, iv_size) like older releases did
    legacy_iv_alphabet_index: bool = os.getenv(
        "AES_LEGACY_IV_ALPHABET_INDEX", "false").lower() == "true"

    def validate(self) -> None:
        """
        Validate that the cipher constants are consistent with each other.

        Raises:
            ConfigurationError: If the cipher is unknown or a size does not match it
        """
        # Import here to avoid circular imports
        from aes256_encryption.cryptography.aes import cipher_iv_length, cipher_key_length
        from aes256_encryption.cryptography.exceptions import CipherError

        try:
            key_length = cipher_key_length(self.cipher)
            iv_length = cipher_iv_length(self.cipher)
        except CipherError as e:
            raise ConfigurationError(str(e)) from e

        problems = []
        if self.key_size != key_length:
            problems.append(f"key_size {self.key_size} != {key_length} required by {self.cipher}")
        if self.iv_size != iv_length:
            problems.append(f"iv_size {self.iv_size} != {iv_length} required by {self.cipher}")
        if self.block_size <= 0:
            problems.append(f"block_size must be positive, got {self.block_size}")

        if problems:
            raise ConfigurationError(
                f"Invalid cryptography configuration: {'; '.join(problems)}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: str = os.getenv("LOG_FILE", "")
    max_file_size: int = 10  # MB
    max_files: int = 3


@dataclass
class AppConfig:
    """Main application configuration."""
    environment: str = os.getenv("ENVIRONMENT", "")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Sub-configurations
    cryptography: CryptographyConfig = field(default_factory=CryptographyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Validate that all configuration is consistent."""
        self.cryptography.validate()


# Global configuration instance
config = AppConfig()

# Note: Configuration validation is not run automatically on import
# to allow for testing environments. Use config.validate() explicitly
# when you need to validate configuration in production code.
