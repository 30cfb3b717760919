'''
AES Cryptography Library

This module provides encryption and decryption of strings using AES in CBC mode
with a caller-supplied key and initialization vector (IV).

Plaintext is NUL-padded to ``block_size`` before encryption, then the cipher
layer applies PKCS7 to the AES block. Decryption removes only the PKCS7 layer,
so decrypted data keeps the NUL padding.
'''

import base64
from typing import Dict, Optional, Union
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding

from aes256_encryption.config import CryptographyConfig, config
from aes256_encryption.cryptography.exceptions import (
    CipherError,
    CryptographyError,
    CryptographyInputError,
    DecodeError,
)
from aes256_encryption.cryptography.padding import pad, to_bytes
from aes256_encryption.utils.logging_config import get_logger
from aes256_encryption.utils.metrics import MetricDataPointName
from aes256_encryption.utils.metric_helpers import inc_counter_metric

LOGGER = get_logger(__name__)

# Key length in bytes, by cipher identifier
SUPPORTED_CIPHERS: Dict[str, int] = {
    'aes-128-cbc': 16,
    'aes-192-cbc': 24,
    'aes-256-cbc': 32,
}

# OpenSSL short names
CIPHER_ALIASES: Dict[str, str] = {
    'aes128': 'aes-128-cbc',
    'aes192': 'aes-192-cbc',
    'aes256': 'aes-256-cbc',
}

AES_BLOCK_BYTES = algorithms.AES.block_size // 8


def _normalize_cipher(cipher: str) -> str:
    name = cipher.lower()
    name = CIPHER_ALIASES.get(name, name)
    if name not in SUPPORTED_CIPHERS:
        raise CipherError(f"Unsupported cipher: {cipher}")
    return name


def cipher_key_length(cipher: str) -> int:
    """Key length in bytes required by ``cipher``."""
    return SUPPORTED_CIPHERS[_normalize_cipher(cipher)]


def cipher_iv_length(cipher: str) -> int:
    """IV length in bytes required by ``cipher``."""
    _normalize_cipher(cipher)
    return AES_BLOCK_BYTES


def _build_cipher(key: bytes, initialization_vector: bytes, cipher: str) -> Cipher:
    if not isinstance(key, (bytes, bytearray)):
        raise CryptographyInputError(f"Key must be bytes. Got type: {type(key).__name__}")
    if not isinstance(initialization_vector, (bytes, bytearray)):
        raise CryptographyInputError(
            f"IV must be bytes. Got type: {type(initialization_vector).__name__}")

    key_length = cipher_key_length(cipher)
    if len(key) != key_length:
        raise CipherError(f"Key must be {key_length} bytes for {cipher}, got {len(key)}")
    iv_length = cipher_iv_length(cipher)
    if len(initialization_vector) != iv_length:
        raise CipherError(
            f"IV must be {iv_length} bytes for {cipher}, got {len(initialization_vector)}")

    return Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(initialization_vector)))


def encrypt(
        data: Union[str, bytes],
        key: bytes,
        initialization_vector: bytes,
        settings: Optional[CryptographyConfig] = None) -> str:
    """
    Encrypt data using AES-CBC.

    Args:
        data: The data to encrypt (string or bytes). Strings are UTF-8 encoded.
        key: The encryption key, sized for the configured cipher
        initialization_vector: The IV, sized for the configured cipher
        settings: Optional cryptography settings. Defaults to ``config.cryptography``.

    Returns:
        str: Base64 encoded ciphertext

    Raises:
        CryptographyInputError: If an argument has the wrong type or the text is not UTF-8 encodable
        CipherError: If the key or IV length is wrong, or the cipher is unsupported
    """
    settings = settings or config.cryptography
    try:
        plaintext = to_bytes(data, "encrypt")

        encryptor = _build_cipher(key, initialization_vector, settings.cipher).encryptor()

        padded_data = pad(plaintext, settings.block_size)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        block_aligned = padder.update(padded_data) + padder.finalize()

        encrypted_data = encryptor.update(block_aligned) + encryptor.finalize()

        inc_counter_metric(MetricDataPointName.AES_ENCRYPT_SUCCESS_COUNT)
        return base64.b64encode(encrypted_data).decode('ascii')

    except CryptographyError:
        # Re-raise as-is to preserve specific exception type
        inc_counter_metric(MetricDataPointName.AES_ENCRYPT_ERROR_COUNT)
        raise
    except (ValueError, TypeError) as e:
        inc_counter_metric(MetricDataPointName.AES_ENCRYPT_ERROR_COUNT)
        LOGGER.error("Encryption failed: %s", str(e), exc_info=True)
        raise CipherError(f"Encryption failed: {str(e)}") from e


def decrypt(
        data: Union[str, bytes],
        key: bytes,
        initialization_vector: bytes,
        settings: Optional[CryptographyConfig] = None) -> bytes:
    """
    Decrypt base64 encoded data that was encrypted using AES-CBC.

    The NUL padding added on encryption is not removed.

    Args:
        data: The base64 encoded ciphertext
        key: The encryption key used by :func:`encrypt`
        initialization_vector: The IV used by :func:`encrypt`
        settings: Optional cryptography settings. Defaults to ``config.cryptography``.

    Returns:
        bytes: The decrypted data, including any NUL padding

    Raises:
        CryptographyInputError: If an argument has the wrong type
        DecodeError: If the data is not valid base64
        CipherError: If the key or IV is wrong, or the ciphertext is truncated or corrupted
    """
    settings = settings or config.cryptography
    try:
        if data is None:
            raise CryptographyInputError("Cannot decrypt None data.")
        if not isinstance(data, (str, bytes)):
            raise CryptographyInputError(
                f"Cannot decrypt non-string data. Got type: {type(data).__name__}")

        try:
            encrypted_data = base64.b64decode(data.strip(), validate=True)
        except ValueError as e:
            LOGGER.error("Ciphertext is not valid base64: %s", str(e))
            raise DecodeError(f"Invalid base64 ciphertext: {str(e)}") from e

        decryptor = _build_cipher(key, initialization_vector, settings.cipher).decryptor()

        if not encrypted_data or len(encrypted_data) % AES_BLOCK_BYTES != 0:
            raise CipherError(
                f"Encrypted data length ({len(encrypted_data)}) is not a positive multiple of "
                f"block size ({AES_BLOCK_BYTES}). "
                f"This suggests the data may be truncated or corrupted.")

        block_aligned = decryptor.update(encrypted_data) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        decrypted = unpadder.update(block_aligned) + unpadder.finalize()

        inc_counter_metric(MetricDataPointName.AES_DECRYPT_SUCCESS_COUNT)
        return decrypted

    except CryptographyError:
        inc_counter_metric(MetricDataPointName.AES_DECRYPT_ERROR_COUNT)
        raise
    except (ValueError, TypeError) as e:
        # Bad PKCS7 padding after decryption means the key or IV is wrong
        inc_counter_metric(MetricDataPointName.AES_DECRYPT_ERROR_COUNT)
        LOGGER.error("Decryption failed: %s", str(e), exc_info=True)
        raise CipherError(f"Decryption failed: {str(e)}") from e
