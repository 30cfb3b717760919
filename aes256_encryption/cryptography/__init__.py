"""
Cryptography Library

This module provides encryption and decryption of strings using AES-256-CBC,
plus key and initialization vector generation.
"""

from .aes import encrypt, decrypt, cipher_iv_length, cipher_key_length
from .padding import pad, strip_padding
from .randomness import generate_iv, generate_key

__all__ = [
    'encrypt',
    'decrypt',
    'cipher_iv_length',
    'cipher_key_length',
    'pad',
    'strip_padding',
    'generate_iv',
    'generate_key',
]
