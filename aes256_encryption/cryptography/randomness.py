"""
Key and initialization vector (IV) generation.

Keys come from a single cryptographically secure source. IVs are produced by
an ordered chain of randomness sources: each source is tried only after the
previous one failed, and the non-cryptographic fallback is reachable only when
the caller explicitly allows less secure IVs.
"""

import os
import random
import secrets
import ssl
import string
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from aes256_encryption.config import CryptographyConfig, config
from aes256_encryption.cryptography.aes import cipher_iv_length
from aes256_encryption.cryptography.exceptions import RandomnessUnavailableError
from aes256_encryption.utils.logging_config import get_logger
from aes256_encryption.utils.metrics import MetricDataPointName, randomness_source_label
from aes256_encryption.utils.metric_helpers import inc_counter_metric

LOGGER = get_logger(__name__)

# 'A' through 'z' includes the six symbols between 'Z' and 'a'
PERMITTED_CHARS = (
    ''.join(chr(c) for c in range(ord('A'), ord('z') + 1))
    + string.digits
    + '~!@#$%&*()-=+{};:"<>,.?/\''
)


class RandomnessSourceName(Enum):
    """Randomness sources of the IV chain, in priority order."""

    OPENSSL = "openssl"
    GETRANDOM = "getrandom"
    SYSTEM = "system"
    INSECURE_ALPHABET = "insecure_alphabet"


class RandomnessSource(ABC):
    """Base interface for a single entry of the IV chain."""

    secure: bool = True

    @property
    @abstractmethod
    def name(self) -> RandomnessSourceName:
        """Get the name of this source."""

    @abstractmethod
    def try_generate(self, settings: CryptographyConfig) -> Optional[bytes]:
        """Produce an IV.

        Args:
            settings: Cryptography settings providing the IV length

        Returns:
            The IV bytes, or None if this source failed
        """


class OpenSSLRandomSource(RandomnessSource):
    """OpenSSL's CSPRNG, asked for the cipher's IV length."""

    @property
    def name(self) -> RandomnessSourceName:
        return RandomnessSourceName.OPENSSL

    def try_generate(self, settings: CryptographyConfig) -> Optional[bytes]:
        try:
            return ssl.RAND_bytes(cipher_iv_length(settings.cipher))
        except ssl.SSLError as e:
            LOGGER.warning("OpenSSL random generator failed: %s", str(e))
            return None


class GetrandomSource(RandomnessSource):
    """The kernel's getrandom() call, only present on some platforms."""

    @property
    def name(self) -> RandomnessSourceName:
        return RandomnessSourceName.GETRANDOM

    def try_generate(self, settings: CryptographyConfig) -> Optional[bytes]:
        # Looked up per call, the platform decides whether it exists
        getrandom = getattr(os, 'getrandom', None)
        if getrandom is None:
            LOGGER.debug("os.getrandom is not available on this platform")
            return None
        try:
            random_bytes = getrandom(settings.iv_size)
        except OSError as e:
            LOGGER.warning("getrandom() failed: %s", str(e))
            return None
        if len(random_bytes) != settings.iv_size:
            LOGGER.warning("getrandom() returned %d of %d bytes", len(random_bytes), settings.iv_size)
            return None
        return random_bytes


class SystemRandomSource(RandomnessSource):
    """The general purpose CSPRNG from :mod:`secrets`."""

    @property
    def name(self) -> RandomnessSourceName:
        return RandomnessSourceName.SYSTEM

    def try_generate(self, settings: CryptographyConfig) -> Optional[bytes]:
        try:
            return secrets.token_bytes(settings.iv_size)
        except (OSError, NotImplementedError) as e:
            LOGGER.warning("System random generator failed: %s", str(e))
            return None


class InsecureAlphabetSource(RandomnessSource):
    """
    Non-cryptographic fallback building an IV out of printable characters.

    With ``legacy_iv_alphabet_index`` the index is drawn from ``[0, iv_size)``,
    so only the first ``iv_size`` characters of the alphabet can appear.
    """

    secure = False

    @property
    def name(self) -> RandomnessSourceName:
        return RandomnessSourceName.INSECURE_ALPHABET

    def try_generate(self, settings: CryptographyConfig) -> Optional[bytes]:
        if settings.legacy_iv_alphabet_index:
            upper = min(settings.iv_size, len(PERMITTED_CHARS))
        else:
            upper = len(PERMITTED_CHARS)
        chars = [PERMITTED_CHARS[random.randint(0, upper - 1)] for _ in range(settings.iv_size)]
        return ''.join(chars).encode('ascii')


def default_sources(allow_less_secure: bool = False) -> List[RandomnessSource]:
    """Build the IV chain in priority order."""
    sources: List[RandomnessSource] = [
        OpenSSLRandomSource(),
        GetrandomSource(),
        SystemRandomSource(),
    ]
    if allow_less_secure:
        sources.append(InsecureAlphabetSource())
    return sources


def generate_iv(
        allow_less_secure: Optional[bool] = None,
        settings: Optional[CryptographyConfig] = None,
        sources: Optional[Sequence[RandomnessSource]] = None) -> bytes:
    """
    Generate an initialization vector.

    The IV is not secret and can be stored next to the ciphertext, but it
    should be unique per record.

    Args:
        allow_less_secure: Permit the non-cryptographic fallback when every
            secure source fails. Defaults to ``settings.allow_less_secure_iv``.
        settings: Optional cryptography settings. Defaults to ``config.cryptography``.
        sources: Optional chain replacing :func:`default_sources`

    Returns:
        bytes: The IV

    Raises:
        RandomnessUnavailableError: If no permitted source produced an IV
    """
    settings = settings or config.cryptography
    if allow_less_secure is None:
        allow_less_secure = settings.allow_less_secure_iv
    if sources is None:
        sources = default_sources(allow_less_secure)

    for source in sources:
        if not source.secure and not allow_less_secure:
            continue

        random_bytes = source.try_generate(settings)
        if random_bytes is not None:
            if not source.secure:
                LOGGER.warning(
                    "All secure randomness sources failed, IV generated by %s", source.name.value)
            inc_counter_metric(
                MetricDataPointName.AES_IV_GENERATE_SUCCESS_COUNT,
                labels={randomness_source_label: source.name.value})
            return random_bytes

        LOGGER.warning("Randomness source %s failed, falling back", source.name.value)
        inc_counter_metric(
            MetricDataPointName.AES_IV_SOURCE_FAILURE_COUNT,
            labels={randomness_source_label: source.name.value})

    inc_counter_metric(MetricDataPointName.AES_IV_GENERATE_ERROR_COUNT)
    LOGGER.error("Unable to generate initialization vector (IV), allow_less_secure=%s",
                 allow_less_secure)
    raise RandomnessUnavailableError("Unable to generate initialization vector (IV)")


def generate_key(settings: Optional[CryptographyConfig] = None) -> bytes:
    """
    Generate a random encryption key.

    The key is secret and owned by the caller. A single strong key can be used
    for every record.

    Args:
        settings: Optional cryptography settings. Defaults to ``config.cryptography``.

    Returns:
        bytes: ``settings.key_size`` random bytes

    Raises:
        RandomnessUnavailableError: If the secure random source is unavailable
    """
    settings = settings or config.cryptography
    try:
        key = secrets.token_bytes(settings.key_size)
    except (OSError, NotImplementedError) as e:
        inc_counter_metric(MetricDataPointName.AES_KEY_GENERATE_ERROR_COUNT)
        LOGGER.error("Failed to generate encryption key: %s", str(e), exc_info=True)
        raise RandomnessUnavailableError(f"Unable to generate encryption key: {str(e)}") from e

    inc_counter_metric(MetricDataPointName.AES_KEY_GENERATE_SUCCESS_COUNT)
    return key
