"""
Prometheus metrics for the AES256 encryption helper.
"""

import enum

from prometheus_client import Counter

# Label name for the randomness source that produced (or failed to produce) an IV
randomness_source_label = "source"

# Encryption/Decryption metrics
aes_encrypt_success_count = Counter(
    "aes_encrypt_success_count",
    "Number of successful AES encryption operations",
)
aes_encrypt_error_count = Counter(
    "aes_encrypt_error_count",
    "Number of failed AES encryption operations",
)
aes_decrypt_success_count = Counter(
    "aes_decrypt_success_count",
    "Number of successful AES decryption operations",
)
aes_decrypt_error_count = Counter(
    "aes_decrypt_error_count",
    "Number of failed AES decryption operations",
)

# Key generation metrics
aes_key_generate_success_count = Counter(
    "aes_key_generate_success_count",
    "Number of successful key generations",
)
aes_key_generate_error_count = Counter(
    "aes_key_generate_error_count",
    "Number of failed key generations",
)

# IV generation metrics
aes_iv_generate_success_count = Counter(
    "aes_iv_generate_success_count",
    "Number of generated initialization vectors, by randomness source",
    labelnames=[randomness_source_label],
)
aes_iv_generate_error_count = Counter(
    "aes_iv_generate_error_count",
    "Number of IV generations that exhausted every permitted randomness source",
)
aes_iv_source_failure_count = Counter(
    "aes_iv_source_failure_count",
    "Number of randomness source failures that triggered a fallback",
    labelnames=[randomness_source_label],
)


class MetricDataPointName(enum.Enum):
    AES_ENCRYPT_SUCCESS_COUNT = aes_encrypt_success_count
    AES_ENCRYPT_ERROR_COUNT = aes_encrypt_error_count
    AES_DECRYPT_SUCCESS_COUNT = aes_decrypt_success_count
    AES_DECRYPT_ERROR_COUNT = aes_decrypt_error_count
    AES_KEY_GENERATE_SUCCESS_COUNT = aes_key_generate_success_count
    AES_KEY_GENERATE_ERROR_COUNT = aes_key_generate_error_count
    AES_IV_GENERATE_SUCCESS_COUNT = aes_iv_generate_success_count
    AES_IV_GENERATE_ERROR_COUNT = aes_iv_generate_error_count
    AES_IV_SOURCE_FAILURE_COUNT = aes_iv_source_failure_count
