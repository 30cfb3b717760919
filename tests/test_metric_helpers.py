"""Tests for Prometheus metric helpers."""
from unittest.mock import MagicMock

from aes256_encryption.utils.metric_helpers import inc_counter_metric
from aes256_encryption.utils.metrics import MetricDataPointName


def _sample_value(metric_name: MetricDataPointName, suffix: str = "_total", labels=None) -> float:
    counter = metric_name.value
    for metric in counter.collect():
        for sample in metric.samples:
            if sample.name.endswith(suffix) and (labels is None or sample.labels == labels):
                return sample.value
    return 0.0


def test_inc_counter_metric() -> None:
    """Test incrementing an unlabelled counter"""
    before = _sample_value(MetricDataPointName.AES_KEY_GENERATE_SUCCESS_COUNT)
    inc_counter_metric(MetricDataPointName.AES_KEY_GENERATE_SUCCESS_COUNT)
    after = _sample_value(MetricDataPointName.AES_KEY_GENERATE_SUCCESS_COUNT)
    assert after == before + 1


def test_inc_counter_metric_with_labels() -> None:
    """Test incrementing a labelled counter"""
    labels = {"source": "system"}
    before = _sample_value(MetricDataPointName.AES_IV_SOURCE_FAILURE_COUNT, labels=labels)
    inc_counter_metric(MetricDataPointName.AES_IV_SOURCE_FAILURE_COUNT, increment=2, labels=labels)
    after = _sample_value(MetricDataPointName.AES_IV_SOURCE_FAILURE_COUNT, labels=labels)
    assert after == before + 2


def test_inc_counter_metric_uses_labels_accessor() -> None:
    """Test that labels are routed through the counter's labels() accessor"""
    counter = MagicMock()
    metric_name = MagicMock(value=counter)
    inc_counter_metric(metric_name, labels={"source": "openssl"})
    counter.labels.assert_called_once_with(source="openssl")
    counter.labels.return_value.inc.assert_called_once_with(1)
