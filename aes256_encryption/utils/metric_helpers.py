"""
Helper functions for working with Prometheus metrics.
"""

from typing import Dict, Optional

from aes256_encryption.utils.metrics import MetricDataPointName


def inc_counter_metric(
        metric_name: MetricDataPointName,
        increment: int = 1,
        labels: Optional[Dict[str, str]] = None
    ) -> None:
    """Increments a counter metric by a specified value.
    Args:
        metric_name (MetricDataPointName): The name of the metric to increment.
        increment (int, optional): The value to increment the counter by. Defaults to 1
        labels (Dict[str, str]): A dictionary of labels associated with the metric.
    """
    if labels:
        metric_name.value.labels(**labels).inc(increment)
    else:
        metric_name.value.inc(increment)
