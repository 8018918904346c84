"""Prometheus metrics for the Temperature Service."""

from __future__ import annotations

from common_core.error_enums import PipelineOutcome
from prometheus_client import Counter

from services.temperature_service.protocols import TemperatureMetricsProtocol


class PrometheusTemperatureMetrics(TemperatureMetricsProtocol):
    """Counts pipeline runs by outcome."""

    def __init__(self, lookups_counter: Counter) -> None:
        self.lookups_counter = lookups_counter

    def record_lookup(self, outcome: PipelineOutcome) -> None:
        self.lookups_counter.labels(outcome=outcome.value).inc()
