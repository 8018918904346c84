"""Shared fixtures for cep_service_libs tests."""

from __future__ import annotations

from typing import Generator

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter


@pytest.fixture
def opentelemetry_test_isolation() -> Generator[InMemorySpanExporter, None, None]:
    """
    Collect finished spans in memory for the duration of one test.

    Installs an SDK TracerProvider the first time it is needed and attaches a
    fresh in-memory exporter per test.
    """
    span_exporter = InMemorySpanExporter()

    current_provider = trace.get_tracer_provider()
    if not hasattr(current_provider, "add_span_processor"):
        test_provider = TracerProvider()
        trace.set_tracer_provider(test_provider)
        current_provider = test_provider

    test_processor = SimpleSpanProcessor(span_exporter)
    current_provider.add_span_processor(test_processor)

    try:
        yield span_exporter
    finally:
        span_exporter.clear()
        test_processor.shutdown()
