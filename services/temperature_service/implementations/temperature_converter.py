"""Celsius to Fahrenheit/Kelvin conversion."""

from __future__ import annotations

from common_core.temperature_models import TemperatureReport

# Kelvin uses a whole-degree offset, not 273.15
KELVIN_OFFSET = 273


def convert_temperature(celsius: float, city: str) -> TemperatureReport:
    """Build the report for *city* from a Celsius reading."""
    return TemperatureReport(
        city=city,
        temp_c=celsius,
        temp_f=celsius * 1.8 + 32,
        temp_k=celsius + KELVIN_OFFSET,
    )
