"""Tests for Celsius to Fahrenheit/Kelvin conversion."""

from __future__ import annotations

import pytest

from services.temperature_service.implementations.temperature_converter import (
    KELVIN_OFFSET,
    convert_temperature,
)


class TestConvertTemperature:
    """Test conversion formulas and fixed points."""

    @pytest.mark.parametrize(
        "celsius, expected_f, expected_k",
        [
            (0.0, 32.0, 273.0),
            (100.0, 212.0, 373.0),
            (-40.0, -40.0, 233.0),
            (37.0, 98.6, 310.0),
            (-12.8, 8.96, 260.2),
        ],
    )
    def test_known_values(self, celsius: float, expected_f: float, expected_k: float) -> None:
        """Test conversion against hand-computed fixtures."""
        report = convert_temperature(celsius, "São Paulo")

        assert report.temp_c == celsius
        assert report.temp_f == pytest.approx(expected_f, abs=1e-9)
        assert report.temp_k == pytest.approx(expected_k, abs=1e-9)

    @pytest.mark.parametrize("celsius", [-273.0, -0.5, 0.1, 25.5, 56.7, 1e6])
    def test_formulas_hold(self, celsius: float) -> None:
        """Test F == C*1.8+32 and K == C+273 across the range."""
        report = convert_temperature(celsius, "Curitiba")

        assert report.temp_f == pytest.approx(celsius * 1.8 + 32, abs=1e-9)
        assert report.temp_k == pytest.approx(celsius + 273, abs=1e-9)

    def test_kelvin_uses_whole_degree_offset(self) -> None:
        """Known approximation: Kelvin is C + 273, not C + 273.15."""
        report = convert_temperature(0.0, "Recife")

        assert KELVIN_OFFSET == 273
        assert report.temp_k == 273.0
        assert report.temp_k != 273.15

    def test_city_attached_and_wire_names(self) -> None:
        """Test the report carries the city and serializes with temp_C/F/K."""
        report = convert_temperature(25.5, "São Paulo")

        data = report.to_response()

        assert data["city"] == "São Paulo"
        assert set(data) == {"city", "temp_C", "temp_F", "temp_K"}
        assert data["temp_C"] == 25.5
        assert data["temp_F"] == pytest.approx(77.9)
        assert data["temp_K"] == pytest.approx(298.5)
