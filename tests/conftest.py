"""Shared pytest fixtures for the rules & risk engine tests."""

import pytest

from exportdesk.schemas.shipment import (
    ConsigneeDetails,
    ExporterDetails,
    FieldCompletionContext,
    PortWeatherSample,
)


@pytest.fixture
def full_context() -> FieldCompletionContext:
    """Every field any document asks for is filled."""
    return FieldCompletionContext(
        exporter=ExporterDetails(
            company_name="Argane Souss SARL",
            address="12 Rue des Orangers",
            city="Agadir",
        ),
        consignee=ConsigneeDetails(company_name="Maison Bio GmbH", country="Germany"),
        quantity=1200,
        unit_price=18.5,
    )


@pytest.fixture
def empty_context() -> FieldCompletionContext:
    return FieldCompletionContext()


@pytest.fixture
def calm_samples() -> list[PortWeatherSample]:
    return [
        PortWeatherSample(port_id=port, wind_speed_knots=5, visibility_meters=10000,
                          has_storm_alert=False, temperature_celsius=21)
        for port in ("tanger-med", "casablanca", "agadir")
    ]
