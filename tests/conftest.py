"""Shared pytest fixtures for weatherwire tests."""

import pytest

from weatherwire.container_builder import ContainerBuilder
from weatherwire.registry import Registry
from weatherwire.service_collection import ServiceCollection
from weatherwire.weather import (
    WEATHER_PROVIDER,
    WEATHER_SERVICE,
    StubWeatherProvider,
    WeatherService,
)


@pytest.fixture()
def registry() -> Registry:
    """Empty, unbuilt registry."""
    return Registry()


@pytest.fixture()
def weather_registry() -> Registry:
    """Registry holding the standard weather bindings."""
    registry = Registry()
    registry.register(WEATHER_PROVIDER, StubWeatherProvider)
    registry.register(WEATHER_SERVICE, WeatherService)
    return registry


@pytest.fixture()
def services() -> ServiceCollection:
    """Empty service collection."""
    return ServiceCollection()


@pytest.fixture()
def builder() -> ContainerBuilder:
    """Empty container builder."""
    return ContainerBuilder()
