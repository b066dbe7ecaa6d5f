from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from weatherwire.container_builder import ContainerBuilder
from weatherwire.exceptions import WeatherWireDependencyNotRegisteredError
from weatherwire.resolver import Resolver
from weatherwire.service_collection import ServiceCollection
from weatherwire.weather import (
    WEATHER_SERVICE,
    WeatherService,
    configure_container_builder,
    configure_service_collection,
)

logger = logging.getLogger(__name__)

CITY = "Pune"


def build_with_service_collection() -> Resolver:
    return configure_service_collection(ServiceCollection()).build_service_provider()


def build_with_container_builder() -> Resolver:
    return configure_container_builder(ContainerBuilder()).build()


def format_temperature(city: str, temperature: float) -> str:
    return f"The temperature in {city} is {temperature}"


def run(build_resolver: Callable[[], Resolver], city: str = CITY) -> int:
    """Resolve the weather service, print the temperature line and return an exit code."""
    try:
        with build_resolver() as resolver:
            service: WeatherService = resolver.resolve(WEATHER_SERVICE)
            temperature = service.get_temperature(city)
    except WeatherWireDependencyNotRegisteredError as error:
        logger.debug("Startup aborted", exc_info=error)
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(format_temperature(city, temperature))
    return 0


def main() -> int:
    """Entry point for the service collection composition."""
    return run(build_with_service_collection)


def main_builder() -> int:
    """Entry point for the container builder composition."""
    return run(build_with_container_builder)
