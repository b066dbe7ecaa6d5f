"""Service collection: register transients, build a provider, resolve.

Each ``add_transient`` call binds a service key to a factory. Building the
collection produces a resolver that wires ``WeatherService`` with the provider
it declares in ``DEPENDS_ON``.
"""

from __future__ import annotations

from weatherwire import WEATHER_PROVIDER, WEATHER_SERVICE, ServiceCollection
from weatherwire.weather import StubWeatherProvider, WeatherService


def main() -> None:
    services = ServiceCollection()
    services.add_transient(WEATHER_PROVIDER, StubWeatherProvider)
    services.add_transient(WEATHER_SERVICE, WeatherService)

    with services.build_service_provider() as provider:
        service = provider.resolve(WEATHER_SERVICE)
        temperature = service.get_temperature("Pune")

    print(f"The temperature in Pune is {temperature}")  # => The temperature in Pune is 32.5
    print(f"provider={type(service.provider).__name__}")  # => provider=StubWeatherProvider


if __name__ == "__main__":
    main()
