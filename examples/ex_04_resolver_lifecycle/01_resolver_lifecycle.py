"""Resolver lifecycle: build once, resolve fresh instances, close at scope exit."""

from __future__ import annotations

from weatherwire import (
    WEATHER_SERVICE,
    ServiceCollection,
    WeatherWireRegistryBuiltError,
    WeatherWireResolverClosedError,
)
from weatherwire.weather import configure_service_collection


def main() -> None:
    services = configure_service_collection(ServiceCollection())

    with services.build_service_provider() as resolver:
        first = resolver.resolve(WEATHER_SERVICE)
        second = resolver.resolve(WEATHER_SERVICE)

    print(f"distinct_instances={first is not second}")  # => distinct_instances=True
    print(
        f"same_answer={first.get_temperature('Pune') == second.get_temperature('Pune')}",
    )  # => same_answer=True

    try:
        resolver.resolve(WEATHER_SERVICE)
    except WeatherWireResolverClosedError as error:
        closed_error = type(error).__name__
    print(f"after_close={closed_error}")  # => after_close=WeatherWireResolverClosedError

    try:
        services.build_service_provider()
    except WeatherWireRegistryBuiltError as error:
        rebuild_error = type(error).__name__
    print(f"rebuild={rebuild_error}")  # => rebuild=WeatherWireRegistryBuiltError


if __name__ == "__main__":
    main()
