"""Missing bindings fail fast with a message naming the unbound key."""

from __future__ import annotations

from weatherwire import (
    WEATHER_SERVICE,
    Registry,
    WeatherService,
    WeatherWireDependencyNotRegisteredError,
)


def main() -> None:
    empty = Registry()
    try:
        empty.build().resolve(WEATHER_SERVICE)
    except WeatherWireDependencyNotRegisteredError as error:
        empty_message = str(error)
    print(f"empty={empty_message}")  # => empty=Dependency 'WeatherService' is not registered.

    partial = Registry()
    partial.register(WEATHER_SERVICE, WeatherService)
    try:
        partial.build().resolve(WEATHER_SERVICE)
    except WeatherWireDependencyNotRegisteredError as error:
        missing = error.service_key.name
    print(f"missing={missing}")  # => missing=WeatherProvider


if __name__ == "__main__":
    main()
