"""Container builder: fluent ``register_type(...).as_(...)`` registrations.

Registrations are committed in call order when the builder is built, so a
later registration for the same key replaces an earlier one.
"""

from __future__ import annotations

from weatherwire import WEATHER_PROVIDER, WEATHER_SERVICE, ContainerBuilder, WeatherReport
from weatherwire.weather import StubWeatherProvider, WeatherService


class FreezingWeatherProvider:
    def get_report(self, city: str) -> WeatherReport:
        return WeatherReport(city=city, temperature=-5.0)


def main() -> None:
    builder = ContainerBuilder()
    builder.register_type(FreezingWeatherProvider).as_(WEATHER_PROVIDER)
    builder.register_type(StubWeatherProvider).as_(WEATHER_PROVIDER)
    builder.register_type(WeatherService).as_(WEATHER_SERVICE)

    with builder.build() as container:
        weather_service = container.resolve(WEATHER_SERVICE)
        temperature = weather_service.get_temperature("Pune")

    print(f"The temperature in Pune is {temperature}")  # => The temperature in Pune is 32.5
    print(f"container_closed={container.is_closed}")  # => container_closed=True


if __name__ == "__main__":
    main()
