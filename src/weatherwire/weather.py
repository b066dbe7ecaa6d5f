"""Weather lookup capability and the service that consumes it."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, NamedTuple, Protocol

from weatherwire.service_key import ServiceKey

if TYPE_CHECKING:
    from weatherwire.container_builder import ContainerBuilder
    from weatherwire.service_collection import ServiceCollection

WEATHER_PROVIDER = ServiceKey("WeatherProvider")
WEATHER_SERVICE = ServiceKey("WeatherService")

STUB_TEMPERATURE = 32.5


class WeatherReport(NamedTuple):
    city: str
    temperature: float


class WeatherProvider(Protocol):
    def get_report(self, city: str) -> WeatherReport: ...


class StubWeatherProvider:
    """Report the same temperature for every city without any I/O."""

    def get_report(self, city: str) -> WeatherReport:
        return WeatherReport(city=city, temperature=STUB_TEMPERATURE)


class WeatherService:
    """Expose temperatures while hiding which provider supplies them."""

    DEPENDS_ON: ClassVar[tuple[ServiceKey, ...]] = (WEATHER_PROVIDER,)

    def __init__(self, provider: WeatherProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> WeatherProvider:
        return self._provider

    def get_temperature(self, city: str) -> float:
        return self._provider.get_report(city).temperature


def configure_service_collection(services: ServiceCollection) -> ServiceCollection:
    """Register the stub provider and the weather service as transients."""
    return services.add_transient(WEATHER_PROVIDER, StubWeatherProvider).add_transient(
        WEATHER_SERVICE,
        WeatherService,
    )


def configure_container_builder(builder: ContainerBuilder) -> ContainerBuilder:
    """Register the stub provider and the weather service on a container builder."""
    builder.register_type(StubWeatherProvider).as_(WEATHER_PROVIDER)
    builder.register_type(WeatherService).as_(WEATHER_SERVICE)
    return builder
