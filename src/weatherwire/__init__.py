from weatherwire.container_builder import ContainerBuilder, RegistrationBuilder
from weatherwire.exceptions import (
    WeatherWireDependencyNotRegisteredError,
    WeatherWireError,
    WeatherWireInvalidRegistrationError,
    WeatherWireRegistryBuiltError,
    WeatherWireResolverClosedError,
)
from weatherwire.registry import Registry
from weatherwire.resolver import Resolver
from weatherwire.service_collection import ServiceCollection
from weatherwire.service_key import ServiceKey
from weatherwire.weather import (
    WEATHER_PROVIDER,
    WEATHER_SERVICE,
    StubWeatherProvider,
    WeatherProvider,
    WeatherReport,
    WeatherService,
)

__all__ = [
    "WEATHER_PROVIDER",
    "WEATHER_SERVICE",
    "ContainerBuilder",
    "Registry",
    "RegistrationBuilder",
    "Resolver",
    "ServiceCollection",
    "ServiceKey",
    "StubWeatherProvider",
    "WeatherProvider",
    "WeatherReport",
    "WeatherService",
    "WeatherWireDependencyNotRegisteredError",
    "WeatherWireError",
    "WeatherWireInvalidRegistrationError",
    "WeatherWireRegistryBuiltError",
    "WeatherWireResolverClosedError",
]
