import pytest

from weatherwire.exceptions import (
    WeatherWireDependencyNotRegisteredError,
    WeatherWireResolverClosedError,
)
from weatherwire.registry import Registry
from weatherwire.service_key import ServiceKey
from weatherwire.weather import (
    WEATHER_PROVIDER,
    WEATHER_SERVICE,
    StubWeatherProvider,
    WeatherService,
)

CLIENT = ServiceKey("Client")
REPOSITORY = ServiceKey("Repository")
APPLICATION = ServiceKey("Application")


class Client:
    pass


class Repository:
    DEPENDS_ON = (CLIENT,)

    def __init__(self, client: Client) -> None:
        self.client = client


class Application:
    DEPENDS_ON = (REPOSITORY, CLIENT)

    def __init__(self, repository: Repository, client: Client) -> None:
        self.repository = repository
        self.client = client


@pytest.fixture()
def chain_registry(registry: Registry) -> Registry:
    registry.register(CLIENT, Client)
    registry.register(REPOSITORY, Repository)
    registry.register(APPLICATION, Application)
    return registry


def test_resolves_consumer_with_injected_provider(weather_registry: Registry) -> None:
    service = weather_registry.build().resolve(WEATHER_SERVICE)

    assert isinstance(service, WeatherService)
    assert isinstance(service.provider, StubWeatherProvider)


def test_resolve_creates_fresh_instances(weather_registry: Registry) -> None:
    resolver = weather_registry.build()

    first = resolver.resolve(WEATHER_SERVICE)
    second = resolver.resolve(WEATHER_SERVICE)

    assert first is not second
    assert first.provider is not second.provider
    assert first.get_temperature("Pune") == second.get_temperature("Pune")


def test_resolves_transitive_dependencies(chain_registry: Registry) -> None:
    application = chain_registry.build().resolve(APPLICATION)

    assert isinstance(application.repository, Repository)
    assert isinstance(application.repository.client, Client)
    assert isinstance(application.client, Client)
    assert application.client is not application.repository.client


def test_passes_dependencies_in_declared_order(registry: Registry) -> None:
    first = ServiceKey("First")
    second = ServiceKey("Second")
    combined = ServiceKey("Combined")
    registry.register(first, lambda: "first")
    registry.register(second, lambda: "second")
    registry.register(combined, lambda a, b: f"{a}+{b}", dependencies=[second, first])

    assert registry.build().resolve(combined) == "second+first"


def test_factory_functions_are_called_on_every_resolve(registry: Registry) -> None:
    calls: list[int] = []

    def build_client() -> Client:
        calls.append(1)
        return Client()

    registry.register(CLIENT, build_client)
    resolver = registry.build()
    resolver.resolve(CLIENT)
    resolver.resolve(CLIENT)

    assert len(calls) == 2


def test_missing_transitive_dependency_reports_chain(registry: Registry) -> None:
    registry.register(REPOSITORY, Repository)
    registry.register(APPLICATION, Application)

    with pytest.raises(WeatherWireDependencyNotRegisteredError) as exc_info:
        registry.build().resolve(APPLICATION)

    assert exc_info.value.service_key == CLIENT
    assert exc_info.value.required_by == (APPLICATION, REPOSITORY)


def test_unregistered_key_error_is_catchable(registry: Registry) -> None:
    resolver = registry.build()

    with pytest.raises(WeatherWireDependencyNotRegisteredError):
        resolver.resolve(WEATHER_PROVIDER)

    assert not resolver.is_closed


def test_resolver_exposes_built_bindings(weather_registry: Registry) -> None:
    resolver = weather_registry.build()

    assert WEATHER_PROVIDER in resolver
    assert CLIENT not in resolver


def test_context_manager_closes_resolver(weather_registry: Registry) -> None:
    with weather_registry.build() as resolver:
        assert not resolver.is_closed
        resolver.resolve(WEATHER_SERVICE)

    assert resolver.is_closed


def test_context_manager_closes_resolver_on_error(weather_registry: Registry) -> None:
    resolver = weather_registry.build()

    with pytest.raises(RuntimeError, match="boom"), resolver:
        raise RuntimeError("boom")

    assert resolver.is_closed


def test_close_is_idempotent(weather_registry: Registry) -> None:
    resolver = weather_registry.build()

    resolver.close()
    resolver.close()

    assert resolver.is_closed
    with pytest.raises(WeatherWireResolverClosedError):
        resolver.resolve(WEATHER_PROVIDER)
