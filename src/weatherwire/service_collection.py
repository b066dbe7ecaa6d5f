from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal

from weatherwire.registry import Registry

if TYPE_CHECKING:
    from typing_extensions import Self

    from weatherwire.providers import FactoryProvider
    from weatherwire.resolver import Resolver
    from weatherwire.service_key import ServiceKey


class ServiceCollection:
    """Register transient bindings one call at a time.

    Examples:
        .. code-block:: python

            services = ServiceCollection()
            services.add_transient(WEATHER_PROVIDER, StubWeatherProvider)
            services.add_transient(WEATHER_SERVICE, WeatherService)

            with services.build_service_provider() as provider:
                service = provider.resolve(WEATHER_SERVICE)

    """

    def __init__(self) -> None:
        self._registry = Registry()

    def add_transient(
        self,
        provides: ServiceKey,
        factory: FactoryProvider,
        *,
        dependencies: Sequence[ServiceKey] | Literal["infer"] = "infer",
    ) -> Self:
        """Bind ``provides`` to a factory that runs on every resolution.

        Args:
            provides: Service key produced by this factory.
            factory: Callable invoked with the resolved dependencies.
            dependencies: Explicit dependency keys, or ``"infer"`` to read the
                factory's ``DEPENDS_ON`` attribute.

        Returns:
            The collection itself, for chaining.

        """
        self._registry.register(provides, factory, dependencies=dependencies)
        return self

    def build_service_provider(self) -> Resolver:
        """Build the resolver for the collected bindings."""
        return self._registry.build()

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    def __len__(self) -> int:
        return len(self._registry)
