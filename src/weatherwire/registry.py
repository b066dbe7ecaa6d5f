from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Literal

from weatherwire.exceptions import WeatherWireRegistryBuiltError
from weatherwire.providers import FactoryProvider, ProviderSpec, ProvidersRegistrations
from weatherwire.resolver import Resolver
from weatherwire.service_key import ServiceKey
from weatherwire.validators import DependencyRegistrationValidator

logger = logging.getLogger(__name__)

DEPENDS_ON_ATTRIBUTE = "DEPENDS_ON"
"""Class or function attribute listing the service keys a factory depends on."""


class Registry:
    """Collect bindings from service keys to factories, then build a resolver.

    A registry has two phases. While open, ``register`` adds or replaces
    bindings; the last registration for a key wins. ``build`` freezes the
    bindings into a ``Resolver`` and closes the registry for good.

    Dependencies are never inferred from constructor signatures. Each factory
    declares the keys it needs, either through its ``DEPENDS_ON`` attribute or
    through the explicit ``dependencies`` argument.
    """

    def __init__(self) -> None:
        self._providers_registrations = ProvidersRegistrations()
        self._dependency_registration_validator = DependencyRegistrationValidator()
        self._is_built = False

    @property
    def is_built(self) -> bool:
        """Whether ``build`` has already been called."""
        return self._is_built

    def register(
        self,
        provides: ServiceKey,
        factory: FactoryProvider,
        *,
        dependencies: Sequence[ServiceKey] | Literal["infer"] = "infer",
    ) -> None:
        """Register a factory for a service key.

        Args:
            provides: Service key produced by this factory.
            factory: Callable invoked with the resolved dependencies, in
                declaration order, as positional arguments.
            dependencies: Explicit dependency keys, or ``"infer"`` to read the
                factory's ``DEPENDS_ON`` attribute (no dependencies when absent).

        Raises:
            WeatherWireRegistryBuiltError: If the registry was already built.
            WeatherWireInvalidRegistrationError: If ``provides``, ``factory`` or
                ``dependencies`` are invalid. The registry is left unchanged.

        Examples:
            .. code-block:: python

                registry = Registry()
                registry.register(WEATHER_PROVIDER, StubWeatherProvider)
                registry.register(
                    WEATHER_SERVICE,
                    WeatherService,
                    dependencies=[WEATHER_PROVIDER],
                )

        """
        self._ensure_open(method_name="register")

        validator = self._dependency_registration_validator
        validator.validate_provides(provides)
        validator.validate_factory(factory)
        declared: Any = (
            getattr(factory, DEPENDS_ON_ATTRIBUTE, ()) if dependencies == "infer" else dependencies
        )
        resolved_dependencies = validator.validate_dependencies(factory, declared)

        if provides in self._providers_registrations:
            logger.debug("Replacing binding for '%s'", provides)
        self._providers_registrations.add(
            ProviderSpec(
                provides=provides,
                factory=factory,
                dependencies=resolved_dependencies,
            ),
        )

    def build(self) -> Resolver:
        """Freeze the registered bindings into a resolver.

        Returns:
            A resolver over a snapshot of the current bindings.

        Raises:
            WeatherWireRegistryBuiltError: If the registry was already built.

        """
        self._ensure_open(method_name="build")
        self._is_built = True
        logger.info("Registry built with %d binding(s)", len(self._providers_registrations))
        return Resolver(self._providers_registrations.snapshot())

    def _ensure_open(self, *, method_name: str) -> None:
        if self._is_built:
            msg = f"Cannot call {method_name}() on a registry that has already been built."
            raise WeatherWireRegistryBuiltError(msg)

    def __contains__(self, key: object) -> bool:
        return key in self._providers_registrations

    def __len__(self) -> int:
        return len(self._providers_registrations)
