from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from weatherwire.exceptions import (
    WeatherWireInvalidRegistrationError,
    WeatherWireRegistryBuiltError,
)
from weatherwire.registry import Registry
from weatherwire.service_key import ServiceKey
from weatherwire.validators import DependencyRegistrationValidator

if TYPE_CHECKING:
    from typing_extensions import Self

    from weatherwire.providers import FactoryProvider
    from weatherwire.resolver import Resolver


@dataclass(slots=True, kw_only=True)
class RegistrationBuilder:
    """A pending registration created by ``ContainerBuilder.register_type``.

    The registration is bound to ``ServiceKey(factory.__name__)`` unless
    ``as_`` names another key. It is committed when the builder is built.
    """

    builder: ContainerBuilder
    factory: FactoryProvider
    dependencies: Sequence[ServiceKey] | Literal["infer"] = "infer"
    provides: ServiceKey | None = None

    def as_(self, provides: ServiceKey) -> Self:
        """Expose the registration under ``provides``.

        Raises:
            WeatherWireRegistryBuiltError: If the owning builder was already built.
            WeatherWireInvalidRegistrationError: If ``provides`` is not a ``ServiceKey``.

        """
        self.builder._ensure_open(method_name="as_")
        DependencyRegistrationValidator().validate_provides(provides)
        self.provides = provides
        return self

    def service_key(self) -> ServiceKey:
        """Return the key this registration will be bound to."""
        if self.provides is not None:
            return self.provides

        name = getattr(self.factory, "__name__", None)
        if not isinstance(name, str) or not name:
            msg = f"Factory {self.factory!r} has no name; call as_() to choose a service key."
            raise WeatherWireInvalidRegistrationError(msg)
        return ServiceKey(name)


class ContainerBuilder:
    """Collect fluent registrations and build them into a resolver.

    Examples:
        .. code-block:: python

            builder = ContainerBuilder()
            builder.register_type(StubWeatherProvider).as_(WEATHER_PROVIDER)
            builder.register_type(WeatherService).as_(WEATHER_SERVICE)

            with builder.build() as container:
                service = container.resolve(WEATHER_SERVICE)

    """

    def __init__(self) -> None:
        self._registrations: list[RegistrationBuilder] = []
        self._registry = Registry()
        self._dependency_registration_validator = DependencyRegistrationValidator()

    @property
    def is_built(self) -> bool:
        """Whether ``build`` has already been called."""
        return self._registry.is_built

    def register_type(
        self,
        factory: FactoryProvider,
        *,
        dependencies: Sequence[ServiceKey] | Literal["infer"] = "infer",
    ) -> RegistrationBuilder:
        """Start a registration for ``factory``.

        Args:
            factory: Class or function that builds the dependency.
            dependencies: Explicit dependency keys, or ``"infer"`` to read the
                factory's ``DEPENDS_ON`` attribute.

        Returns:
            A registration builder; call ``as_`` on it to choose the key.

        Raises:
            WeatherWireRegistryBuiltError: If the builder was already built.
            WeatherWireInvalidRegistrationError: If ``factory`` or
                ``dependencies`` are invalid.

        """
        self._ensure_open(method_name="register_type")
        validator = self._dependency_registration_validator
        validator.validate_factory(factory)
        if dependencies != "infer":
            dependencies = validator.validate_dependencies(factory, dependencies)

        registration = RegistrationBuilder(builder=self, factory=factory, dependencies=dependencies)
        self._registrations.append(registration)
        return registration

    def build(self) -> Resolver:
        """Commit registrations in call order and build the resolver.

        Later registrations for the same key replace earlier ones.
        """
        self._ensure_open(method_name="build")
        for registration in self._registrations:
            self._registry.register(
                registration.service_key(),
                registration.factory,
                dependencies=registration.dependencies,
            )
        return self._registry.build()

    def _ensure_open(self, *, method_name: str) -> None:
        if self.is_built:
            msg = f"Cannot call {method_name}() on a container builder that has already been built."
            raise WeatherWireRegistryBuiltError(msg)
