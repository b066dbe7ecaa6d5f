from __future__ import annotations

import inspect
from collections.abc import Iterable
from typing import Any

from weatherwire.exceptions import WeatherWireInvalidRegistrationError
from weatherwire.service_key import ServiceKey


class DependencyRegistrationValidator:
    """Validates dependency registrations before creating provider specs."""

    def validate_provides(self, provides: object) -> None:
        """Validate that a registration targets a service key."""
        if not isinstance(provides, ServiceKey):
            msg = f"Registrations must provide a ServiceKey, got {provides!r}."
            raise WeatherWireInvalidRegistrationError(msg)

    def validate_factory(self, factory: object) -> None:
        """Validate that a factory can be called to build the dependency."""
        if not callable(factory):
            msg = f"Factory must be callable, got {factory!r}."
            raise WeatherWireInvalidRegistrationError(msg)

        if inspect.isclass(factory) and inspect.isabstract(factory):
            msg = f"Factory '{factory.__qualname__}' cannot be an abstract class."
            raise WeatherWireInvalidRegistrationError(msg)

    def validate_dependencies(
        self,
        factory: Any,
        dependencies: Iterable[Any],
    ) -> tuple[ServiceKey, ...]:
        """Validate declared dependencies and return them as a tuple."""
        if isinstance(dependencies, str | ServiceKey):
            msg = (
                f"Dependencies of {_factory_name(factory)!r} must be a sequence of "
                f"ServiceKey, got {dependencies!r}."
            )
            raise WeatherWireInvalidRegistrationError(msg)

        try:
            declared = tuple(dependencies)
        except TypeError as error:
            msg = (
                f"Dependencies of {_factory_name(factory)!r} must be iterable, "
                f"got {dependencies!r}."
            )
            raise WeatherWireInvalidRegistrationError(msg) from error

        for dependency in declared:
            if not isinstance(dependency, ServiceKey):
                msg = (
                    f"Dependency {dependency!r} of {_factory_name(factory)!r} "
                    "is not a ServiceKey."
                )
                raise WeatherWireInvalidRegistrationError(msg)
        return declared


def _factory_name(factory: Any) -> str:
    return getattr(factory, "__qualname__", repr(factory))
