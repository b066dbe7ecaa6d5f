from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weatherwire.service_key import ServiceKey


class WeatherWireError(Exception):
    """Represent a base class for all weatherwire-specific failures.

    Catch this type when you want to handle any weatherwire error path without
    matching each concrete exception class individually.
    """


class WeatherWireInvalidRegistrationError(WeatherWireError):
    """Signal an invalid registration.

    Raised by ``Registry.register`` and the registration front-ends when the
    dependency key is not a ``ServiceKey``, the factory is not callable, or a
    declared dependency is not a ``ServiceKey``.

    The registry is left unchanged when this error is raised.
    """


class WeatherWireRegistryBuiltError(WeatherWireError):
    """Signal a registry mutation after ``build()``.

    Registrations and resolution do not interleave: once a registry has been
    built into a resolver, ``register`` and ``build`` are rejected.

    Typical fix is finishing all registrations before calling ``build()``.
    """


class WeatherWireDependencyNotRegisteredError(WeatherWireError):
    """Signal that a dependency key has no binding.

    Raised by ``Resolver.resolve`` when the requested key, or any key it
    transitively depends on, was never registered.

    Typical fix is registering the missing key before building the registry.
    """

    def __init__(self, service_key: ServiceKey, required_by: tuple[ServiceKey, ...] = ()) -> None:
        self.service_key = service_key
        self.required_by = required_by
        if required_by:
            chain = " -> ".join(key.name for key in required_by)
            msg = f"Dependency '{service_key}' is not registered (required by {chain})."
        else:
            msg = f"Dependency '{service_key}' is not registered."
        super().__init__(msg)


class WeatherWireResolverClosedError(WeatherWireError):
    """Signal resolution through a resolver that has already been closed.

    A resolver is closed by ``close()`` or by leaving its ``with`` block.
    """
