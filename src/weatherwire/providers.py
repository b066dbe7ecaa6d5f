from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from weatherwire.service_key import ServiceKey

FactoryProvider: TypeAlias = Callable[..., Any]
"""A class or function that builds a dependency from its resolved dependencies."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderSpec:
    """A binding from a service key to the factory that builds it."""

    provides: ServiceKey
    """The service key that this provider supplies."""
    factory: FactoryProvider
    """Callable invoked with the resolved dependencies as positional arguments."""
    dependencies: tuple[ServiceKey, ...] = field(default_factory=tuple)
    """Keys resolved, in order, before the factory is called."""


class ProvidersRegistrations:
    """Store provider specs indexed by service key.

    Registration keys are unique: adding a spec for an existing key replaces
    the previous spec.
    """

    def __init__(self) -> None:
        self._registrations_by_key: dict[ServiceKey, ProviderSpec] = {}

    @dataclass(frozen=True, slots=True)
    class Snapshot:
        """Capture provider registration state as a read-only view."""

        registrations_by_key: dict[ServiceKey, ProviderSpec]

    def snapshot(self) -> Snapshot:
        """Capture current registrations."""
        return self.Snapshot(registrations_by_key=dict(self._registrations_by_key))

    def add(self, spec: ProviderSpec) -> None:
        """Add a new provider specification, replacing any previous one for its key.

        Args:
            spec: Provider specification to register.

        """
        self._registrations_by_key[spec.provides] = spec

    def __contains__(self, key: object) -> bool:
        return key in self._registrations_by_key

    def __len__(self) -> int:
        return len(self._registrations_by_key)
