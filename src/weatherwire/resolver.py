from __future__ import annotations

import logging
from types import MappingProxyType, TracebackType
from typing import TYPE_CHECKING, Any

from weatherwire.exceptions import (
    WeatherWireDependencyNotRegisteredError,
    WeatherWireResolverClosedError,
)
from weatherwire.service_key import ServiceKey

if TYPE_CHECKING:
    from typing_extensions import Self

    from weatherwire.providers import ProvidersRegistrations

logger = logging.getLogger(__name__)


class Resolver:
    """Build instances from a frozen set of bindings.

    Resolvers are created by ``Registry.build`` and never cache instances:
    every ``resolve`` call constructs the requested dependency and all of its
    transitive dependencies afresh.

    A resolver is a context manager. Leaving the ``with`` block closes it, after
    which ``resolve`` is rejected.
    """

    def __init__(self, snapshot: ProvidersRegistrations.Snapshot) -> None:
        self._registrations = MappingProxyType(snapshot.registrations_by_key)
        self._is_closed = False

    @property
    def is_closed(self) -> bool:
        """Whether the resolver has been closed."""
        return self._is_closed

    def resolve(self, key: ServiceKey) -> Any:
        """Resolve a dependency synchronously.

        Args:
            key: Service key to resolve.

        Returns:
            A newly constructed instance with all declared dependencies injected.

        Raises:
            WeatherWireDependencyNotRegisteredError: If ``key`` or any key it
                transitively depends on has no binding.
            WeatherWireResolverClosedError: If the resolver was closed.

        """
        if self._is_closed:
            msg = f"Cannot resolve '{key}' from a closed resolver."
            raise WeatherWireResolverClosedError(msg)

        return self._resolve(key, required_by=())

    def _resolve(self, key: ServiceKey, *, required_by: tuple[ServiceKey, ...]) -> Any:
        spec = self._registrations.get(key)
        if spec is None:
            raise WeatherWireDependencyNotRegisteredError(key, required_by)

        chain = (*required_by, key)
        arguments = [
            self._resolve(dependency, required_by=chain) for dependency in spec.dependencies
        ]
        instance = spec.factory(*arguments)
        logger.debug("Resolved '%s' with %d dependency(ies)", key, len(arguments))
        return instance

    def close(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: TracebackType | None = None,
    ) -> None:
        """Close the resolver.

        Closing is idempotent. No resources are held by resolved instances, so
        nothing besides the resolver itself is released.
        """
        if self._is_closed:
            return
        self._is_closed = True
        logger.debug("Resolver closed (exc_type=%s)", getattr(exc_type, "__name__", None))

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close(exc_type, exc_value, traceback)

    def __contains__(self, key: object) -> bool:
        return key in self._registrations
