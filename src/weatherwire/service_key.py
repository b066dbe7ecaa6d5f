from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServiceKey:
    """Identify an abstract capability a consumer can depend on.

    Keys compare by name, so two keys declared with the same name refer to the
    same binding.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"ServiceKey name must be a non-empty string, got {self.name!r}."
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.name
