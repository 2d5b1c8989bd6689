"""Generic plugin factory base class.

Rule and province sources are created through subclasses of this factory, so
a deployment can swap the bundled CSV tables for another backend by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses define:
        - _registry: Class-level dict mapping type names to implementation classes
        - _default_type: The type name used when none is given
        - _entity_name: Human-readable name for error messages (e.g. "rule source")
        - _ensure_defaults_registered(): Lazily registers the built-in types
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Register the built-in implementations if they are missing."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type under a name."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a registered implementation type."""
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the named type.

        Args:
            name: Type name to create. If None, uses the default type.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the type name is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls._default_type

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
            )

        return cls._registry[type_name](**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the sorted list of registered type names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
