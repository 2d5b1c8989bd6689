from __future__ import annotations

from typing import Any, ClassVar

from ryandata_postcode_utils.core.factory import PluginFactory
from ryandata_postcode_utils.protocols import ProvinceSourceProtocol, RuleSourceProtocol


class RuleSourceFactory(PluginFactory[RuleSourceProtocol]):
    """Factory for creating postcode rule sources.

    Example:
        >>> source = RuleSourceFactory.create("csv")
        >>> source = RuleSourceFactory.create("csv", csv_path="/path/to/rules.csv")

        # Register custom source
        >>> RuleSourceFactory.register("sqlite", SQLiteRuleSource)
        >>> source = RuleSourceFactory.create("sqlite", db_path="rules.db")
    """

    _registry: ClassVar[dict[str, type[RuleSourceProtocol]]] = {}
    _default_type: ClassVar[str] = "csv"
    _entity_name: ClassVar[str] = "rule source"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default rule sources are registered."""
        if "csv" not in cls._registry:
            from ryandata_postcode_utils.data.csv_source import CSVRuleSource

            cls._registry["csv"] = CSVRuleSource

    @classmethod
    def create(  # type: ignore[override]
        cls,
        source_type: str | None = None,
        **kwargs: Any,
    ) -> RuleSourceProtocol:
        """Create a rule source instance.

        Args:
            source_type: Type of rule source to create. Defaults to "csv".
            **kwargs: Arguments to pass to the source constructor.

        Raises:
            ValueError: If the source type is not registered.
        """
        return super().create(source_type, **kwargs)


class ProvinceSourceFactory(PluginFactory[ProvinceSourceProtocol]):
    """Factory for creating province/state reference sources."""

    _registry: ClassVar[dict[str, type[ProvinceSourceProtocol]]] = {}
    _default_type: ClassVar[str] = "csv"
    _entity_name: ClassVar[str] = "province source"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default province sources are registered."""
        if "csv" not in cls._registry:
            from ryandata_postcode_utils.data.csv_source import CSVProvinceSource

            cls._registry["csv"] = CSVProvinceSource

    @classmethod
    def create(  # type: ignore[override]
        cls,
        source_type: str | None = None,
        **kwargs: Any,
    ) -> ProvinceSourceProtocol:
        """Create a province source instance.

        Args:
            source_type: Type of province source to create. Defaults to "csv".
            **kwargs: Arguments to pass to the source constructor.

        Raises:
            ValueError: If the source type is not registered.
        """
        return super().create(source_type, **kwargs)
