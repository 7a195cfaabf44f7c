"""
Method registry for plotting-position lookup.

This module provides a registry system for quantile conventions, allowing
methods to be registered and retrieved by name or alias.
"""

import logging

from ..utils.exceptions import InvalidInput
from .base import PlottingPositionProtocol

logger = logging.getLogger(__name__)


def _normalize(selector: str) -> str:
    return selector.strip().lower().replace("-", "_")


class MethodRegistry:
    """Registry for plotting-position methods.

    Lookups are case-insensitive and accept any alias a method was
    registered with.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._methods: dict[str, PlottingPositionProtocol] = {}
        self._aliases: dict[str, str] = {}
        self._method_names: list[str] = []

    def register(
        self,
        method: PlottingPositionProtocol,
        aliases: tuple[str, ...] | list[str] = (),
    ) -> None:
        """Register a method.

        Args:
            method: Object implementing PlottingPositionProtocol
            aliases: Additional selectors resolving to this method

        Raises:
            ValueError: If the method name is empty or method is invalid
        """
        if not isinstance(method, PlottingPositionProtocol):
            raise ValueError(f"Not a plotting-position method: {method!r}")
        name = method.name
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Method name must be a non-empty string")

        key = _normalize(name)
        if key in self._methods:
            logger.warning(f"Overriding existing method registration: {key}")

        self._methods[key] = method
        if key not in self._method_names:
            self._method_names.append(key)
        for alias in aliases:
            self._aliases[_normalize(alias)] = key

        logger.debug(f"Registered method: {key} (aliases: {', '.join(aliases) or 'none'})")

    def resolve(self, selector: str) -> str | None:
        """Map a selector to the canonical method name.

        Args:
            selector: Method name or alias, any case

        Returns:
            Canonical name if known, None otherwise
        """
        if not isinstance(selector, str):
            return None
        key = _normalize(selector)
        if key in self._methods:
            return key
        target = self._aliases.get(key)
        if target in self._methods:
            return target
        return None

    def get(self, selector: str) -> PlottingPositionProtocol:
        """Get a method by name or alias.

        Raises:
            InvalidInput: If the selector is unknown
        """
        key = self.resolve(selector)
        if key is None:
            raise InvalidInput(
                f"Unknown quantile method {selector!r}; "
                f"expected one of: {', '.join(self._method_names)}"
            )
        return self._methods[key]

    def names(self) -> list[str]:
        """Get list of all registered canonical method names."""
        return self._method_names.copy()

    def is_registered(self, selector: str) -> bool:
        """Check if a name or alias resolves to a registered method."""
        return self.resolve(selector) is not None

    def unregister(self, name: str) -> bool:
        """Unregister a method together with its aliases.

        Returns:
            True if method was unregistered, False if not found
        """
        key = self.resolve(name)
        if key is None:
            return False
        del self._methods[key]
        self._method_names.remove(key)
        self._aliases = {a: t for a, t in self._aliases.items() if t != key}
        logger.info(f"Unregistered method: {key}")
        return True

    def clear(self) -> None:
        """Clear all registered methods."""
        self._methods.clear()
        self._aliases.clear()
        self._method_names.clear()
        logger.info("Cleared all method registrations")


# Global registry instance
_global_registry = MethodRegistry()


def register_method(
    method: PlottingPositionProtocol, aliases: tuple[str, ...] | list[str] = ()
) -> None:
    """Register a method in the global registry."""
    _global_registry.register(method, aliases)


def get_method(selector: str) -> PlottingPositionProtocol:
    """Get a method by name or alias from the global registry.

    Raises:
        InvalidInput: If the selector is unknown
    """
    return _global_registry.get(selector)


def get_method_names() -> list[str]:
    """Get list of all registered method names from the global registry."""
    return _global_registry.names()


def is_method_registered(selector: str) -> bool:
    """Check if a method is registered in the global registry."""
    return _global_registry.is_registered(selector)


def get_registry() -> MethodRegistry:
    """Get the global registry instance."""
    return _global_registry
