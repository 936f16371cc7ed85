from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from src.functions.base import GLOBAL_PLUGIN, BaseFunction, FunctionView
from src.infra.errors import FunctionNotFoundError, FunctionRegistrationError

logger = structlog.get_logger()


def _registry_key(name: str, plugin_name: str | None) -> tuple[str, str]:
    return ((plugin_name or GLOBAL_PLUGIN).casefold(), name.casefold())


def _not_found(name: str, plugin_name: str | None) -> FunctionNotFoundError:
    return FunctionNotFoundError(
        f"Function not registered: {plugin_name or GLOBAL_PLUGIN}.{name}"
    )


@runtime_checkable
class ReadOnlyFunctionCollection(Protocol):
    """Read-only capability over a set of functions. No registration path."""

    def get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction: ...

    def try_get_function(
        self, name: str, plugin_name: str | None = None
    ) -> BaseFunction | None: ...

    def contains_function(self, name: str, plugin_name: str | None = None) -> bool: ...

    def get_function_views(self) -> list[FunctionView]: ...

    def __len__(self) -> int: ...


class FunctionRegistry:
    """Mutable owner of registered functions.

    Lookup is case-insensitive on plugin and function name. Contexts never see
    this object directly, only the view returned by read_only().
    """

    def __init__(self) -> None:
        self._functions: dict[tuple[str, str], BaseFunction] = {}
        self._read_only: ReadOnlyFunctionRegistry | None = None

    def register(self, function: BaseFunction) -> None:
        """Register a function. Raises FunctionRegistrationError if already registered."""
        key = _registry_key(function.name, function.plugin_name)
        if key in self._functions:
            raise FunctionRegistrationError(
                f"Function already registered: {function.plugin_name}.{function.name}"
            )
        self._functions[key] = function
        logger.info(
            "function_registered",
            function_name=function.name,
            plugin_name=function.plugin_name,
        )

    def get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction:
        """Get a function by name. Raises FunctionNotFoundError if not found."""
        function = self.try_get_function(name, plugin_name)
        if function is None:
            raise _not_found(name, plugin_name)
        return function

    def try_get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction | None:
        """Get a function by name. Returns None if not found."""
        return self._functions.get(_registry_key(name, plugin_name))

    def contains_function(self, name: str, plugin_name: str | None = None) -> bool:
        return _registry_key(name, plugin_name) in self._functions

    def get_function_views(self) -> list[FunctionView]:
        """Return descriptors of all functions in registration order."""
        return [function.describe() for function in self._functions.values()]

    def read_only(self) -> ReadOnlyFunctionRegistry:
        """Return the read-only view of this registry (same object on every call)."""
        if self._read_only is None:
            self._read_only = ReadOnlyFunctionRegistry(self)
        return self._read_only

    def __len__(self) -> int:
        return len(self._functions)


class ReadOnlyFunctionRegistry:
    """Live read-only view over a FunctionRegistry.

    Functions registered on the owner after the view was created are visible
    through it.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: FunctionRegistry) -> None:
        self._registry = registry

    def get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction:
        return self._registry.get_function(name, plugin_name)

    def try_get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction | None:
        return self._registry.try_get_function(name, plugin_name)

    def contains_function(self, name: str, plugin_name: str | None = None) -> bool:
        return self._registry.contains_function(name, plugin_name)

    def get_function_views(self) -> list[FunctionView]:
        return self._registry.get_function_views()

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"<ReadOnlyFunctionRegistry functions={len(self)}>"


class NullFunctionCollection:
    """Empty collection: every lookup misses."""

    __slots__ = ()

    def get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction:
        raise _not_found(name, plugin_name)

    def try_get_function(self, name: str, plugin_name: str | None = None) -> BaseFunction | None:
        return None

    def contains_function(self, name: str, plugin_name: str | None = None) -> bool:
        return False

    def get_function_views(self) -> list[FunctionView]:
        return []

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "<NullFunctionCollection>"


NULL_FUNCTIONS = NullFunctionCollection()
