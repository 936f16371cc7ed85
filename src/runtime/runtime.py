"""Runtime: the concrete service handle an orchestrator builds contexts from.

Created once at startup; owns the mutable FunctionRegistry and hands out only
its read-only view. Safe to share across concurrent contexts because nothing
reachable from a context mutates it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from src.config.settings import RuntimeSettings
from src.functions.registry import FunctionRegistry, ReadOnlyFunctionRegistry
from src.orchestration.context import ExecutionContext

if TYPE_CHECKING:
    from src.orchestration.variables import VariableScope


class Runtime:
    """Registry + settings + logger bundle satisfying RuntimeHandle."""

    def __init__(
        self,
        registry: FunctionRegistry | None = None,
        *,
        settings: RuntimeSettings | None = None,
    ) -> None:
        self._registry = registry if registry is not None else FunctionRegistry()
        self._settings = settings if settings is not None else RuntimeSettings()
        self._logger = structlog.get_logger().bind(runtime=self._settings.name)
        self._logger.info("runtime_created", functions=len(self._registry))

    @property
    def registry(self) -> FunctionRegistry:
        """Mutable registry, for the orchestrator to register functions on."""
        return self._registry

    @property
    def functions(self) -> ReadOnlyFunctionRegistry:
        return self._registry.read_only()

    @property
    def logger(self) -> Any:
        return self._logger

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    def create_context(self, variables: VariableScope | None = None) -> ExecutionContext:
        """Build a fresh context bound to this runtime and its functions."""
        context = ExecutionContext(self, variables)
        if self._settings.culture is not None:
            context.culture = self._settings.culture
        self._logger.debug(
            "context_created",
            variables=len(context.variables),
            culture=context.culture.name,
        )
        return context
