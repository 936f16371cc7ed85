from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

GLOBAL_PLUGIN = "_GLOBAL_FUNCTIONS_"


@dataclass(frozen=True)
class ParameterView:
    """Description of one function parameter, for diagnostics and planners."""

    name: str
    description: str = ""
    default_value: str | None = None
    is_required: bool = False


@dataclass(frozen=True)
class FunctionView:
    """Read-only descriptor of a registered function."""

    name: str
    plugin_name: str = GLOBAL_PLUGIN
    description: str = ""
    parameters: tuple[ParameterView, ...] = field(default_factory=tuple)

    @property
    def qualified_name(self) -> str:
        return f"{self.plugin_name}.{self.name}"


class BaseFunction(ABC):
    """Abstract base class for functions held in a FunctionRegistry.

    How a function is invoked is up to the orchestrator; the registry and the
    execution context only ever look at its descriptor.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Function name, unique within its plugin."""
        ...

    @property
    def plugin_name(self) -> str:
        """Plugin the function belongs to. Default: the global plugin."""
        return GLOBAL_PLUGIN

    @property
    def description(self) -> str:
        return ""

    @property
    def parameters(self) -> tuple[ParameterView, ...]:
        return ()

    def describe(self) -> FunctionView:
        return FunctionView(
            name=self.name,
            plugin_name=self.plugin_name,
            description=self.description,
            parameters=tuple(self.parameters),
        )
