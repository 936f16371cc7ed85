"""ExecutionContext: the unit of state passed from one pipeline step to the next.

Ownership rules:
- the VariableScope belongs to exactly one context; clone() deep-copies it.
- the runtime handle and the function collection are shared by every clone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from src.functions.registry import NULL_FUNCTIONS
from src.infra.errors import InvalidArgumentError, require_not_none
from src.orchestration.culture import Culture, current_culture
from src.orchestration.variables import VariableScope

if TYPE_CHECKING:
    from src.functions.registry import ReadOnlyFunctionCollection
    from src.runtime.handle import RuntimeHandle


class ExecutionContext:
    """Variables, functions, runtime services and culture for one step.

    The bindings are fixed at construction; only the variables' contents and
    the culture change afterwards. Not safe for concurrent mutation.
    """

    __slots__ = ("_runtime", "_variables", "_functions", "_logger", "_culture")

    def __init__(
        self,
        runtime: RuntimeHandle,
        variables: VariableScope | None = None,
        functions: ReadOnlyFunctionCollection | None = None,
    ) -> None:
        require_not_none(runtime, "runtime")

        if functions is None:
            functions = getattr(runtime, "functions", None)
        if functions is None:
            functions = NULL_FUNCTIONS

        self._runtime = runtime
        self._variables = variables if variables is not None else VariableScope()
        self._functions = functions
        logger = getattr(runtime, "logger", None)
        self._logger = logger if logger is not None else structlog.get_logger()
        self._culture = current_culture()

    def result(self) -> str:
        """The current main value, i.e. the output of the last step."""
        return self._variables.get_default()

    @property
    def variables(self) -> VariableScope:
        return self._variables

    @property
    def functions(self) -> ReadOnlyFunctionCollection:
        """Read-only function collection; registration happens on the runtime's registry."""
        return self._functions

    @property
    def runtime(self) -> RuntimeHandle:
        return self.derive_runtime()

    @property
    def logger(self) -> Any:
        return self._logger

    @property
    def culture(self) -> Culture:
        return self._culture

    @culture.setter
    def culture(self, value: Culture | str | None) -> None:
        # None never leaves the context without a culture
        if value is None:
            self._culture = current_culture()
        elif isinstance(value, str):
            self._culture = Culture.parse(value)
        elif isinstance(value, Culture):
            self._culture = value
        else:
            raise InvalidArgumentError(
                f"Culture must be a Culture, a culture name or None, got {type(value).__name__}"
            )

    def derive_runtime(self) -> RuntimeHandle:
        """Runtime handle for steps running on this context.

        Returns the shared handle. Override to hand a branch a narrower
        service set.
        """
        return self._runtime

    def clone(self) -> ExecutionContext:
        """Branch this context: same runtime and functions, copied variables and culture."""
        branch = type(self)(
            self._runtime,
            variables=self._variables.clone(),
            functions=self._functions,
        )
        branch.culture = self._culture
        return branch

    @property
    def debug_display(self) -> str:
        display = self._variables.debug_display
        display += f", Functions = {len(self._functions)}"
        display += f", Culture = {self._culture.display_name}"
        return display

    def __str__(self) -> str:
        return self.result()

    def __repr__(self) -> str:
        return f"<ExecutionContext {self.debug_display}>"
