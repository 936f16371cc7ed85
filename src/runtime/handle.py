from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.functions.registry import ReadOnlyFunctionCollection


@runtime_checkable
class RuntimeHandle(Protocol):
    """Process-wide services shared by every context built from one runtime.

    ExecutionContext reads these attributes once at construction and never
    mutates anything through them.
    """

    @property
    def functions(self) -> ReadOnlyFunctionCollection: ...

    @property
    def logger(self) -> Any: ...
