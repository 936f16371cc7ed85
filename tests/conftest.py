"""Shared pytest fixtures for execution context tests.

Settings read env vars, so RUNTIME_* and LOG_* are cleared for every test;
tests that need them set them through monkeypatch.
"""

from __future__ import annotations

import os

import pytest

from src.config.settings import RuntimeSettings
from src.functions.base import BaseFunction, ParameterView
from src.functions.registry import FunctionRegistry
from src.runtime.runtime import Runtime


class StubFunction(BaseFunction):
    """Descriptor-only function for registry tests."""

    def __init__(
        self,
        name: str,
        plugin_name: str | None = None,
        description: str = "",
        parameters: tuple[ParameterView, ...] = (),
    ) -> None:
        self._name = name
        self._plugin_name = plugin_name
        self._description = description
        self._parameters = parameters

    @property
    def name(self) -> str:
        return self._name

    @property
    def plugin_name(self) -> str:
        return self._plugin_name or super().plugin_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> tuple[ParameterView, ...]:
        return self._parameters


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith(("RUNTIME_", "LOG_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def registry() -> FunctionRegistry:
    registry = FunctionRegistry()
    registry.register(StubFunction("summarize", "text", "Summarize the input"))
    registry.register(StubFunction("translate", "text", "Translate the input"))
    return registry


@pytest.fixture
def runtime(registry: FunctionRegistry) -> Runtime:
    return Runtime(registry, settings=RuntimeSettings(name="test"))


@pytest.fixture
def make_function() -> type[StubFunction]:
    """The stub function class, for tests that build their own registries."""
    return StubFunction
