"""Culture: locale/formatting state carried by an ExecutionContext.

The ambient culture is held in a ContextVar so each thread or asyncio task can
override it without touching the process locale. When nothing is installed the
process locale is used, and when the process has none the invariant culture.
"""

from __future__ import annotations

import locale
import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from src.infra.errors import InvalidArgumentError

_NAME_RE = re.compile(r"^(?P<language>[A-Za-z]{2,8})(?:_(?P<territory>[A-Za-z0-9]{2,3}))?$")
_INVARIANT_ALIASES = frozenset({"", "c", "posix", "invariant"})

_ambient: ContextVar[Culture | None] = ContextVar("ambient_culture", default=None)


def _normalize(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Culture name must be a string, got {type(name).__name__}")
    raw = name.strip().split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    if raw.lower() in _INVARIANT_ALIASES:
        return ""
    match = _NAME_RE.match(raw)
    if match is None:
        raise InvalidArgumentError(f"Not a culture name: '{name}'")
    language = match["language"].lower()
    territory = match["territory"]
    return f"{language}_{territory.upper()}" if territory else language


@dataclass(frozen=True)
class Culture:
    """A locale identifier such as ``en_US``. The empty name is the invariant culture."""

    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _normalize(self.name))

    @classmethod
    def parse(cls, name: str) -> Culture:
        """Normalize ``en-us`` / ``en_US.UTF-8`` / ``C`` style names.

        Raises InvalidArgumentError for names that are not locale identifiers.
        """
        return cls(name)

    @classmethod
    def invariant(cls) -> Culture:
        return cls("")

    @classmethod
    def from_process(cls) -> Culture:
        """Culture of the process locale (LC_CTYPE), or invariant if it has none."""
        try:
            language_code, _ = locale.getlocale()
        except ValueError:
            return cls.invariant()
        if not language_code:
            return cls.invariant()
        try:
            return cls.parse(language_code)
        except InvalidArgumentError:
            return cls.invariant()

    @property
    def is_invariant(self) -> bool:
        return self.name == ""

    @property
    def language(self) -> str:
        return self.name.split("_", 1)[0]

    @property
    def territory(self) -> str | None:
        _, sep, territory = self.name.partition("_")
        return territory if sep else None

    @property
    def display_name(self) -> str:
        return self.name or "Invariant"

    def __str__(self) -> str:
        return self.name


def current_culture() -> Culture:
    """Return the ambient culture for the calling thread/task."""
    override = _ambient.get()
    if override is not None:
        return override
    return Culture.from_process()


@contextmanager
def use_culture(culture: Culture | str) -> Iterator[Culture]:
    """Install an ambient culture for the duration of the block."""
    if isinstance(culture, str):
        culture = Culture.parse(culture)
    token = _ambient.set(culture)
    try:
        yield culture
    finally:
        _ambient.reset(token)
