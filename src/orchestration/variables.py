"""VariableScope: ordered, case-insensitive string variables threaded through pipeline steps."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from src.infra.errors import InvalidArgumentError

MAIN_KEY = "INPUT"

_DEBUG_INPUT_LIMIT = 50


def _fold(key: str) -> str:
    return key.casefold()


def _validate_key(key: object) -> str:
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgumentError(f"Variable name must be a non-blank string, got {key!r}")
    return key


class VariableScope:
    """Mutable variable store for one execution context.

    Keys compare case-insensitively; the first spelling of a key is kept for
    enumeration. MAIN_KEY holds the value flowing from step to step.
    Not safe for concurrent mutation: give each concurrent branch a clone().
    """

    __slots__ = ("_entries",)

    def __init__(self, value: str = "") -> None:
        # folded key -> (original key, value); dict order is insertion order
        self._entries: dict[str, tuple[str, str]] = {}
        self.set(MAIN_KEY, value)

    def get(self, key: str) -> str | None:
        """Return the value for key, or None if absent. Never raises."""
        if not isinstance(key, str):
            return None
        entry = self._entries.get(_fold(key))
        return entry[1] if entry is not None else None

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite key. An existing key keeps its spelling and position."""
        key = _validate_key(key)
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"Value of variable '{key}' must be a string, got {type(value).__name__}"
            )
        folded = _fold(key)
        existing = self._entries.get(folded)
        self._entries[folded] = (existing[0] if existing is not None else key, value)

    def remove(self, key: str) -> bool:
        """Delete key. Returns False if it was not present."""
        if not isinstance(key, str):
            return False
        return self._entries.pop(_fold(key), None) is not None

    def get_default(self) -> str:
        return self.get(MAIN_KEY) or ""

    def set_default(self, value: str) -> None:
        self.set(MAIN_KEY, value)

    def clear(self) -> None:
        """Remove every variable, MAIN_KEY included. get_default() then reads ""."""
        self._entries.clear()

    def update(self, values: Mapping[str, str] | VariableScope, *, merge: bool = True) -> None:
        """Upsert every pair from values. With merge=False the scope is cleared first.

        All pairs are checked before anything is written; an invalid pair
        leaves the scope unchanged.
        """
        staged = VariableScope.__new__(VariableScope)
        staged._entries = {} if not merge else dict(self._entries)
        for key, value in list(values.items()):
            staged.set(key, value)
        self._entries = staged._entries

    def clone(self) -> VariableScope:
        """Return an independent copy; later writes to either side are not shared."""
        copy = type(self).__new__(type(self))
        copy._entries = dict(self._entries)
        return copy

    def items(self) -> list[tuple[str, str]]:
        return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter([original for original, _ in self._entries.values()])

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return self.get_default()

    def __repr__(self) -> str:
        return f"<VariableScope {self.debug_display}>"

    @property
    def debug_display(self) -> str:
        """Short summary for inspection tooling."""
        display = f"Variables = {len(self._entries)}"
        main = self.get_default()
        if main:
            if len(main) > _DEBUG_INPUT_LIMIT:
                main = main[:_DEBUG_INPUT_LIMIT] + "..."
            display += f", Input = {main}"
        return display
