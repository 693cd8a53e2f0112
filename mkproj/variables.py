"""Named string variables used while running a configuration."""

from __future__ import annotations


class Variables:
    """A table of string variables; unknown names read as the empty string."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value*, replacing any earlier value."""
        self._values[key] = value

    def get(self, key: str) -> str:
        """Return the value of *key*, or an empty string if it is unset."""
        return self._values.get(key, "")

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"