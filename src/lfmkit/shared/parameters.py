"""Summary: String-to-string mapping used as API call arguments.
Why: Keep parameter coercion and signing order in one small value type.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import final, override


@final
class ParameterSet(MutableMapping[str, str]):
    """Mapping of parameter name to string value.

    Values are coerced with ``str()`` on assignment so numeric arguments can be
    passed directly. Insertion order carries no meaning; ``sorted_items``
    yields the ordinal order the signature is computed over.
    """

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, object] | None = None, **kwargs: object) -> None:
        self._data: dict[str, str] = {}
        if initial is not None:
            for key, value in initial.items():
                self[key] = value  # pyright: ignore[reportArgumentType]
        for key, value in kwargs.items():
            self[key] = value  # pyright: ignore[reportArgumentType]

    @override
    def __getitem__(self, key: str) -> str:
        return self._data[key]

    @override
    def __setitem__(self, key: str, value: object) -> None:  # pyright: ignore[reportIncompatibleMethodOverride]
        if not isinstance(key, str):
            raise TypeError(f"Parameter names must be str, got {type(key).__name__}")
        if value is None:
            raise TypeError(f"Parameter '{key}' cannot be None")
        self._data[key] = value if isinstance(value, str) else str(value)

    @override
    def __delitem__(self, key: str) -> None:
        del self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __repr__(self) -> str:
        return f"ParameterSet({self._data!r})"

    def copy(self) -> "ParameterSet":
        """Return an independent copy."""

        return ParameterSet(self._data)

    def sorted_items(self, *, exclude: frozenset[str] = frozenset()) -> list[tuple[str, str]]:
        """Return items sorted by ordinal key order, skipping ``exclude``."""

        return sorted(
            (item for item in self._data.items() if item[0] not in exclude),
            key=lambda item: item[0],
        )


__all__ = ["ParameterSet"]
