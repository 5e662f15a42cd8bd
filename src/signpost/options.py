"""Option store — the key/value registry behind an App.

Holds configuration (``view_dir``, ``auto_map``, ``error_404``), the
route table (``routes``) and the parameters of the most recent route
match (``params``). Every App owns one store and hands it to its
collaborators; a module-level default store backs :func:`option` for
scripts that want a single process-wide registry.

Not synchronized. Mutations are visible to every holder of the store
immediately, last writer wins.
"""

from collections.abc import Iterator
from typing import Any, Final


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


class OptionStore:
    """Mutable string-keyed registry.

    Usage::

        store = OptionStore()
        store.set("view_dir", "views")
        store.get("view_dir")        # "views"
        store.get("error_404")       # None
        store.unset("view_dir")
    """

    __slots__ = ("_data",)

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value stored under *name*, or *default* if absent."""
        return self._data.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self._data[name] = value

    def unset(self, name: str) -> None:
        """Remove *name*. Removing an absent key is a no-op."""
        self._data.pop(name, None)

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the current entries."""
        return dict(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"OptionStore({sorted(self._data)!r})"


_default_store = OptionStore()


def default_store() -> OptionStore:
    """The process-wide store used by :func:`option` when none is given."""
    return _default_store


def option(
    name: str,
    value: Any = MISSING,
    *,
    unset: bool = False,
    store: OptionStore | None = None,
) -> Any:
    """Get, set or unset an option in one call.

    ``option("view_dir")`` reads, ``option("view_dir", "views")`` writes
    and ``option("view_dir", unset=True)`` removes. Writes and removals
    return ``None``. ``None`` is a storable value; a read is signalled by
    omitting *value*.
    """
    target = _default_store if store is None else store
    if unset:
        target.unset(name)
        return None
    if value is MISSING:
        return target.get(name)
    target.set(name, value)
    return None
