"""SensitiveMappingView — a read-only mapping that hides selected values.

Wraps any existing mapping and substitutes the value of every "sensitive"
key with ``replacement_func(key)`` at read time.  Nothing is cached, so
toggling a key takes effect on the very next read.

Usage:
    from dualview import SensitiveMappingView

    settings = {"user": "alice", "password": "hunter2"}
    view = SensitiveMappingView(settings, ["password"], lambda k: "***")

    view["password"]        # "***"
    view["user"]            # "alice"

    view.remove_sensitive("password")
    view["password"]        # "hunter2"
"""

from __future__ import annotations
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic

from .preconditions import check_not_none
from .types import KT, VT, ReplacementFunc


class SensitiveMappingView(Mapping[KT, VT], Generic[KT, VT]):
    """Read-only view over ``source`` with per-key value redaction.

    The source is borrowed, never mutated.  Changes made to it by its owner
    show through immediately; iterating while the owner mutates it behaves
    the way iterating the source itself would.

    ``values()`` and ``items()`` are the lazy ``Mapping`` views: each value
    goes through ``__getitem__`` when it is produced, so a key made
    sensitive mid-iteration is redacted for every pair not yet yielded.
    """

    __slots__ = ("_source", "_sensitive_keys", "_replacement_func")

    def __init__(
        self,
        source: Mapping[KT, VT],
        sensitive_keys: Iterable[KT] | None,
        replacement_func: ReplacementFunc,
    ) -> None:
        self._replacement_func = check_not_none(replacement_func, "replacement_func")
        self._source = check_not_none(source, "source")
        self._sensitive_keys: set[KT] = set(sensitive_keys or ())

    # ------------------------------------------------------------------
    # Sensitivity
    # ------------------------------------------------------------------

    def add_sensitive(self, key: KT) -> None:
        self._sensitive_keys.add(key)

    def remove_sensitive(self, key: KT) -> None:
        self._sensitive_keys.discard(key)

    def is_sensitive(self, key: KT) -> bool:
        return key in self._sensitive_keys

    @property
    def sensitive_keys(self) -> frozenset[KT]:
        return frozenset(self._sensitive_keys)

    # ------------------------------------------------------------------
    # Mapping API
    # ------------------------------------------------------------------

    def __getitem__(self, key: KT) -> VT:
        if key not in self._source:
            raise KeyError(key)
        if key in self._sensitive_keys:
            return self._replacement_func(key)
        return self._source[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __contains__(self, key: object) -> bool:
        # Presence never depends on redaction, and must not run the replacement.
        return key in self._source

    def get(self, key: KT, default: Any = None) -> Any:
        if key not in self._source:
            return default
        return self[key]

    def try_get(self, key: KT) -> tuple[VT | None, bool]:
        """Return ``(value, True)``, or ``(None, False)`` when absent."""
        if key not in self._source:
            return None, False
        return self[key], True

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def redacted_copy(self) -> dict[KT, VT]:
        """Materialise the current redacted state into a plain dict."""
        return dict(self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.redacted_copy()!r})"
