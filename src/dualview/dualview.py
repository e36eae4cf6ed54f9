"""DualView — one store, two read paths.

Every write lands in two backing dicts, ``exposed`` and ``redacted``, which
always agree on keys and raw values.  Both are handed out as read-only
mappings.

Usage:
    from dualview import DualView

    dv = DualView.with_value("***", ["password"])
    dv["user"] = "alice"
    dv["password"] = "hunter2"

    dv.exposed["password"]              # "hunter2"
    dv.redacted["password"]             # "hunter2"  (stored raw, see below)
    dv.redacting_view()["password"]     # "***"

``redacted`` stores the raw value at write time; ``sensitive_keys`` and the
replacement function do not change what it returns.  Use
``redacting_view()`` to get per-read redaction over the same data.
"""

from __future__ import annotations
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Generic

from .preconditions import check_not_none
from .types import KT, VT, ReplacementFunc
from .view import SensitiveMappingView


class DualView(Generic[KT, VT]):
    """Key/value store exposed through an exposed and a redacted mapping."""

    __slots__ = ("_exposed", "_redacted", "_sensitive_keys", "_replacement_func")

    def __init__(
        self,
        replacement_func: ReplacementFunc,
        sensitive_keys: Iterable[KT] | None = None,
    ) -> None:
        self._replacement_func = check_not_none(replacement_func, "replacement_func")
        self._sensitive_keys: set[KT] = set(sensitive_keys or ())
        self._exposed: dict[KT, VT] = {}
        self._redacted: dict[KT, VT] = {}

    @classmethod
    def with_value(
        cls,
        replacement_value: VT | None,
        sensitive_keys: Iterable[KT] | None = None,
    ) -> "DualView[KT, VT]":
        """Build a DualView whose replacement is a constant (None allowed)."""
        return cls(lambda key: replacement_value, sensitive_keys)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def exposed(self) -> Mapping[KT, VT]:
        return MappingProxyType(self._exposed)

    @property
    def redacted(self) -> Mapping[KT, VT]:
        return MappingProxyType(self._redacted)

    @property
    def sensitive_keys(self) -> set[KT]:
        """The live sensitive-key set; mutate it to change what is sensitive.

        A view from ``redacting_view()`` keeps the copy it was created with,
        so changes here only reach views created afterwards.
        """
        return self._sensitive_keys

    @property
    def replacement_func(self) -> ReplacementFunc:
        return self._replacement_func

    def redacting_view(self) -> SensitiveMappingView[KT, VT]:
        """Return a view over the redacted data that redacts on every read.

        The view is seeded with a copy of the current sensitive keys; later
        writes to this DualView show through it, later changes to
        ``sensitive_keys`` do not.
        """
        return SensitiveMappingView(
            self._redacted, self._sensitive_keys, self._replacement_func,
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def __setitem__(self, key: KT, value: VT) -> None:
        self._redacted[key] = value
        self._exposed[key] = value

    def set(self, key: KT, value: VT) -> None:
        self[key] = value

    def remove(self, key: KT) -> bool:
        """Remove ``key`` from both mappings; True if it was present."""
        self._redacted.pop(key, None)
        return self._exposed.pop(key, _MISSING) is not _MISSING

    def __delitem__(self, key: KT) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def clear(self) -> None:
        self._redacted.clear()
        self._exposed.clear()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._exposed)

    def __contains__(self, key: object) -> bool:
        return key in self._exposed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(keys={list(self._exposed)!r}, "
            f"sensitive_keys={self._sensitive_keys!r})"
        )


_MISSING = object()
