"""Core types."""

from __future__ import annotations
from collections.abc import Callable, Hashable
from typing import TypeVar

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT")

# key → substitute value shown for a sensitive key
ReplacementFunc = Callable[[KT], VT]
