"""Argument checks shared by the mapping types."""

from __future__ import annotations
from typing import TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def check_not_none(argument: T | None, param_name: str) -> T:
    """Return ``argument`` unchanged, or raise if it is None.

    Lets a check sit inline in an assignment:

        self._source = check_not_none(source, "source")
    """
    if argument is None:
        raise InvalidArgumentError(param_name)
    return argument
