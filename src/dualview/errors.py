"""Errors raised by dualview."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required constructor argument was missing (None)."""

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"{param_name} must not be None")
