"""Structured errors raised by the breakpoint registry."""

from __future__ import annotations
from typing import Any


class BreakpointError(ValueError):
    """Base class for breakpoint configuration and directive issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidBreakpointsError(BreakpointError):
    """Raised when the breakpoint name -> width mapping is malformed."""


class InvalidDirectiveError(BreakpointError):
    """Raised when a directive has zero, several or a malformed kind."""


class UnknownBreakpointError(BreakpointError, KeyError):
    """Raised when a directive references a breakpoint that is not defined."""


class NoLargerBreakpointError(BreakpointError):
    """Raised for `greaterThan` on the largest breakpoint."""
