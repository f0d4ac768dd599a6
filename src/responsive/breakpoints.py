"""Breakpoint set validation and ordering.

A breakpoint set is a mapping of semantic name (xs, sm, md, ...) to an
inclusive lower pixel boundary. Each breakpoint owns the band from its own
width up to the next breakpoint's width (exclusive); the largest breakpoint's
band is open ended.

Design Goals
------------
 - Reject malformed input up front (empty sets, non-integer or negative
   widths, two names sharing a width) so later lookups never compare against
   a missing value.
 - Produce a deterministic ascending order used for "next breakpoint"
   lookups and for enumerating valid `between` pairs.
 - Pure-Python, no CSS knowledge; query strings live in `registry`.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Dict, List, Mapping, Tuple

from .errors import InvalidBreakpointsError

# Names end up in CSS class names and in "b1-b2" lookup keys
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

__all__ = [
    "Breakpoint",
    "validate_breakpoints",
    "sort_breakpoints",
    "between_combinations",
]


@dataclass(frozen=True)
class Breakpoint:
    """Semantic responsive breakpoint definition.

    Attributes
    ----------
    name: str
        Unique identifier (e.g. sm|md|lg).
    width: int
        Inclusive lower pixel boundary of the band owned by this breakpoint.
    """

    name: str
    width: int


def validate_breakpoints(breakpoints: Mapping[str, int]) -> List[Breakpoint]:
    """Return the mapping as a list of `Breakpoint` or raise on bad input."""
    if not breakpoints:
        raise InvalidBreakpointsError("At least one breakpoint is required")
    result: List[Breakpoint] = []
    seen_widths: Dict[int, str] = {}
    for name, width in breakpoints.items():
        if not isinstance(name, str) or not _NAME_RE.fullmatch(name):
            raise InvalidBreakpointsError(
                f"Breakpoint names must be identifiers (letters, digits, _), got {name!r}",
                context={"name": name},
            )
        # bool is an int subclass but never a pixel width
        if isinstance(width, bool) or not isinstance(width, int):
            raise InvalidBreakpointsError(
                f"Breakpoint {name} width must be int, got {type(width).__name__}",
                context={"name": name, "width": width},
            )
        if width < 0:
            raise InvalidBreakpointsError(
                f"Breakpoint {name} width must be non-negative, got {width}",
                context={"name": name, "width": width},
            )
        if width in seen_widths:
            other = seen_widths[width]
            raise InvalidBreakpointsError(
                f"Breakpoints {other} and {name} share the width {width}px",
                context={"names": [other, name], "width": width},
            )
        seen_widths[width] = name
        result.append(Breakpoint(name=name, width=width))
    return result


def sort_breakpoints(breakpoints: Mapping[str, int]) -> Tuple[str, ...]:
    """Breakpoint names ascending by width."""
    ordered = sorted(validate_breakpoints(breakpoints), key=lambda b: b.width)
    return tuple(b.name for b in ordered)


def between_combinations(sorted_names: Tuple[str, ...]) -> Tuple[Tuple[str, str], ...]:
    """Every (lower, upper) pair where lower precedes upper in sorted order."""
    pairs: List[Tuple[str, str]] = []
    for i, lower in enumerate(sorted_names[:-1]):
        for upper in sorted_names[i + 1 :]:
            pairs.append((lower, upper))
    return tuple(pairs)
