"""Breakpoint registry: precomputed media queries for responsive directives.

Built once from a breakpoint name -> width mapping. Construction sorts the
breakpoints, enumerates every directive instance the set can express and
compiles each into a canonical CSS media-query condition. Afterwards the
registry is read-only: lookups are dictionary hits and the render-admission
check is a scan over the (small) list of widths a renderer supports, so a
single instance can be shared by any number of concurrent readers.

Compiled condition forms (pixel units)::

    lessThan(b)            (max-width:<width(b)-1>px)
    greaterThan(b)         (min-width:<width(next(b))>px)
    greaterThanOrEqual(b)  (min-width:<width(b)>px)
    between(b1, b2)        (min-width:<width(b1)>px) and (max-width:<width(b2)-1>px)

`at(b)` is normalized to `between(b, next(b))`, or to
`greaterThanOrEqual(b)` for the largest breakpoint, before compiling and
before the render-admission check.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from config.settings import CLASS_NAME_PREFIX

from .breakpoints import between_combinations, sort_breakpoints
from .directives import Directive, DirectiveKind, DirectiveLike, coerce_directive
from .errors import (
    BreakpointError,
    InvalidDirectiveError,
    NoLargerBreakpointError,
    UnknownBreakpointError,
)
from .rulesets import RuleSet, create_class_name, negate_query

_log = logging.getLogger(__name__)

__all__ = ["BreakpointRegistry"]


class BreakpointRegistry:
    """Encapsulates all breakpoint data needed to render responsive content."""

    def __init__(self, breakpoints: Mapping[str, int]) -> None:
        self._sorted: Tuple[str, ...] = sort_breakpoints(breakpoints)
        self._breakpoints: Mapping[str, int] = MappingProxyType(dict(breakpoints))
        self._index: Dict[str, int] = {name: i for i, name in enumerate(self._sorted)}

        singles = self._sorted
        enumeration: Dict[DirectiveKind, Iterable[Directive]] = {
            DirectiveKind.AT: [Directive.at(b) for b in singles],
            # lessThan(smallest) and greaterThan(largest) match nothing useful
            DirectiveKind.LESS_THAN: [Directive.less_than(b) for b in singles[1:]],
            DirectiveKind.GREATER_THAN: [
                Directive.greater_than(b) for b in singles[:-1]
            ],
            DirectiveKind.GREATER_THAN_OR_EQUAL: [
                Directive.greater_than_or_equal(b) for b in singles
            ],
            DirectiveKind.BETWEEN: [
                Directive.between(lower, upper)
                for lower, upper in between_combinations(singles)
            ],
        }
        self._queries: Mapping[DirectiveKind, Mapping[str, str]] = MappingProxyType(
            {
                kind: MappingProxyType({d.key: self.compile(d) for d in directives})
                for kind, directives in enumeration.items()
            }
        )
        _log.debug(
            "Breakpoint registry built: %d breakpoints, %d media queries",
            len(self._sorted),
            sum(len(q) for q in self._queries.values()),
        )

    # Read accessors ---------------------------------------------------
    @property
    def breakpoints(self) -> Mapping[str, int]:
        return self._breakpoints

    @property
    def sorted_breakpoints(self) -> Tuple[str, ...]:
        return self._sorted

    @property
    def largest_breakpoint(self) -> str:
        return self._sorted[-1]

    @property
    def smallest_breakpoint(self) -> str:
        return self._sorted[0]

    def width_of(self, name: str) -> int:
        try:
            return self._breakpoints[name]
        except (KeyError, TypeError):
            raise UnknownBreakpointError(
                f"Unknown breakpoint: {name!r}; expected one of {list(self._sorted)}",
                context={"name": name},
            ) from None

    def next_breakpoint(self, name: str) -> Optional[str]:
        """The breakpoint immediately above `name`, or None for the largest."""
        self.width_of(name)
        i = self._index[name] + 1
        return self._sorted[i] if i < len(self._sorted) else None

    def queries(self, kind: DirectiveKind | str) -> Mapping[str, str]:
        """Read-only operand key -> condition table for one directive kind."""
        return self._queries[DirectiveKind(kind)]

    def dynamic_responsive_media_queries(self) -> Dict[str, str]:
        """Breakpoint name -> `at` condition, for simplified responsive values."""
        return dict(self._queries[DirectiveKind.AT])

    def classify_width(self, width: int) -> Optional[str]:
        """Return the breakpoint whose band contains `width` (pixels).

        Widths below the smallest breakpoint belong to no band and yield None.
        """
        if width < 0:
            raise ValueError("Width must be non-negative")
        match: Optional[str] = None
        for name in self._sorted:
            if self._breakpoints[name] > width:
                break
            match = name
        return match

    # Compilation ------------------------------------------------------
    def normalize(self, directive: DirectiveLike) -> Directive:
        """Rewrite `at(b)` into the kind that expresses the same band."""
        directive = coerce_directive(directive)
        for name in directive.operands:
            self.width_of(name)
        if directive.kind is DirectiveKind.BETWEEN:
            lower, upper = directive.operands
            if self._index[lower] >= self._index[upper]:
                raise InvalidDirectiveError(
                    f"between({lower}, {upper}): {lower} must be smaller than {upper}",
                    context={"operands": directive.operands},
                )
        if directive.kind is not DirectiveKind.AT:
            return directive
        upper = self.next_breakpoint(directive.name)
        if upper is None:
            return Directive.greater_than_or_equal(directive.name)
        return Directive.between(directive.name, upper)

    def compile(self, directive: DirectiveLike) -> str:
        """Compile a directive into its media-query condition string."""
        directive = self.normalize(directive)
        kind = directive.kind
        if kind is DirectiveKind.LESS_THAN:
            width = self.width_of(directive.name)
            return f"(max-width:{width - 1}px)"
        if kind is DirectiveKind.GREATER_THAN:
            width = self.width_of(self._find_next_breakpoint(directive.name))
            return f"(min-width:{width}px)"
        if kind is DirectiveKind.GREATER_THAN_OR_EQUAL:
            width = self.width_of(directive.name)
            return f"(min-width:{width}px)"
        if kind is DirectiveKind.BETWEEN:
            from_width = self.width_of(directive.operands[0])
            to_width = self.width_of(directive.operands[1])
            return f"(min-width:{from_width}px) and (max-width:{to_width - 1}px)"
        raise InvalidDirectiveError(f"Unexpected breakpoint directive: {directive}")

    def media_query(self, directive: DirectiveLike) -> str:
        """Precomputed condition for a directive (compiled on a cache miss)."""
        directive = coerce_directive(directive)
        cached = self._queries[directive.kind].get(directive.key)
        if cached is not None:
            return cached
        return self.compile(directive)

    # Rule export ------------------------------------------------------
    def to_rule_sets(self, prefix: str = CLASS_NAME_PREFIX) -> List[RuleSet]:
        """One inverted hide rule per compiled query, in enumeration order."""
        rule_sets: List[RuleSet] = []
        for kind, queries in self._queries.items():
            for key, condition in queries.items():
                rule_sets.append(
                    RuleSet(
                        class_name=create_class_name(kind.value, key, prefix=prefix),
                        query=negate_query(condition),
                    )
                )
        return rule_sets

    # Render admission -------------------------------------------------
    def should_render(self, directive: DirectiveLike, only_render_at: Iterable[str]) -> bool:
        """Whether `directive` can match any of the widths a renderer uses.

        `only_render_at` lists the breakpoint names a width-agnostic renderer
        (e.g. server side) produces markup for. Returns False only when the
        directive is guaranteed to be hidden at every one of them.
        """
        directive = self.normalize(directive)
        if isinstance(only_render_at, str):
            raise BreakpointError(
                f"only_render_at must be a list of breakpoint names, got {only_render_at!r}",
                context={"only_render_at": only_render_at},
            )
        widths = [self.width_of(name) for name in only_render_at]
        if not widths:
            raise BreakpointError("only_render_at must name at least one breakpoint")
        kind = directive.kind
        if kind is DirectiveKind.LESS_THAN:
            return min(widths) < self.width_of(directive.name)
        if kind is DirectiveKind.GREATER_THAN:
            width = self.width_of(self._find_next_breakpoint(directive.name))
            return max(widths) >= width
        if kind is DirectiveKind.GREATER_THAN_OR_EQUAL:
            return max(widths) >= self.width_of(directive.name)
        if kind is DirectiveKind.BETWEEN:
            from_width = self.width_of(directive.operands[0])
            to_width = self.width_of(directive.operands[1])
            return not (max(widths) < from_width or min(widths) >= to_width)
        raise InvalidDirectiveError(f"Unexpected breakpoint directive: {directive}")

    def _find_next_breakpoint(self, name: str) -> str:
        upper = self.next_breakpoint(name)
        if upper is None:
            raise NoLargerBreakpointError(
                f"There is no breakpoint larger than {name}", context={"name": name}
            )
        return upper

    def __repr__(self) -> str:
        pairs = ", ".join(f"{n}={self._breakpoints[n]}" for n in self._sorted)
        return f"BreakpointRegistry({pairs})"
