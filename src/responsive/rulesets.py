"""Hide-rule export for responsive directives.

Every compiled media query becomes one CSS rule that hides an element
*outside* the directive's visible range. The query is inverted once, here,
as ``not all and <condition>``, so consumers never negate conditions
themselves.

Core goals:
- Deterministic output string for easy snapshot testing.
- Class names encode (kind, operand key): ``<prefix>-<kind>-<key>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from config.settings import CLASS_NAME_PREFIX

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .registry import BreakpointRegistry

__all__ = [
    "RuleSet",
    "MediaStylesheetMeta",
    "create_class_name",
    "negate_query",
    "build_media_stylesheet",
]

_HIDE_DECLARATION = "display:none!important;"
_CONTAINER_RULE_TEMPLATE = ".{prefix}-container{{margin:0;padding:0;}}"


def create_class_name(*components: str, prefix: str = CLASS_NAME_PREFIX) -> str:
    return "-".join([prefix, *components])


def negate_query(condition: str) -> str:
    return f"not all and {condition}"


@dataclass(frozen=True)
class RuleSet:
    """One hide rule: the element class and the (already negated) media query."""

    class_name: str
    query: str

    def css(self) -> str:
        return f"@media {self.query}{{.{self.class_name}{{{_HIDE_DECLARATION}}}}}"


@dataclass(frozen=True)
class MediaStylesheetMeta:
    rules: int
    breakpoints: int
    prefix: str


def build_media_stylesheet(
    registry: "BreakpointRegistry", prefix: str = CLASS_NAME_PREFIX
) -> Tuple[str, MediaStylesheetMeta]:
    """Build the complete hide-rule stylesheet for a registry.

    Returns
    -------
    (stylesheet, meta) tuple where stylesheet is the container reset rule
    followed by one ``@media`` rule per rule set, newline separated.
    """
    rule_sets = registry.to_rule_sets(prefix=prefix)
    parts: List[str] = [_CONTAINER_RULE_TEMPLATE.format(prefix=prefix)]
    parts.extend(rs.css() for rs in rule_sets)
    meta = MediaStylesheetMeta(
        rules=len(rule_sets),
        breakpoints=len(registry.sorted_breakpoints),
        prefix=prefix,
    )
    return "\n".join(parts), meta
