"""Responsive breakpoint package.

Computes, from named pixel-width breakpoints, the CSS media queries behind
"show this content only within this width range" directives, and decides
whether a directive is worth rendering for a fixed set of render widths.

Usage:
    from responsive import BreakpointRegistry, Directive
    registry = BreakpointRegistry({"sm": 0, "md": 768, "lg": 1024})
    registry.media_query(Directive.less_than("lg"))  # "(max-width:1023px)"
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from config.settings import load_breakpoints

from .breakpoints import Breakpoint, between_combinations, sort_breakpoints  # noqa: F401
from .directives import Directive, DirectiveKind, breakpoint_key, valid_keys  # noqa: F401
from .errors import (  # noqa: F401
    BreakpointError,
    InvalidBreakpointsError,
    InvalidDirectiveError,
    NoLargerBreakpointError,
    UnknownBreakpointError,
)
from .registry import BreakpointRegistry  # noqa: F401
from .rulesets import (  # noqa: F401
    MediaStylesheetMeta,
    RuleSet,
    build_media_stylesheet,
    create_class_name,
)

_default_registry: Optional[BreakpointRegistry] = None
_default_lock = Lock()


def default_registry() -> BreakpointRegistry:
    """Process-wide registry built from the configured breakpoints."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = BreakpointRegistry(load_breakpoints())
        return _default_registry


def reset_default_registry() -> None:
    """Drop the cached registry so the next call re-reads configuration."""
    global _default_registry
    with _default_lock:
        _default_registry = None
