"""Responsive directives: "show this content only within this width range".

A directive is exactly one of five kinds, each carrying breakpoint names as
operands:

 - at(b)                   the band owned by `b`
 - lessThan(b)             widths strictly below `b`
 - greaterThan(b)          widths at or above the breakpoint after `b`
 - greaterThanOrEqual(b)   widths at or above `b`
 - between(b1, b2)         widths in [b1, b2)

Consumers usually hand directives over in their prop form
(``{"between": ["sm", "lg"]}``); `Directive.from_props` turns that into the
typed value and rejects shapes with zero or several populated kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from .errors import InvalidDirectiveError

__all__ = [
    "DirectiveKind",
    "Directive",
    "DirectiveLike",
    "breakpoint_key",
    "coerce_directive",
    "valid_keys",
]


class DirectiveKind(str, Enum):  # str subclass so values double as prop names
    AT = "at"
    LESS_THAN = "lessThan"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    BETWEEN = "between"

    @property
    def arity(self) -> int:
        return 2 if self is DirectiveKind.BETWEEN else 1


def valid_keys() -> List[str]:
    """External prop names in canonical order."""
    return [kind.value for kind in DirectiveKind]


def breakpoint_key(operands: Union[str, Sequence[str]]) -> str:
    """Lookup key for a directive operand: the name, or ``"b1-b2"`` for pairs."""
    if isinstance(operands, str):
        return operands
    return "-".join(operands)


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    operands: Tuple[str, ...]

    def __post_init__(self) -> None:
        try:
            kind = DirectiveKind(self.kind)
        except ValueError:
            raise InvalidDirectiveError(
                f"Unknown directive kind: {self.kind!r}; expected one of {valid_keys()}",
                context={"kind": self.kind},
            ) from None
        raw = self.operands
        operands = tuple(raw) if isinstance(raw, (tuple, list)) else ()
        if len(operands) != kind.arity or not all(
            isinstance(o, str) and o for o in operands
        ):
            raise InvalidDirectiveError(
                f"Directive {kind.value} expects {kind.arity} breakpoint name(s), "
                f"got {self.operands!r}",
                context={"kind": kind.value, "operands": self.operands},
            )
        if kind is DirectiveKind.BETWEEN and operands[0] == operands[1]:
            raise InvalidDirectiveError(
                f"between requires two distinct breakpoints, got {operands[0]!r} twice",
                context={"kind": kind.value, "operands": operands},
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "operands", operands)

    # Constructors -----------------------------------------------------
    @classmethod
    def at(cls, name: str) -> "Directive":
        return cls(DirectiveKind.AT, (name,))

    @classmethod
    def less_than(cls, name: str) -> "Directive":
        return cls(DirectiveKind.LESS_THAN, (name,))

    @classmethod
    def greater_than(cls, name: str) -> "Directive":
        return cls(DirectiveKind.GREATER_THAN, (name,))

    @classmethod
    def greater_than_or_equal(cls, name: str) -> "Directive":
        return cls(DirectiveKind.GREATER_THAN_OR_EQUAL, (name,))

    @classmethod
    def between(cls, lower: str, upper: str) -> "Directive":
        return cls(DirectiveKind.BETWEEN, (lower, upper))

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> "Directive":
        """Build a directive from its prop form; exactly one kind must be set.

        Keys whose value is ``None`` count as absent so callers can pass a
        full props object straight through.
        """
        populated = {k: v for k, v in props.items() if v is not None}
        unknown = sorted(k for k in populated if k not in valid_keys())
        if unknown:
            raise InvalidDirectiveError(
                f"Unexpected breakpoint props: {unknown}", context={"props": dict(props)}
            )
        if len(populated) != 1:
            raise InvalidDirectiveError(
                "Exactly one of "
                f"{valid_keys()} must be given, got {sorted(populated) or 'none'}",
                context={"props": dict(props)},
            )
        (key, value), = populated.items()
        kind = DirectiveKind(key)
        if kind is DirectiveKind.BETWEEN:
            if isinstance(value, str) or not isinstance(value, Sequence):
                raise InvalidDirectiveError(
                    f"between expects a pair of breakpoint names, got {value!r}",
                    context={"props": dict(props)},
                )
            return cls(kind, tuple(value))
        return cls(kind, (value,))

    # Views ------------------------------------------------------------
    @property
    def key(self) -> str:
        return breakpoint_key(self.operands)

    @property
    def name(self) -> str:
        """The single operand of a non-`between` directive."""
        if self.kind is DirectiveKind.BETWEEN:
            raise InvalidDirectiveError("between has two operands; use `operands`")
        return self.operands[0]

    def to_props(self) -> Dict[str, Any]:
        if self.kind is DirectiveKind.BETWEEN:
            return {self.kind.value: list(self.operands)}
        return {self.kind.value: self.operands[0]}

    def __str__(self) -> str:
        return f"{self.kind.value}({', '.join(self.operands)})"


DirectiveLike = Union[Directive, Mapping[str, Any]]


def coerce_directive(directive: DirectiveLike) -> Directive:
    if isinstance(directive, Directive):
        return directive
    if isinstance(directive, Mapping):
        return Directive.from_props(directive)
    raise InvalidDirectiveError(
        f"Expected a Directive or props mapping, got {type(directive).__name__}"
    )
