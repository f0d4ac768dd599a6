"""Tests for breakpoint validation, ordering and `between` enumeration."""

import pytest

from responsive import (
    BreakpointRegistry,
    InvalidBreakpointsError,
    between_combinations,
    sort_breakpoints,
)
from responsive.breakpoints import Breakpoint, validate_breakpoints


def test_sort_breakpoints_ascending_by_width():
    names = sort_breakpoints({"lg": 1024, "sm": 0, "md": 768})
    assert names == ("sm", "md", "lg")


def test_sorted_sequence_strictly_ascending(wide_registry):
    names = wide_registry.sorted_breakpoints
    assert len(names) == 5
    widths = [wide_registry.width_of(n) for n in names]
    assert all(a < b for a, b in zip(widths, widths[1:]))


def test_between_combinations_only_ordered_pairs():
    pairs = between_combinations(("sm", "md", "lg"))
    assert pairs == (("sm", "md"), ("sm", "lg"), ("md", "lg"))


def test_between_combinations_count_is_n_choose_2(wide_registry):
    pairs = between_combinations(wide_registry.sorted_breakpoints)
    assert len(pairs) == 10
    assert len(set(pairs)) == 10


def test_single_breakpoint_has_no_pairs():
    assert between_combinations(("only",)) == ()


def test_validate_returns_breakpoints():
    bps = validate_breakpoints({"sm": 0, "md": 768})
    assert bps == [Breakpoint("sm", 0), Breakpoint("md", 768)]


@pytest.mark.parametrize(
    "mapping",
    [
        {},
        {"sm": -1},
        {"sm": 1.5},
        {"sm": "768"},
        {"sm": True},
        {"": 0},
        {"small screen": 0},
        {"sm\n": 0},
        {"2xl": 0},
        {"sm": 0, "md": 0},
    ],
)
def test_invalid_breakpoint_sets_rejected(mapping):
    with pytest.raises(InvalidBreakpointsError):
        BreakpointRegistry(mapping)


def test_duplicate_width_error_names_both_breakpoints():
    with pytest.raises(InvalidBreakpointsError) as exc:
        sort_breakpoints({"sm": 0, "md": 768, "tablet": 768})
    assert "md" in str(exc.value) and "tablet" in str(exc.value)
    assert exc.value.context["width"] == 768


def test_registry_does_not_alias_input():
    source = {"sm": 0, "md": 768}
    reg = BreakpointRegistry(source)
    source["md"] = 900
    assert reg.width_of("md") == 768
    with pytest.raises(TypeError):
        reg.breakpoints["md"] = 1  # read-only view


def test_hyphenated_names_rejected():
    # "a-b" would make between(a, b-c) and between(a-b, c) share the key "a-b-c"
    with pytest.raises(InvalidBreakpointsError) as exc:
        BreakpointRegistry({"a": 0, "a-b": 100, "b-c": 200, "c": 300})
    assert exc.value.context["name"] == "a-b"


def test_identifier_names_accepted():
    reg = BreakpointRegistry({"_base": 0, "tablet_2": 768, "Desktop": 1024})
    assert reg.sorted_breakpoints == ("_base", "tablet_2", "Desktop")
    assert len(reg.queries("between")) == 3
