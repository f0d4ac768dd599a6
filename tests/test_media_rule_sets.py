"""Tests for hide-rule export and the media stylesheet builder."""

import re

from responsive import (
    BreakpointRegistry,
    Directive,
    DirectiveKind,
    MediaStylesheetMeta,
    RuleSet,
    build_media_stylesheet,
    create_class_name,
)


def test_create_class_name():
    assert create_class_name("at", "md") == "fresnel-at-md"
    assert create_class_name("between", "sm-lg", prefix="rp") == "rp-between-sm-lg"


def test_one_rule_set_per_compiled_query(wide_registry):
    rule_sets = wide_registry.to_rule_sets()
    total = sum(len(wide_registry.queries(kind)) for kind in DirectiveKind)
    assert len(rule_sets) == total
    assert len({rs.class_name for rs in rule_sets}) == total


def test_rule_bodies_are_negated_conditions(wide_registry):
    by_class = {rs.class_name: rs.query for rs in wide_registry.to_rule_sets()}
    for kind in DirectiveKind:
        for key, condition in wide_registry.queries(kind).items():
            assert by_class[create_class_name(kind.value, key)] == "not all and " + condition


def test_rule_set_order_is_deterministic(registry):
    class_names = [rs.class_name for rs in registry.to_rule_sets()]
    assert class_names == [
        "fresnel-at-sm",
        "fresnel-at-md",
        "fresnel-at-lg",
        "fresnel-lessThan-md",
        "fresnel-lessThan-lg",
        "fresnel-greaterThan-sm",
        "fresnel-greaterThan-md",
        "fresnel-greaterThanOrEqual-sm",
        "fresnel-greaterThanOrEqual-md",
        "fresnel-greaterThanOrEqual-lg",
        "fresnel-between-sm-md",
        "fresnel-between-sm-lg",
        "fresnel-between-md-lg",
    ]
    assert class_names == [rs.class_name for rs in registry.to_rule_sets()]


def test_rule_set_css(registry):
    rs = RuleSet(
        class_name="fresnel-lessThan-lg",
        query="not all and " + registry.media_query(Directive.less_than("lg")),
    )
    assert rs.css() == (
        "@media not all and (max-width:1023px){.fresnel-lessThan-lg{display:none!important;}}"
    )
    assert rs in registry.to_rule_sets()


def test_build_media_stylesheet(registry):
    css, meta = build_media_stylesheet(registry)
    assert isinstance(meta, MediaStylesheetMeta)
    assert meta.rules == 13
    assert meta.breakpoints == 3
    lines = css.splitlines()
    assert lines[0] == ".fresnel-container{margin:0;padding:0;}"
    assert len(lines) == 14
    assert (
        "@media not all and (min-width:0px) and (max-width:767px)"
        "{.fresnel-at-sm{display:none!important;}}"
    ) in lines


def test_build_media_stylesheet_custom_prefix_is_stable():
    reg = BreakpointRegistry({"sm": 0, "md": 768})
    first, meta = build_media_stylesheet(reg, prefix="rp")
    second, _ = build_media_stylesheet(BreakpointRegistry({"md": 768, "sm": 0}), prefix="rp")
    assert first == second
    assert meta.prefix == "rp"
    assert ".rp-container" in first and "fresnel" not in first


def test_class_names_are_valid_css_identifiers(wide_registry):
    ident = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")
    for rs in wide_registry.to_rule_sets():
        assert ident.match(rs.class_name), rs.class_name
