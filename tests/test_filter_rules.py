import pytest

from html_filter import Filter
from html_filter.dom.attr import Attribute, TagHeader
from html_filter.selection.node_kinds import NodeKindFilter
from html_filter.selection.rules import AttributeRules, ElementState, NameRules

BLACK = ElementState.BLACKLISTED
NONE = ElementState.NOT_SPECIFIED
WHITE = ElementState.WHITELISTED


def header(name, **attributes):
    return TagHeader(name, [Attribute(key, value) for key, value in attributes.items()])


@pytest.mark.parametrize("left, right, expected", [
    (BLACK, WHITE, BLACK),
    (WHITE, BLACK, BLACK),
    (BLACK, NONE, BLACK),
    (NONE, NONE, NONE),
    (NONE, WHITE, WHITE),
    (WHITE, WHITE, WHITE),
])
def test_combine(left, right, expected):
    assert left.combine(right) is expected


def test_name_rules():
    rules = NameRules().push("b", False)

    assert rules.check("b") is BLACK
    assert rules.check("i") is NONE

    rules = rules.push("a", True)
    assert rules.check("a") is WHITE
    assert rules.check("i") is BLACK
    assert not rules.is_blacklisted("i")
    assert rules.is_blacklisted("b")


def test_last_name_rule_wins():
    rules = NameRules().push("b", False).push("b", True)

    assert rules.check("b") is WHITE
    assert not rules.is_blacklisted("b")


def test_push_returns_a_copy():
    rules = NameRules()
    rules.push("a", True)

    assert rules.items == {}


def test_attribute_rules():
    rules = AttributeRules().push("type", "radio", True).push("id", "radio2", False)

    assert rules.check(header("input", type="radio", id="radio1")) is WHITE
    assert rules.check(header("input", type="radio", id="radio2")) is BLACK
    assert rules.check(header("input", type="date")) is BLACK
    assert rules.is_blacklisted(header("input", id="radio2"))
    assert not rules.is_blacklisted(header("input", type="date"))


def test_attribute_name_rule_ignores_value():
    rules = AttributeRules().push("enabled", None, True)

    assert rules.check(TagHeader("button", [Attribute("enabled")])) is WHITE
    assert rules.check(header("button", enabled="yes")) is WHITE
    assert rules.check(header("button")) is BLACK


def test_blacklist_only_attribute_rules():
    rules = AttributeRules().push("hidden", None, False)

    assert rules.check(header("p")) is NONE
    assert rules.check(TagHeader("p", [Attribute("hidden")])) is BLACK


def test_node_kind_defaults():
    kinds = NodeKindFilter()

    assert all(kinds.allowed(kind) for kind in NodeKindFilter.KINDS)
    assert all(kinds.explicit(kind) is None for kind in NodeKindFilter.KINDS)


def test_node_kind_set_only_respects_explicit_values():
    kinds = NodeKindFilter().set("doctype", True).set_only("comment", True)

    assert kinds.explicit("comment") is True
    assert kinds.explicit("doctype") is True
    assert kinds.explicit("text") is False


def test_node_kind_set_all():
    kinds = NodeKindFilter().set("text", True).set_all(False)

    assert not any(kinds.allowed(kind) for kind in NodeKindFilter.KINDS)


def test_filter_is_immutable():
    base = Filter()
    derived = base.tag_name("a").depth(2).comment(False)

    assert base == Filter()
    assert base.as_depth == 0
    assert derived.as_depth == 2
    assert not derived.kind_allowed("comment")
    assert base.kind_allowed("comment")


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        Filter().depth(-1)


def test_pass_through_mode():
    filter = Filter().except_tag_name("script")

    assert filter.pass_through
    assert filter.tag_allowed(header("div"))
    assert not filter.tag_allowed(header("script"))
    assert not filter.tag_explicitly_allowed(header("div"))
    assert not Filter().no_tags().tag_allowed(header("div"))
    assert not Filter().attribute_name("id").pass_through


def test_explicit_match_needs_every_rule():
    filter = Filter().tag_name("form").attribute_value("action", "#")

    assert filter.tag_explicitly_allowed(header("form", action="#", method="post"))
    assert not filter.tag_explicitly_allowed(header("form"))
    assert not filter.tag_explicitly_allowed(header("div", action="#"))


def test_explicit_blacklist():
    filter = Filter().attribute_name("enabled").except_tag_name("button") \
        .except_attribute_value("value", "Submit")

    assert filter.tag_explicitly_blacklisted(header("button", enabled="1"))
    assert filter.tag_explicitly_blacklisted(header("input", value="Submit"))
    assert not filter.tag_explicitly_blacklisted(header("input", enabled="1"))
    assert filter.tag_explicitly_allowed(header("input", enabled="1"))


@pytest.mark.parametrize("filter, outside", [
    (Filter(), {"comment": True, "doctype": True, "text": True}),
    (Filter().comment(False), {"comment": False, "doctype": True, "text": True}),
    (Filter().tag_name("p"), {"comment": False, "doctype": False, "text": False}),
    (Filter().tag_name("p").comment(True), {"comment": True, "doctype": False, "text": False}),
    (Filter().no_tags().none_except_doctype(), {"comment": False, "doctype": True, "text": False}),
    (Filter().none_except_text(), {"comment": False, "doctype": False, "text": True}),
])
def test_kinds_kept_outside_a_match(filter, outside):
    assert {kind: filter.kind_kept_outside(kind) for kind in NodeKindFilter.KINDS} == outside
