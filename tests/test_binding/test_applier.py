"""Tests for applying binding rules to lxml documents."""

import logging

import pytest
from lxml import html

from bindsheet import BindingContext, loads
from bindsheet.binding import apply_rule, bind_to
from bindsheet.config import BindsheetConfig
from bindsheet.errors import (
    BindingError,
    InvalidBindingFormat,
    NoBindingContextError,
    ObjectBindingNotImplemented,
)
from bindsheet.parser import parse_rule


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _list(count: int) -> html.HtmlElement:
    items = "".join(f'<li class="row">old{i}</li>' for i in range(count))
    return html.fragment_fromstring(f"<ul>{items}</ul>")


def _texts(root: html.HtmlElement) -> list[str]:
    return [li.text_content() for li in root.cssselect("li")]


# ---------------------------------------------------------------------------
# bind_to
# ---------------------------------------------------------------------------


class TestBindTo:
    def test_stops_at_shorter_items(self):
        pairs = []
        count = bind_to([1, 2], "abc", lambda i, e: pairs.append((i, e)))
        assert pairs == [(1, "a"), (2, "b")]
        assert count == 2

    def test_stops_at_shorter_elements(self):
        pairs = []
        bind_to([1, 2, 3], "ab", lambda i, e: pairs.append((i, e)))
        assert pairs == [(1, "a"), (2, "b")]

    def test_default_fills_remaining_elements(self):
        pairs = []
        bind_to([1], "abc", lambda i, e: pairs.append((i, e)), default=0, has_default=True)
        assert pairs == [(1, "a"), (0, "b"), (0, "c")]

    def test_null_default(self):
        pairs = []
        bind_to([], "ab", lambda i, e: pairs.append((i, e)), default=None, has_default=True)
        assert pairs == [(None, "a"), (None, "b")]


# ---------------------------------------------------------------------------
# Enumerable binding
# ---------------------------------------------------------------------------


class TestEnumerableBinding:
    def test_more_items_than_elements(self):
        root = _list(2)
        apply_rule(parse_rule(".row { binding-source: [a, b, c]; }"), root)
        assert _texts(root) == ["a", "b"]

    def test_fewer_items_leaves_elements_untouched(self):
        root = _list(3)
        apply_rule(parse_rule(".row { binding-source: [a, b]; }"), root)
        assert _texts(root) == ["a", "b", "old2"]

    def test_default_binds_remaining_elements(self):
        root = _list(3)
        apply_rule(
            parse_rule(".row { binding-source: [a, b]; binding-source-default: D; }"), root
        )
        assert _texts(root) == ["a", "b", "D"]

    def test_explicit_enumerable_without_source_uses_default(self):
        root = _list(2)
        apply_rule(
            parse_rule(".row { binding-source-type: enumerable; binding-source-default: '-'; }"),
            root,
        )
        assert _texts(root) == ["-", "-"]

    def test_attribute_path(self):
        root = _list(2)
        apply_rule(parse_rule(".row { binding-source: [1, 2]; binding-path: @data-id; }"), root)
        assert [li.get("data-id") for li in root.cssselect("li")] == ["1", "2"]

    def test_format_string(self):
        root = _list(2)
        apply_rule(
            parse_rule('.row { binding-source: [1.5, 2]; binding-format: "{0} EUR"; }'), root
        )
        assert _texts(root) == ["1.5 EUR", "2 EUR"]

    def test_format_spec(self):
        root = _list(1)
        apply_rule(parse_rule(".row { binding-source: [3.14159]; binding-format: .2f; }"), root)
        assert _texts(root) == ["3.14"]

    def test_scope_itself_can_match(self):
        root = html.fragment_fromstring('<p class="row">x</p>')
        apply_rule(parse_rule(".row { binding-source: [y]; }"), root)
        assert root.text == "y"

    def test_no_match_is_noop(self):
        root = _list(2)
        apply_rule(parse_rule(".missing { binding-source: [a]; }"), root)
        assert _texts(root) == ["old0", "old1"]

    def test_children_only_config(self):
        root = html.fragment_fromstring(
            '<div><p class="row">a</p><section><p class="row">b</p></section></div>'
        )
        apply_rule(
            parse_rule(".row { binding-source: [x, y]; }"),
            root,
            config=BindsheetConfig(include_descendants=False),
        )
        assert [p.text for p in root.cssselect("p")] == ["x", "b"]


class TestNullBinding:
    def test_ignore_leaves_target(self):
        root = _list(1)
        apply_rule(parse_rule(".row { binding-source: [<null>]; }"), root)
        assert _texts(root) == ["old0"]

    def test_empty_writes_empty_string(self):
        root = _list(1)
        apply_rule(parse_rule(".row { binding-source: [<null>]; binding-null-behavior: empty; }"), root)
        assert _texts(root) == [""]

    def test_remove_drops_attribute(self):
        root = html.fragment_fromstring('<ul><li class="row" title="t">x</li></ul>')
        apply_rule(
            parse_rule(
                ".row { binding-source: [<null>]; binding-path: @title; binding-null-behavior: remove; }"
            ),
            root,
        )
        assert root.cssselect("li")[0].get("title") is None

    def test_remove_drops_element_for_text_path(self):
        root = _list(2)
        apply_rule(
            parse_rule(".row { binding-source: [<null>, b]; binding-null-behavior: remove; }"), root
        )
        assert _texts(root) == ["b"]


# ---------------------------------------------------------------------------
# Format errors, object mode and scope resolution
# ---------------------------------------------------------------------------


class TestFormatErrors:
    def test_bad_format_spec_raises_binding_error(self):
        root = _list(1)
        rule = parse_rule(".row { binding-source: [abc]; binding-format: .2f; }")
        with pytest.raises(InvalidBindingFormat):
            apply_rule(rule, root)

    def test_bad_template_raises_binding_error(self):
        root = _list(1)
        rule = parse_rule('.row { binding-source: [1]; binding-format: "{0:N2}"; }')
        with pytest.raises(BindingError):
            apply_rule(rule, root)


class TestObjectBinding:
    def test_object_mode_raises(self):
        root = _list(1)
        with pytest.raises(ObjectBindingNotImplemented):
            apply_rule(parse_rule(".row { binding-path: a; }"), root)

    def test_is_not_implemented_error(self):
        assert issubclass(ObjectBindingNotImplemented, NotImplementedError)
        assert issubclass(ObjectBindingNotImplemented, BindingError)


class TestScope:
    def test_uses_binding_context(self):
        root = _list(2)
        sheet = loads(".row { binding-source: [a, b]; }")
        with BindingContext(root):
            sheet.apply()
        assert _texts(root) == ["a", "b"]

    def test_explicit_scope_wins(self):
        outer, inner = _list(1), _list(1)
        rule = parse_rule(".row { binding-source: [z]; }")
        with BindingContext(outer):
            rule.apply(inner)
        assert _texts(inner) == ["z"]
        assert _texts(outer) == ["old0"]

    def test_no_context(self):
        with pytest.raises(NoBindingContextError):
            parse_rule(".row { binding-source: [a]; }").apply()

    def test_contexts_nest(self):
        a, b = _list(1), _list(1)
        with BindingContext(a):
            with BindingContext(b):
                assert BindingContext.current().scope is b
            assert BindingContext.current().scope is a

    def test_element_tree_scope(self):
        tree = html.document_fromstring('<html><body><p class="row">x</p></body></html>').getroottree()
        apply_rule(parse_rule(".row { binding-source: [y]; }"), tree)
        assert tree.getroot().cssselect("p")[0].text == "y"


class TestSheetOrder:
    def test_later_rules_rebind(self):
        root = _list(2)
        sheet = loads(
            ".row { binding-source: [a, b]; }\n"
            "li:first-child { binding-source: [first]; }"
        )
        sheet.apply(root)
        assert _texts(root) == ["first", "b"]


class TestLogging:
    def test_logs_unbound_elements(self, caplog):
        root = _list(3)
        with caplog.at_level(logging.INFO, logger="bindsheet"):
            apply_rule(parse_rule(".row { binding-source: [a]; }"), root)
        assert any("left unbound" in r.message for r in caplog.records)

    def test_logs_match_count(self, caplog):
        root = _list(2)
        with caplog.at_level(logging.DEBUG, logger="bindsheet"):
            apply_rule(parse_rule(".row { binding-source: [a, b]; }"), root)
        assert any("matched 2 element(s)" in r.message for r in caplog.records)
