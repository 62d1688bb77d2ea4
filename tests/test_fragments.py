from __future__ import annotations

import io
import unittest
from contextlib import redirect_stdout

from turbolayout.fragments import FragmentReplacer, ScopeTable, find_fragments, pull_target_content
from turbolayout.node import Document, Element
from turbolayout.serialize import to_html


class TestScopeTable(unittest.TestCase):
    def test_lookup_walks_ancestors(self) -> None:
        leaf = Element("span")
        html = Element("html", None, Element("body", None, Element("div", None, leaf)))
        scopes = ScopeTable()
        scopes.set_all(html, {"content": "page"})

        assert scopes.lookup(leaf, "content") == "page"
        assert scopes.lookup(leaf, "missing", "fallback") == "fallback"
        assert html in scopes
        assert leaf not in scopes

    def test_nearest_scope_wins(self) -> None:
        inner = Element("div")
        outer = Element("section", None, inner)
        scopes = ScopeTable()
        scopes.set_all(outer, {"a": 1, "b": 2})
        scopes.set_all(inner, {"a": 10})

        assert scopes.lookup(inner, "a") == 10
        assert scopes.lookup(inner, "b") == 2
        assert scopes.visible(inner) == {"a": 10, "b": 2}
        assert scopes.get(inner) == {"a": 10}

    def test_set_all_merges_into_existing_scope(self) -> None:
        node = Element("html")
        scopes = ScopeTable()
        scopes.set_all(node, {"a": 1})
        scopes.set_all(node, {"b": 2})
        assert scopes.get(node) == {"a": 1, "b": 2}
        assert len(scopes) == 1

    def test_scope_is_not_visible_outside_subtree(self) -> None:
        scoped = Element("head")
        other = Element("body")
        Element("html", None, scoped, other)
        scopes = ScopeTable()
        scopes.set_all(scoped, {"x": 1})
        assert scopes.lookup(other, "x") is None

    def test_set_all_copies_the_mapping(self) -> None:
        node = Element("html")
        variables = {"a": 1}
        scopes = ScopeTable()
        scopes.set_all(node, variables)
        variables["a"] = 2
        assert scopes.lookup(node, "a") == 1


class TestFindFragments(unittest.TestCase):
    def test_collects_nested_fragments(self) -> None:
        nav = Element("nav", {"layout:fragment": "menu"})
        main = Element("main", {"layout:fragment": " content "}, nav)
        root = Element("html", None, Element("body", None, main))

        fragments = find_fragments([root], "layout:fragment")

        assert fragments == {"content": main, "menu": nav}

    def test_later_duplicate_replaces_earlier(self) -> None:
        first = Element("div", {"layout:fragment": "x"})
        second = Element("p", {"layout:fragment": "x"})
        root = Element("body", None, first, second)

        assert find_fragments([root], "layout:fragment") == {"x": second}

    def test_no_fragments(self) -> None:
        assert find_fragments([Element("body")], "layout:fragment") == {}


class TestPullTargetContent(unittest.TestCase):
    def test_target_takes_element_position(self) -> None:
        content = Element("html", {"lang": "en"})
        doc = Document(content)
        composed = Element("html")

        pull_target_content(content, composed)

        assert doc.children == [composed]
        assert content.parent is None

    def test_unparented_element_raises(self) -> None:
        with self.assertRaises(ValueError):
            pull_target_content(Element("html"), Element("html"))


class TestFragmentReplacer(unittest.TestCase):
    def test_replaces_placeholder_with_content_fragment(self) -> None:
        page_main = Element("main", {"layout:fragment": "content", "class": "page"}, "Hi")
        placeholder = Element("main", {"layout:fragment": "content"}, "default")
        html = Element("html", None, Element("body", None, Element("header"), placeholder))
        scopes = ScopeTable()
        scopes.set_all(html, {"content": page_main})

        replacer = FragmentReplacer()
        replacer.apply(html, scopes)

        assert to_html(html) == '<html><body><header></header><main class="page">Hi</main></body></html>'
        assert replacer.replaced == ["content"]

    def test_unmatched_placeholder_keeps_layout_markup(self) -> None:
        html = Element("html", None, Element("footer", {"layout:fragment": "footer"}, "(c)"))

        FragmentReplacer().apply(html, ScopeTable())

        assert to_html(html) == "<html><footer>(c)</footer></html>"

    def test_nested_placeholder_inside_replaced_one_is_skipped(self) -> None:
        page_outer = Element("section", {"layout:fragment": "outer"}, "page")
        inner = Element("div", {"layout:fragment": "inner"})
        html = Element("html", None, Element("section", {"layout:fragment": "outer"}, inner))
        scopes = ScopeTable()
        scopes.set_all(html, {"outer": page_outer, "inner": Element("p", {"layout:fragment": "inner"})})

        replacer = FragmentReplacer()
        replacer.apply(html, scopes)

        assert to_html(html) == "<html><section>page</section></html>"
        assert replacer.replaced == ["outer"]

    def test_custom_prefix_and_debug(self) -> None:
        html = Element("html", None, Element("div", {"tl:fragment": "x"}))
        out = io.StringIO()
        with redirect_stdout(out):
            FragmentReplacer("tl", debug=True).apply(html, ScopeTable())
        assert "FragmentReplacer: no content fragment for 'x'" in out.getvalue()
        assert html.children[0].attributes == {}


if __name__ == "__main__":
    unittest.main()
