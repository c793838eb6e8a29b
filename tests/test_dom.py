"""Tests for hier.dom: in-memory elements and the default locator."""

import pytest

from hier.dom import Element, select


@pytest.fixture
def body() -> Element:
    body = Element("body")
    body.inner_html = (
        '<main id="app" class="shell">'
        '<nav class="menu primary"><a href="/">Home</a></nav>'
        '<section id="content"><div class="card">One</div><div class="card wide">Two</div></section>'
        "</main>"
        '<footer class="menu"></footer>'
    )
    return body


class TestInnerHtml:
    def test_parses_structure(self, body: Element) -> None:
        main = body.elements()[0]
        assert main.tag == "main"
        assert main.id == "app"
        assert [child.tag for child in main.elements()] == ["nav", "section"]

    def test_sets_parents(self, body: Element) -> None:
        nav = select(body, "nav")
        assert nav is not None
        assert nav.parent is select(body, "#app")

    def test_replacing_detaches_old_children(self) -> None:
        elem = Element("div")
        elem.inner_html = '<p id="old"></p>'
        old = elem.elements()[0]
        elem.inner_html = '<p id="new"></p>'
        assert old.parent is None
        assert select(elem, "#old") is None
        assert select(elem, "#new") is not None

    def test_void_elements(self) -> None:
        elem = Element("div")
        elem.inner_html = '<input id="q"><span id="after"></span>'
        assert [child.tag for child in elem.elements()] == ["input", "span"]

    def test_serialises(self) -> None:
        elem = Element("div")
        elem.inner_html = '<p class="x">a &amp; b</p><br>'
        assert elem.inner_html == '<p class="x">a &amp; b</p><br>'
        assert elem.outer_html == '<div><p class="x">a &amp; b</p><br></div>'

    def test_text(self, body: Element) -> None:
        section = select(body, "#content")
        assert section is not None
        assert section.text == "OneTwo"

    def test_stray_end_tag_ignored(self) -> None:
        elem = Element("div")
        elem.inner_html = "<p>one</span></p><p>two</p>"
        assert [child.text for child in elem.elements()] == ["one", "two"]


class TestElement:
    def test_append_moves_child(self) -> None:
        a, b = Element("a"), Element("b")
        child = Element("span")
        a.append(child)
        b.append(child)
        assert a.elements() == []
        assert child.parent is b

    def test_remove_missing(self) -> None:
        with pytest.raises(ValueError):
            Element("div").remove(Element("span"))

    def test_identity_equality(self) -> None:
        assert Element("div") != Element("div")

    def test_contains(self, body: Element) -> None:
        card = select(body, ".card")
        assert card is not None
        assert body.contains(card)
        assert not card.contains(body)


class TestSelect:
    def test_by_id(self, body: Element) -> None:
        found = select(body, "#content")
        assert found is not None
        assert found.tag == "section"

    def test_by_class_returns_first_in_document_order(self, body: Element) -> None:
        found = select(body, ".card")
        assert found is not None
        assert found.text == "One"

    def test_by_tag(self, body: Element) -> None:
        found = select(body, "footer")
        assert found is not None
        assert found.classes == ("menu",)

    def test_compound(self, body: Element) -> None:
        found = select(body, "div.card.wide")
        assert found is not None
        assert found.text == "Two"

    def test_descendant_chain(self, body: Element) -> None:
        found = select(body, "#app .menu")
        assert found is not None
        assert found.tag == "nav"

    def test_descendant_chain_stops_at_parent(self, body: Element) -> None:
        section = select(body, "#content")
        assert section is not None
        assert select(section, "main .card") is None

    def test_searches_below_parent_only(self, body: Element) -> None:
        app = select(body, "#app")
        assert app is not None
        assert select(app, "footer") is None
        assert select(app, "#app") is None

    def test_universal(self, body: Element) -> None:
        assert select(body, "*") is select(body, "#app")

    def test_not_found(self, body: Element) -> None:
        assert select(body, "#nope") is None

    def test_element_selector(self, body: Element) -> None:
        nav = select(body, "nav")
        assert select(body, nav) is nav
        assert select(Element("div"), nav) is None

    def test_non_element_parent(self) -> None:
        assert select(None, "#x") is None

    def test_blank_selector(self, body: Element) -> None:
        assert select(body, "  ") is None

    def test_unsupported_syntax(self, body: Element) -> None:
        with pytest.raises(ValueError, match="Unsupported selector"):
            select(body, "div > p")

    def test_query_method(self, body: Element) -> None:
        assert body.query("#app") is select(body, "#app")
