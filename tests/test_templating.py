"""Tests for hier.templating: kida-backed update routines."""

from kida import Environment

from hier.dom import Element
from hier.engine import Engine
from hier.templating import create_environment, template_context, template_view


class TestTemplateContext:
    def test_none(self) -> None:
        assert template_context(None) == {}

    def test_mapping(self) -> None:
        assert template_context({"title": "Hi"}) == {"title": "Hi"}

    def test_scalar(self) -> None:
        assert template_context(42) == {"params": 42}


class TestTemplateView:
    def test_returns_markup(self) -> None:
        update = template_view("<h1>{{ title }}</h1>")
        assert update(None, {"title": "Hello"}) == "<h1>Hello</h1>"

    def test_scalar_params(self) -> None:
        update = template_view("<p>{{ params }}</p>")
        assert update(None, 7) == "<p>7</p>"

    def test_writes_into_element(self) -> None:
        elem = Element("div")
        template_view('<span id="greeting">{{ name }}</span>')(elem, {"name": "Ada"})
        greeting = elem.query("#greeting")
        assert greeting is not None
        assert greeting.text == "Ada"

    def test_autoescapes(self) -> None:
        markup = template_view("<p>{{ value }}</p>")(None, {"value": "<b>"})
        assert "<b>" not in markup
        assert "&lt;b&gt;" in markup

    def test_custom_environment(self) -> None:
        env = Environment(autoescape=False)
        markup = template_view("<p>{{ value }}</p>", env=env)(None, {"value": "<b>"})
        assert markup == "<p><b></p>"

    def test_default_environment(self) -> None:
        assert isinstance(create_environment(), Environment)


class TestWithEngine:
    def test_children_mount_into_rendered_markup(self) -> None:
        body = Element("body")
        body.inner_html = '<div id="app"></div>'
        engine = Engine(body)

        items = template_view('<ul id="items">{% for item in items %}<li>{{ item }}</li>{% end %}</ul>')
        engine.add("/app", "#app", items, {"items": ["a", "b"]})
        engine.add("/app/items", "#items", lambda elem, params: len(elem.elements()))

        assert engine.show() == "(root (app (items)))"
        assert engine.view("/app/items") == 2
