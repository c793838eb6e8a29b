"""Kida-backed update routines.

Turns a template string into an update routine the engine can mount::

    from hier.templating import template_view

    engine.add("/nav", "#nav", template_view('<ul id="items">{{ title }}</ul>'), {"title": "Home"})

Mapping params become the template context; any other params value is
exposed as ``params``. When the handle is a ``hier.dom.Element`` the
rendered markup replaces its ``inner_html``, so child nodes can locate
their handles inside it. The markup string is returned as the view.
"""

from collections.abc import Mapping
from typing import Any

from kida import Environment

from hier.dom import Element
from hier.locate import UpdateRoutine


def create_environment(*, autoescape: bool = True) -> Environment:
    """Create the kida Environment used by ``template_view`` by default."""
    return Environment(autoescape=autoescape)


def template_context(params: Any) -> dict[str, Any]:
    """Build the render context for *params*."""
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    return {"params": params}


def template_view(source: str, *, env: Environment | None = None) -> UpdateRoutine:
    """Compile *source* once and return an update routine that renders it."""
    environment = env if env is not None else create_environment()
    template = environment.from_string(source)

    def update(handle: Any, params: Any) -> str:
        markup = template.render(template_context(params))
        if isinstance(handle, Element):
            handle.inner_html = markup
        return markup

    return update
