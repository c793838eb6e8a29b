"""Hier: a path-addressed tree of view nodes.

Mount components by slash-delimited path; hier keeps the tree
consistent, skips renders whose params did not change, and fires
lifecycle hooks around mount and teardown.

Basic usage::

    from hier import Engine
    from hier.dom import Element

    body = Element("body")
    body.inner_html = '<div id="app"></div>'

    engine = Engine(body)

    def render_app(elem, params):
        elem.inner_html = '<nav id="nav"></nav>'
        return params

    engine.add("/app", "#app", render_app, "home")
    engine.reg("/app/nav", "#nav", render_nav)
    engine.add("/app/nav")
    engine.show()  # "(root (app (nav)))"

Template views (kida)::

    from hier.templating import template_view
    engine.add("/app", "#app", template_view("<h1>{{ title }}</h1>"), {"title": "Hi"})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DuplicateChild",
    "Engine",
    "EngineConfig",
    "HierError",
    "HookStage",
    "Locator",
    "MalformedPath",
    "NoSuchChild",
    "NodePath",
    "PathNotFound",
    "RegistryMiss",
    "ResourceNotFound",
    "UnknownHook",
]

_ERRORS = (
    "ConfigurationError",
    "DuplicateChild",
    "HierError",
    "MalformedPath",
    "NoSuchChild",
    "PathNotFound",
    "RegistryMiss",
    "ResourceNotFound",
    "UnknownHook",
)

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Engine": "hier.engine",
    "EngineConfig": "hier.config",
    "HookStage": "hier.hooks",
    "Locator": "hier.locate",
    "NodePath": "hier.tree.path",
    **dict.fromkeys(_ERRORS, "hier.errors"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hier`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
