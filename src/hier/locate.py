"""Locator protocol and callable type aliases.

A locator is any callable matching::

    def locate(parent_handle: Any, selector: Any) -> Any | None: ...

No base class required. The engine checks the shape, not the lineage.
It calls the locator exactly once per mounted child, with the parent
node's handle and the selector the caller supplied, and treats ``None``
as "not found". Handles are opaque: the engine only compares them by
identity to evict a sibling that already occupies the same resource.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias

# Renders params into a handle and returns an opaque view
UpdateRoutine: TypeAlias = Callable[[Any, Any], Any]

# Lifecycle hook callback; arguments depend on the stage
HookCallback: TypeAlias = Callable[..., Any]


class Locator(Protocol):
    """Protocol for resource locators.

    Accepts both functions and callable objects::

        # Function locator
        def by_key(parent: dict, selector: str) -> dict | None:
            return parent.get(selector)

        # Class locator
        class WidgetLocator:
            def __call__(self, parent: Widget, selector: str) -> Widget | None:
                ...
    """

    def __call__(self, parent_handle: Any, selector: Any) -> Any | None: ...
