"""Hier exception hierarchy.

Shared across NodePath, NodeTree, Registry, HookTable and Engine so every
module raises and catches the same types. Nothing here is retried or
swallowed: the engine surfaces each error to the caller of the operation
that detected it.
"""

from typing import Any


class HierError(Exception):
    """Base for all hier-specific errors."""


class ConfigurationError(HierError):
    """Raised when engine configuration is invalid.

    Typically raised by ``EngineConfig.__post_init__``.
    """


class MalformedPath(HierError, ValueError):
    """A path string is empty, lacks the leading slash, or has an empty segment."""

    def __init__(self, path: Any, detail: str = "You must specify a well-formed path") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{detail}: {path!r}")


class PathNotFound(HierError, LookupError):  # noqa: N818
    """The path, or the parent path an operation needs, is not mounted."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not find path: {path}")


class NoSuchChild(HierError, LookupError):  # noqa: N818
    """An unmount targets a child name the parent does not have."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"There is no child named {name}")


class DuplicateChild(HierError):  # noqa: N818
    """A mount targets a child name that is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"There already is a child named {name}")


class ResourceNotFound(HierError, LookupError):  # noqa: N818
    """The locator returned no handle for a selector.

    ``selector`` is what the caller supplied; ``path`` is the node that
    was being mounted, when known.
    """

    def __init__(self, selector: Any, path: str | None = None) -> None:
        self.selector = selector
        self.path = path
        where = f" while mounting {path}" if path else ""
        super().__init__(f"Could not locate resource {selector!r}{where}")


class RegistryMiss(HierError, LookupError):  # noqa: N818
    """No inline definition was given and the registry has no entry."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not find in registry: {path}")


class UnknownHook(HierError, ValueError):  # noqa: N818
    """The hook stage is not one of the fixed lifecycle stages."""

    def __init__(self, stage: Any) -> None:
        self.stage = stage
        super().__init__(f"Could not identify hook: {stage!r}")
