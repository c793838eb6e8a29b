"""Node registry: deferred node definitions keyed by path.

Mirrors the ``NodeTree`` + ``Node`` pair: ``NodeDef`` is the frozen
definition, ``Registry`` is the lookup table. Entries live independently
of the mounted tree, so a path can be removed and re-added without the
caller supplying the selector and update routine again.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from hier.locate import UpdateRoutine
from hier.tree.path import NodePath


@dataclass(frozen=True, slots=True)
class NodeDef:
    """A frozen node definition.

    ``selector`` is handed to the locator against the parent's handle
    when the node is mounted.
    """

    path: NodePath
    selector: Any
    update: UpdateRoutine


class Registry:
    """Path -> ``NodeDef`` table. Iterates in registration order."""

    __slots__ = ("_defs",)

    def __init__(self) -> None:
        self._defs: dict[NodePath, NodeDef] = {}

    def register(self, path: NodePath, selector: Any, update: UpdateRoutine) -> NodeDef:
        """Store (or overwrite) the definition for *path*."""
        node_def = NodeDef(path=path, selector=selector, update=update)
        self._defs[path] = node_def
        return node_def

    def unregister(self, path: NodePath) -> bool:
        """Drop the entry for *path*. No-op when absent; returns whether one existed."""
        return self._defs.pop(path, None) is not None

    def lookup(self, path: NodePath) -> NodeDef | None:
        """Look up a definition by path. Returns ``None`` if not registered."""
        return self._defs.get(path)

    def clear(self) -> None:
        self._defs.clear()

    def __len__(self) -> int:
        return len(self._defs)

    def __contains__(self, path: object) -> bool:
        return path in self._defs

    def __iter__(self) -> Iterator[NodeDef]:
        return iter(list(self._defs.values()))
