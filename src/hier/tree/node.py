"""Node record stored in the tree arena."""

from dataclasses import dataclass, field
from typing import Any

from hier.locate import UpdateRoutine
from hier.tree.signature import ParamSignature


@dataclass(slots=True, eq=False)
class Node:
    """A mounted component.

    Nodes never hold each other directly. ``parent`` and the values of
    ``children`` are arena ids owned by ``NodeTree``; that keeps the
    structure a strict tree.

    ``handle`` is borrowed from the locator and only compared by
    identity. ``update``, ``view`` and ``signature`` are released to
    ``None`` when the node is torn down.
    """

    id: int
    name: str
    path: str
    parent: int | None
    handle: Any = None
    update: UpdateRoutine | None = None
    children: dict[str, int] = field(default_factory=dict)
    view: Any = None
    signature: ParamSignature | None = None

    @property
    def is_root(self) -> bool:
        return self.parent is None
