"""Node tree with arena storage and path resolution.

Nodes are kept in a flat arena keyed by integer id. Each node maps child
names to ids and remembers its parent id; the tree owns every node, so
dropping an id from the arena is the only way a node goes away.
"""

import itertools
import logging
from collections.abc import Sequence
from typing import Any

from hier.errors import DuplicateChild, NoSuchChild, ResourceNotFound
from hier.hooks import HookStage, HookTable
from hier.locate import Locator, UpdateRoutine
from hier.tree.node import Node
from hier.tree.path import DELIMITER
from hier.tree.signature import ParamSignature, signature_of

logger = logging.getLogger("hier.tree")


class NodeTree:
    """Mounted nodes, starting from a fixed root.

    Usage::

        tree = NodeTree(locator, hooks, root_handle=document)
        child = tree.mount_child(tree.root, "nav", "#nav", render_nav)
        tree.render(child, {"active": "home"})
        tree.describe()  # "(root (nav))"
    """

    __slots__ = ("_hooks", "_ids", "_locator", "_log", "_nodes", "_root_id", "root_handle", "root_name")

    def __init__(
        self,
        locator: Locator,
        hooks: HookTable,
        *,
        root_handle: Any = None,
        root_name: str = "root",
        lifecycle_logging: bool = True,
    ) -> None:
        self._locator = locator
        self._hooks = hooks
        self._log = lifecycle_logging
        self.root_handle = root_handle
        self.root_name = root_name
        self._ids = itertools.count()
        self._nodes: dict[int, Node] = {}
        self._root_id = self._new_node(root_name, "", None, root_handle, None).id

    # -- arena -------------------------------------------------------------

    def _new_node(
        self,
        name: str,
        path: str,
        parent: int | None,
        handle: Any,
        update: UpdateRoutine | None,
    ) -> Node:
        node = Node(id=next(self._ids), name=name, path=path, parent=parent, handle=handle, update=update)
        self._nodes[node.id] = node
        return node

    @property
    def root(self) -> Node:
        return self._nodes[self._root_id]

    def get(self, node_id: int) -> Node:
        """Return the live node with *node_id*. Raises ``KeyError`` if it is gone."""
        return self._nodes[node_id]

    def children(self, node: Node) -> list[Node]:
        """Children of *node* in insertion order."""
        return [self._nodes[child_id] for child_id in node.children.values()]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self._nodes.get(node.id) is node

    # -- lookup ------------------------------------------------------------

    def resolve(self, segments: Sequence[str], start: Node | None = None) -> Node | None:
        """Walk *segments* down from *start* (the root by default).

        Returns the node at that path, or ``None`` if any segment is
        missing. An empty sequence resolves to *start* itself.
        """
        node = self.root if start is None else start
        for name in segments:
            child_id = node.children.get(name)
            if child_id is None:
                return None
            node = self._nodes[child_id]
        return node

    # -- mutation ----------------------------------------------------------

    def mount_child(self, parent: Node, name: str, selector: Any, update: UpdateRoutine) -> Node:
        """Create a child of *parent* bound to the handle *selector* locates.

        Raises ``DuplicateChild`` if *name* is taken and
        ``ResourceNotFound`` if the locator finds nothing. A sibling
        already bound to the same handle is torn down first. The new
        node is not rendered.
        """
        if name in parent.children:
            raise DuplicateChild(name)

        path = f"{parent.path}{DELIMITER}{name}"
        handle = self._locator(parent.handle, selector)
        if handle is None:
            raise ResourceNotFound(selector, path)

        for sibling in self.children(parent):
            if sibling.handle is handle:
                if self._log:
                    logger.debug("evicting %s from handle claimed by %s", sibling.path, path)
                self.unmount_child(parent, sibling.name)
                break

        child = self._new_node(name, path, parent.id, handle, update)
        parent.children[name] = child.id
        if self._log:
            logger.debug("mounted %s", path)
        return child

    def unmount_child(self, parent: Node, name: str) -> None:
        """Tear down the child *name* of *parent*. Raises ``NoSuchChild`` if absent."""
        child_id = parent.children.get(name)
        if child_id is None:
            raise NoSuchChild(name)
        self._teardown(self._nodes[child_id])
        # hooks may have remounted or removed entries while tearing down
        if parent.children.get(name) == child_id:
            del parent.children[name]
        self._nodes.pop(child_id, None)

    def unmount_children(self, node: Node) -> None:
        """Tear down every child of *node*; no hooks fire for *node* itself."""
        for name in list(node.children):
            if name in node.children:
                self.unmount_child(node, name)

    def _teardown(self, node: Node) -> None:
        """Destroy *node* and its subtree, firing the removal hooks."""
        self._hooks.fire(HookStage.PRE_EMPTY, node.path, node.handle, node.view)
        self.unmount_children(node)
        self._hooks.fire(HookStage.PRE_REMOVE, node.path, node.handle, node.view)

        node.handle = None
        node.update = None
        node.view = None
        node.signature = None
        if self._log:
            logger.debug("unmounted %s", node.path)

        self._hooks.fire(HookStage.POST_REMOVE, node.path)

    def reset(self) -> None:
        """Drop every node and start over with a fresh root. Fires no hooks."""
        self._nodes.clear()
        self._root_id = self._new_node(self.root_name, "", None, self.root_handle, None).id

    # -- rendering ---------------------------------------------------------

    def render(self, node: Node, params: Any = None) -> Any:
        """Run the node's update routine and cache its view."""
        if node.update is None:
            msg = f"Node {node.path or node.name!r} has no update routine"
            raise RuntimeError(msg)

        self._hooks.fire(HookStage.PRE_INIT, node.path, node.handle, params)
        view = node.update(node.handle, params)
        node.view = view
        node.signature = signature_of(params)
        if self._log:
            logger.debug("rendered %s", node.path)
        self._hooks.fire(HookStage.POST_INIT, node.path, node.handle, view)
        return view

    def needs_render(self, node: Node, params: Any = None) -> bool:
        """Whether rendering *node* with *params* could change its view."""
        previous: ParamSignature | None = node.signature
        if previous is None:
            return True
        return not previous.matches(signature_of(params))

    # -- introspection -----------------------------------------------------

    def describe(self, node: Node | None = None) -> str:
        """Return ``(name child child ...)`` for *node* (the root by default)."""
        node = self.root if node is None else node
        parts = [node.name]
        parts.extend(self.describe(child) for child in self.children(node))
        return "(" + " ".join(parts) + ")"
