"""Hier engine: the path-addressed API over tree, registry and hooks.

An ``Engine`` owns one ``NodeTree``, one ``Registry`` and one
``HookTable``. Every call runs synchronously to completion; hook
callbacks run inline and may call back into the engine, observing the
tree exactly as far as the current operation has progressed.

Operations are not transactional. If mounting fails after a sibling on
the same handle was evicted, both are gone; check with ``has()`` and
re-issue the call once the cause is fixed.
"""

import logging
from typing import Any

from hier.config import EngineConfig
from hier.dom import select
from hier.errors import PathNotFound, RegistryMiss
from hier.hooks import HookTable
from hier.locate import HookCallback, Locator, UpdateRoutine
from hier.registry import Registry
from hier.tree.path import NodePath
from hier.tree.tree import NodeTree

logger = logging.getLogger("hier.engine")

# Distinguishes "no selector passed" from a selector that happens to be None
_UNSET: Any = object()


def _as_path(path: NodePath | str) -> NodePath:
    if isinstance(path, NodePath):
        return path
    return NodePath.parse(path)


class Engine:
    """The hier engine.

    Usage::

        from hier import Engine
        from hier.dom import Element

        body = Element("body")
        body.inner_html = '<div id="app"></div>'

        engine = Engine(body)
        engine.add("/app", "#app", render_app, {"user": "ada"})
        engine.show()  # "(root (app))"

    *locator* resolves a selector against a parent handle; it defaults
    to ``hier.dom.select``. *root_handle* is the handle of the root
    node and is never located.
    """

    __slots__ = ("_current", "_hooks", "_registry", "_tree", "config")

    def __init__(
        self,
        root_handle: Any,
        locator: Locator | None = None,
        *,
        config: EngineConfig | None = None,
    ) -> None:
        self.config: EngineConfig = config or EngineConfig()
        self._hooks = HookTable()
        self._registry = Registry()
        self._tree = NodeTree(
            locator if locator is not None else select,
            self._hooks,
            root_handle=root_handle,
            root_name=self.config.root_name,
            lifecycle_logging=self.config.lifecycle_logging,
        )
        self._current: NodePath | None = None

    @property
    def tree(self) -> NodeTree:
        return self._tree

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def hooks(self) -> HookTable:
        return self._hooks

    @property
    def current(self) -> NodePath | None:
        """The path last activated with ``go()``, if still mounted."""
        return self._current

    # -- mounting ----------------------------------------------------------

    def add(
        self,
        path: NodePath | str,
        selector: Any = _UNSET,
        update: UpdateRoutine | None = None,
        params: Any = None,
    ) -> Any:
        """Mount and render the node at *path*, returning its view.

        With *update* and a non-None *selector* given, they define the
        node inline. Otherwise the definition comes from the registry, and
        a positional second argument is taken as *params*::

            engine.add("/list", "#list", render_list, 42)
            engine.add("/list", 42)  # same, from a reg() entry

        An already mounted node re-added with the same boolean, number or
        string params is left alone and its cached view returned. Otherwise the node and
        its subtree are unmounted and mounted afresh.

        Raises ``PathNotFound`` if the parent is not mounted and
        ``RegistryMiss`` if no definition is available.
        """
        node_path = _as_path(path)
        if update is not None:
            if selector is _UNSET:
                msg = f"add({str(node_path)!r}) got an update routine but no selector"
                raise TypeError(msg)
        elif selector is not _UNSET:
            if params is not None:
                msg = f"add({str(node_path)!r}) without an update routine takes params only once"
                raise TypeError(msg)
            params, selector = selector, _UNSET

        existing = self._tree.resolve(node_path.segments)
        if existing is not None and not self._tree.needs_render(existing, params):
            logger.debug("add %s: params unchanged, keeping cached view", node_path)
            return existing.view

        parent = self._tree.resolve(node_path.parent)
        if parent is None:
            raise PathNotFound(str(node_path))

        if update is None or selector is None:
            node_def = self._registry.lookup(node_path)
            if node_def is None:
                raise RegistryMiss(str(node_path))
            selector, update = node_def.selector, node_def.update

        if existing is not None:
            logger.debug("add %s: params changed, remounting", node_path)
            self._tree.unmount_child(parent, node_path.last)

        node = self._tree.mount_child(parent, node_path.last, selector, update)
        return self._tree.render(node, params)

    def remove(self, path: NodePath | str) -> None:
        """Unmount the node at *path* and its subtree.

        Raises ``PathNotFound`` if the parent is not mounted and
        ``NoSuchChild`` if the node itself is not.
        """
        node_path = _as_path(path)
        parent = self._tree.resolve(node_path.parent)
        if parent is None:
            raise PathNotFound(str(node_path))
        self._tree.unmount_child(parent, node_path.last)

        current = self._current
        if current is not None and current.segments[: len(node_path)] == node_path.segments:
            self._current = None

    def update(self, path: NodePath | str, params: Any = None) -> Any:
        """Unmount the node's children and re-render it unconditionally."""
        node_path = _as_path(path)
        node = self._tree.resolve(node_path.segments)
        if node is None:
            raise PathNotFound(str(node_path))
        self._tree.unmount_children(node)
        return self._tree.render(node, params)

    def replace(self, old: NodePath | str, new: NodePath | str, params: Any = None) -> Any:
        """Remove *old*, then add *new* from its registry definition."""
        self.remove(old)
        return self.add(new, params=params)

    def go(self, path: NodePath | str, params: Any = None) -> Any:
        """Make *path* the active branch and return its view.

        The branch that was active below the common prefix of the old
        and new paths is removed; missing ancestors of *path* are
        mounted from the registry without params; *path* itself is
        added with *params*.
        """
        target = _as_path(path)
        current = self._current
        if current is not None:
            shared = current.common_prefix(target)
            if len(shared) < len(current):
                stale = NodePath(current.segments[: len(shared) + 1])
                if self.has(stale):
                    self.remove(stale)

        for depth in range(1, len(target)):
            ancestor = NodePath(target.segments[:depth])
            if not self.has(ancestor):
                self.add(ancestor)

        view = self.add(target, params=params)
        self._current = target
        return view

    # -- queries -----------------------------------------------------------

    def has(self, path: NodePath | str) -> bool:
        """True if a node is mounted at *path*. Ignores the registry."""
        return self._tree.resolve(_as_path(path).segments) is not None

    def view(self, path: NodePath | str) -> Any:
        """Cached view of the node at *path*. Raises ``PathNotFound``."""
        node_path = _as_path(path)
        node = self._tree.resolve(node_path.segments)
        if node is None:
            raise PathNotFound(str(node_path))
        return node.view

    def show(self) -> str:
        """Describe the whole tree, e.g. ``(root (node (nested)))``."""
        return self._tree.describe()

    # -- registry & hooks --------------------------------------------------

    def reg(self, path: NodePath | str, selector: Any, update: UpdateRoutine) -> None:
        """Register a deferred definition for *path*."""
        self._registry.register(_as_path(path), selector, update)

    def unreg(self, path: NodePath | str) -> None:
        """Forget the definition for *path*, if any."""
        self._registry.unregister(_as_path(path))

    def on(self, stage: str, callback: HookCallback) -> None:
        """Set the callback for a lifecycle stage. Raises ``UnknownHook``."""
        self._hooks.on(stage, callback)

    def off(self, stage: str) -> bool:
        """Drop the callback for a lifecycle stage; returns whether one was set."""
        return self._hooks.off(stage)

    def clear(self) -> None:
        """Unmount everything, forget registry entries and hooks.

        Mounted nodes are torn down first, so hooks registered at the
        time still fire for them. The root is reset without hooks.
        """
        self._tree.unmount_children(self._tree.root)
        self._registry.clear()
        self._hooks.clear()
        self._tree.reset()
        self._current = None
        logger.debug("engine cleared")
