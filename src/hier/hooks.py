"""Lifecycle hook table.

One optional callback per fixed stage. The tree fires them inline while
mounting and tearing down nodes::

    pre-init     (path, handle, params)   before the update routine runs
    post-init    (path, handle, view)     after it returned
    pre-empty    (path, handle, view)     before a node's children are torn down
    pre-remove   (path, handle, view)     after the children are gone
    post-remove  (path)                   after the node released its state

Registering a stage again replaces the previous callback.
"""

import logging
from enum import Enum
from typing import Any

from hier.errors import UnknownHook
from hier.locate import HookCallback

logger = logging.getLogger("hier.hooks")


class HookStage(str, Enum):
    PRE_INIT = "pre-init"
    POST_INIT = "post-init"
    PRE_EMPTY = "pre-empty"
    PRE_REMOVE = "pre-remove"
    POST_REMOVE = "post-remove"

    @classmethod
    def coerce(cls, stage: Any) -> "HookStage":
        """Accept a member or its string value. Raises ``UnknownHook`` otherwise."""
        if isinstance(stage, cls):
            return stage
        if isinstance(stage, str):
            try:
                return cls(stage)
            except ValueError:
                pass
        raise UnknownHook(stage)


class HookTable:
    """Mapping from ``HookStage`` to at most one callback."""

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: dict[HookStage, HookCallback] = {}

    def on(self, stage: Any, callback: HookCallback) -> None:
        """Register *callback* for *stage*, replacing any previous one."""
        key = HookStage.coerce(stage)
        if not callable(callback):
            msg = f"Hook callback for {key.value!r} must be callable, got {callback!r}"
            raise TypeError(msg)
        self._callbacks[key] = callback

    def off(self, stage: Any) -> bool:
        """Drop the callback for *stage*. Returns whether one was registered."""
        return self._callbacks.pop(HookStage.coerce(stage), None) is not None

    def get(self, stage: Any) -> HookCallback | None:
        return self._callbacks.get(HookStage.coerce(stage))

    def fire(self, stage: HookStage, *args: Any) -> None:
        """Invoke the callback for *stage*, if any. Exceptions propagate."""
        callback = self._callbacks.get(stage)
        if callback is None:
            return
        logger.debug("hook %s%r", stage.value, args[:1])
        callback(*args)

    def clear(self) -> None:
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, stage: object) -> bool:
        try:
            return HookStage.coerce(stage) in self._callbacks
        except UnknownHook:
            return False
