"""Test helpers for code built on hier.

``HookRecorder`` installs a callback on every lifecycle stage and keeps
the calls in order, so tests can assert on mount/teardown sequences.
``assert_tree`` compares ``engine.show()`` with a clear error message.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hier.engine import Engine
from hier.hooks import HookStage


@dataclass(frozen=True, slots=True)
class HookCall:
    """One recorded hook invocation."""

    stage: HookStage
    path: str
    args: tuple[Any, ...]


class HookRecorder:
    """Records every hook the engine fires.

    Usage::

        recorder = HookRecorder().install(engine)
        engine.remove("/node")
        assert recorder.sequence() == [("pre-empty", "/node"), ...]

    *observer*, if given, is called with each ``HookCall`` as it is
    recorded; it runs inline, mid-operation, like any hook.
    """

    __slots__ = ("calls", "observer")

    def __init__(self, observer: Callable[[HookCall], Any] | None = None) -> None:
        self.calls: list[HookCall] = []
        self.observer = observer

    def install(self, engine: Engine, stages: tuple[HookStage, ...] = tuple(HookStage)) -> "HookRecorder":
        for stage in stages:
            engine.on(stage, self._callback(stage))
        return self

    def _callback(self, stage: HookStage) -> Callable[..., None]:
        def record(path: str, *args: Any) -> None:
            call = HookCall(stage=stage, path=path, args=args)
            self.calls.append(call)
            if self.observer is not None:
                self.observer(call)

        return record

    def sequence(self) -> list[tuple[str, str]]:
        """``(stage value, path)`` pairs in firing order."""
        return [(call.stage.value, call.path) for call in self.calls]

    def of(self, stage: HookStage | str) -> list[HookCall]:
        key = HookStage.coerce(stage)
        return [call for call in self.calls if call.stage is key]

    def reset(self) -> None:
        self.calls.clear()


def assert_tree(engine: Engine, expected: str) -> None:
    """Assert the engine's tree description equals *expected*."""
    actual = engine.show()
    assert actual == expected, (
        f"Tree mismatch.\n  expected: {expected}\n  actual:   {actual}"
    )
