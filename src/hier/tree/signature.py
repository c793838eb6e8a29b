"""Render signatures for params diffing.

Each render stores a ``ParamSignature`` of the params it was given. A
later ``add`` of the same path compares signatures to decide whether the
node must be remounted. Only booleans, numbers and strings can ever
compare equal. Missing params and anything structured always trigger a
re-render, even against an identical previous value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParamKind(str, Enum):
    """Diff-relevant kind of a params value."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OPAQUE = "opaque"


_COMPARABLE = frozenset({ParamKind.BOOLEAN, ParamKind.NUMBER, ParamKind.STRING})


@dataclass(frozen=True, slots=True)
class ParamSignature:
    """Kind plus stringified value (scalars only)."""

    kind: ParamKind
    text: str | None = None

    def matches(self, other: "ParamSignature") -> bool:
        """True when a render with *other* would reproduce this one."""
        if self.kind not in _COMPARABLE:
            return False
        return self.kind is other.kind and self.text == other.text


def _number_text(value: int | float) -> str:
    # 1 and 1.0 stringify alike
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def signature_of(params: Any) -> ParamSignature:
    """Classify *params*. ``bool`` is checked before ``int``."""
    if params is None:
        return ParamSignature(ParamKind.ABSENT)
    if isinstance(params, bool):
        return ParamSignature(ParamKind.BOOLEAN, str(params))
    if isinstance(params, int | float):
        return ParamSignature(ParamKind.NUMBER, _number_text(params))
    if isinstance(params, str):
        return ParamSignature(ParamKind.STRING, params)
    return ParamSignature(ParamKind.OPAQUE)
