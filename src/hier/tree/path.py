"""Slash-delimited node paths.

A ``NodePath`` is the validated address of a node, relative to the root::

    "/users"          -> ("users",)
    "/users/profile"  -> ("users", "profile")

Unlike route paths, node paths are strict: no trailing slash, no
doubled slash, no bare ``/``. The root itself has no path.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from hier.errors import MalformedPath

DELIMITER = "/"


@dataclass(frozen=True, slots=True)
class NodePath:
    """A parsed, immutable node path.

    Build one with ``NodePath.parse()``; equality and hashing follow the
    canonical string, so paths can key dicts.
    """

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, string: Any) -> "NodePath":
        """Parse and validate a path string.

        Raises ``MalformedPath`` if *string* is empty, does not start
        with ``/``, or contains an empty segment (``//``, trailing ``/``).
        """
        if not isinstance(string, str):
            raise MalformedPath(string, "Paths must be strings")
        if len(string) < 2:
            raise MalformedPath(string, "You must specify a non-empty path")
        if not string.startswith(DELIMITER):
            raise MalformedPath(string, "Paths must start with a slash")

        parts = tuple(string[1:].split(DELIMITER))
        if any(not part for part in parts):
            raise MalformedPath(string, "You must specify a well-formed path")
        return cls(parts)

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "NodePath":
        """Build a path from segments, e.g. ``("a", "b")`` -> ``/a/b``."""
        return cls.parse(DELIMITER + DELIMITER.join(segments))

    @property
    def last(self) -> str:
        """The node's own name."""
        return self.segments[-1]

    @property
    def parent(self) -> tuple[str, ...]:
        """Segments up to the last one. Empty for the root's direct children."""
        return self.segments[:-1]

    def common_prefix(self, other: "NodePath") -> tuple[str, ...]:
        """Longest run of leading segments shared with *other*."""
        shared: list[str] = []
        for mine, theirs in zip(self.segments, other.segments, strict=False):
            if mine != theirs:
                break
            shared.append(mine)
        return tuple(shared)

    def __str__(self) -> str:
        return DELIMITER + DELIMITER.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)
