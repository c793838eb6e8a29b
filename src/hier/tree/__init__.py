"""Node tree: path parsing, arena-backed node storage, render diffing.

Paths are validated once at the API boundary and resolved segment by
segment from the root.
"""

from hier.tree.node import Node
from hier.tree.path import NodePath
from hier.tree.signature import ParamKind, ParamSignature, signature_of
from hier.tree.tree import NodeTree

__all__ = [
    "Node",
    "NodePath",
    "NodeTree",
    "ParamKind",
    "ParamSignature",
    "signature_of",
]
