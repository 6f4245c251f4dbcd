"""AST node classes for the DSL and helpers for building them from plain data.

Trees usually arrive as JSON-shaped mappings (``{"id": 1, "shape": "Literal",
"value": 2}``); ``node_from_obj`` and ``program_from_obj`` turn those into the
node classes below. Unrecognized shapes are kept as ``Unknown`` nodes so the
evaluator can treat them as producing no value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Hashable, Mapping, Optional, Tuple
from typing_extensions import TypeAlias, TypeGuard

from .types import DslLoadError

NodeId: TypeAlias = Optional[Hashable]


@dataclass
class DslNode:
    id: NodeId = None
    shape: ClassVar[str] = ""


@dataclass
class Literal(DslNode):
    value: Any = None
    shape: ClassVar[str] = "Literal"


@dataclass
class Identifier(DslNode):
    name: Optional[str] = None
    shape: ClassVar[str] = "Identifier"


@dataclass
class Assignment(DslNode):
    name: Optional[str] = None
    value: Optional[DslNode] = None
    shape: ClassVar[str] = "Assignment"


@dataclass
class Function(DslNode):
    callee: Optional[DslNode] = None
    args: Tuple[DslNode, ...] = ()
    shape: ClassVar[str] = "Function"


@dataclass
class Array(DslNode):
    nodes: Tuple[DslNode, ...] = ()
    shape: ClassVar[str] = "Array"


@dataclass
class Block(DslNode):
    nodes: Tuple[DslNode, ...] = ()
    bindings: Dict[str, Any] = field(default_factory=dict)
    shape: ClassVar[str] = "Block"


@dataclass
class Unknown(DslNode):
    """A node whose shape tag is not one of the known shapes."""
    tag: Any = None

    @property
    def label(self) -> str:
        return str(self.tag)


@dataclass
class Program:
    """Root of a tree: top-level nodes plus the host-provided bindings."""
    nodes: Tuple[DslNode, ...] = ()
    bindings: Dict[str, Any] = field(default_factory=dict)
    shape: ClassVar[str] = "Program"


# ---------------- Helpers ----------------

def is_node(obj: Any) -> TypeGuard[DslNode]:
    return isinstance(obj, DslNode)

def shape_of(node: Any) -> str:
    if isinstance(node, Unknown):
        return node.label

    return getattr(node, "shape", None) or type(node).__name__

# ---------------- Loading ----------------

def is_node_sequence(raw: Any) -> bool:
    """Node lists are JSON arrays: a list or tuple, nothing else."""
    return isinstance(raw, (list, tuple))

def _name(raw: Any) -> Optional[str]:
    return raw if isinstance(raw, str) else None

def _node_id(raw: Any) -> NodeId:
    # ids are used as result keys, so they must be hashable
    try:
        hash(raw)
    except TypeError:
        return None

    return raw

def _node_list(raw: Any) -> Tuple[DslNode, ...]:
    if raw is None:
        return ()

    if not is_node_sequence(raw):
        return (Unknown(tag=raw),)

    return tuple(node_from_obj(item) for item in raw)

def _optional_node(raw: Any) -> Optional[DslNode]:
    if raw is None:
        return None

    return node_from_obj(raw)

def _bindings(raw: Any) -> Dict[str, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)

    return {}

def node_from_obj(obj: Any) -> DslNode:
    """Build a node from a JSON-shaped mapping. Never raises."""
    if is_node(obj):
        return obj

    if not isinstance(obj, Mapping):
        return Unknown(tag=obj)

    node_id = _node_id(obj.get("id"))
    tag = obj.get("shape")

    match tag:
        case "Literal":
            return Literal(id=node_id, value=obj.get("value"))
        case "Identifier":
            return Identifier(id=node_id, name=_name(obj.get("name")))
        case "Assignment":
            return Assignment(id=node_id, name=_name(obj.get("name")), value=_optional_node(obj.get("value")))
        case "Function":
            callee = obj.get("callee")
            # callee is only a name holder; it is never evaluated, so no shape is required
            if isinstance(callee, Mapping) and "shape" not in callee:
                callee_node: Optional[DslNode] = Identifier(id=_node_id(callee.get("id")), name=_name(callee.get("name")))
            else:
                callee_node = _optional_node(callee)
            return Function(id=node_id, callee=callee_node, args=_node_list(obj.get("args")))
        case "Array":
            return Array(id=node_id, nodes=_node_list(obj.get("nodes")))
        case "Block":
            return Block(id=node_id, nodes=_node_list(obj.get("nodes")), bindings=_bindings(obj.get("bindings")))
        case _:
            return Unknown(id=node_id, tag=tag)

def program_from_obj(obj: Any) -> Program:
    if isinstance(obj, Program):
        return obj

    if not isinstance(obj, Mapping):
        raise DslLoadError(f"AST root must be a mapping, got {type(obj).__name__}")

    raw_nodes = obj.get("nodes", [])
    if not is_node_sequence(raw_nodes):
        raise DslLoadError("AST root 'nodes' must be a list")

    raw_bindings = obj.get("bindings") or {}
    if not isinstance(raw_bindings, Mapping):
        raise DslLoadError("AST root 'bindings' must be a mapping")

    return Program(nodes=tuple(node_from_obj(n) for n in raw_nodes), bindings=dict(raw_bindings))
