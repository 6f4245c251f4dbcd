from __future__ import annotations

from typing import Any, Callable

from ..tree import Assignment, Block, Program, shape_of
from ..types import MaybeValue, NO_VALUE, Scope, DslInvalidPosition, DslTypeMismatch

EvalFunc = Callable[[Any, Any, Scope], MaybeValue]

def is_block_position(parent: Any) -> bool:
    """Assignments may only appear directly inside a block or at top level."""
    return isinstance(parent, (Block, Program))

def eval_assignment(node: Assignment, parent: Any, scope: Scope, eval_func: EvalFunc) -> MaybeValue:
    if not is_block_position(parent):
        raise DslInvalidPosition(f"assignment to '{node.name}' inside {shape_of(parent)}, expected Block", node)

    if not isinstance(node.name, str):
        raise DslTypeMismatch(f"assignment target must be a name, got {node.name!r}", node)

    value = eval_func(node.value, node, scope)
    if value is NO_VALUE:
        return NO_VALUE

    scope.define(node.name, value)

    return value
