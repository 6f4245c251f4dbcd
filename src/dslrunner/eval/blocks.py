from __future__ import annotations

from typing import Any, Callable

from ..tree import Block
from ..types import MaybeValue, NO_VALUE, Scope, Value

EvalFunc = Callable[[Any, Any, Scope], MaybeValue]

# Result of a block where no child produced a value.
EMPTY_BLOCK_VALUE = 0

def eval_block(node: Block, scope: Scope, eval_func: EvalFunc) -> Value:
    """Run the block's children in a child scope, returning the last defined value."""
    child_scope = scope.child(node.bindings)
    result: Value = EMPTY_BLOCK_VALUE

    for child in node.nodes:
        value = eval_func(child, node, child_scope)
        if value is not NO_VALUE:
            result = value

    return result
