from __future__ import annotations

from typing import Any, Callable, List

from ..tree import Array
from ..types import MaybeValue, NO_VALUE, Scope, Value

EvalFunc = Callable[[Any, Any, Scope], MaybeValue]

def eval_array(node: Array, scope: Scope, eval_func: EvalFunc) -> List[Value]:
    items: List[Value] = []

    for child in node.nodes:
        value = eval_func(child, node, scope)
        if value is not NO_VALUE:
            items.append(value)

    return items
