from __future__ import annotations

from typing import Any, Callable, List

from ..tree import Function
from ..types import MaybeValue, Scope, DslNotAFunction, DslOperationError, ensure_value, host_value

EvalFunc = Callable[[Any, Any, Scope], MaybeValue]

# Host operations are binary; extra arguments are dropped and missing ones are None.
CALL_ARITY = 2

def eval_args(node: Function, scope: Scope, eval_func: EvalFunc) -> List[MaybeValue]:
    """Evaluate arguments left to right in the caller's scope."""
    return [eval_func(arg, node, scope) for arg in node.args]

def pack_call_args(args: List[MaybeValue]) -> List[Any]:
    padded = list(args[:CALL_ARITY])
    padded.extend([None] * (CALL_ARITY - len(padded)))

    return [host_value(arg) for arg in padded]

def eval_function(node: Function, scope: Scope, eval_func: EvalFunc) -> MaybeValue:
    args = eval_args(node, scope, eval_func)
    name = getattr(node.callee, "name", None)
    operation = scope.get(name)

    if not callable(operation):
        raise DslNotAFunction(f"'{name}' is not a function", node)

    try:
        result = operation(*pack_call_args(args))
    except Exception as exc:
        raise DslOperationError(f"'{name}' failed: {exc}", node) from exc

    return ensure_value(result)
