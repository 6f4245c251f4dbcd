from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Type, Union

from .tree import Array, Assignment, Block, DslNode, Function, Identifier, Literal, Program, shape_of
from .types import MaybeValue, NO_VALUE, Scope, Value, DslEvalError

from .eval.arrays import eval_array
from .eval.bind import eval_assignment
from .eval.blocks import eval_block
from .eval.fn import eval_function
from .eval.literals import eval_identifier, eval_literal

logger = logging.getLogger(__name__)

Parent = Union[DslNode, Program, None]

# ---------------- Public API ----------------

def evaluate(node: Any, scope: Union[Scope, Mapping[str, Value], None]=None, parent: Parent=None) -> MaybeValue:
    """Evaluate one node. Failures are logged and read as NO_VALUE."""
    if not isinstance(scope, Scope):
        scope = Scope(scope)

    return eval_node(node, parent, scope)

# ---------------- Core evaluator ----------------

def eval_node(node: Any, parent: Parent, scope: Scope) -> MaybeValue:
    try:
        return _eval_node_inner(node, parent, scope)
    except DslEvalError as e:
        _report(e, node)
        return NO_VALUE


def _eval_node_inner(node: Any, parent: Parent, scope: Scope) -> MaybeValue:
    handler = _NODE_DISPATCH.get(type(node))
    if handler is None:
        # Unknown shapes, and anything that is not a node, produce nothing
        return NO_VALUE

    return handler(node, parent, scope)


def _report(exc: DslEvalError, node: Any) -> None:
    node_id = getattr(node, "id", None)
    logger.error("node %r (%s): %s", node_id, shape_of(node), exc)

# ---------------- Dispatch ----------------

_NODE_DISPATCH: Dict[Type[DslNode], Callable[[Any, Parent, Scope], MaybeValue]] = {
    Literal: lambda n, _, __: eval_literal(n),
    Identifier: lambda n, _, scope: eval_identifier(n, scope),
    Assignment: lambda n, parent, scope: eval_assignment(n, parent, scope, eval_node),
    Function: lambda n, _, scope: eval_function(n, scope, eval_node),
    Array: lambda n, _, scope: eval_array(n, scope, eval_node),
    Block: lambda n, _, scope: eval_block(n, scope, eval_node),
}
