from __future__ import annotations

import numbers

from ..tree import Identifier, Literal
from ..types import MaybeValue, Scope, DslTypeMismatch

def is_numeric(value: object) -> bool:
    # bool subclasses int but is not a number in the DSL
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def eval_literal(node: Literal) -> numbers.Real:
    value = node.value

    if not is_numeric(value):
        raise DslTypeMismatch(f"value is not numeric: {value!r}", node)

    return value

def eval_identifier(node: Identifier, scope: Scope) -> MaybeValue:
    return scope.get(node.name)
