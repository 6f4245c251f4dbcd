"""Tree-walking evaluator for a small expression DSL."""

from .evaluator import eval_node, evaluate
from .runner import load_program, run
from .runtime import default_bindings, register_host_op
from .tree import (
    Array,
    Assignment,
    Block,
    DslNode,
    Function,
    Identifier,
    Literal,
    Program,
    Unknown,
    node_from_obj,
    program_from_obj,
)
from .types import (
    NO_VALUE,
    DslError,
    DslEvalError,
    DslInvalidPosition,
    DslLoadError,
    DslNotAFunction,
    DslOperationError,
    DslTypeMismatch,
    NoValue,
    Scope,
)

__all__ = [
    "Array",
    "Assignment",
    "Block",
    "DslError",
    "DslEvalError",
    "DslInvalidPosition",
    "DslLoadError",
    "DslNode",
    "DslNotAFunction",
    "DslOperationError",
    "DslTypeMismatch",
    "Function",
    "Identifier",
    "Literal",
    "NO_VALUE",
    "NoValue",
    "Program",
    "Scope",
    "Unknown",
    "default_bindings",
    "eval_node",
    "evaluate",
    "load_program",
    "node_from_obj",
    "program_from_obj",
    "register_host_op",
    "run",
]
