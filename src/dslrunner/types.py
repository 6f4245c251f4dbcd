from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from .tree import DslNode

# ---------- Value Model ----------

class NoValue:
    """Marker for "evaluation produced nothing". Distinct from 0, None and []."""
    _instance: Optional['NoValue'] = None

    def __new__(cls) -> 'NoValue':
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

NO_VALUE = NoValue()

Value: TypeAlias = Any
MaybeValue: TypeAlias = Any  # Value | NoValue

def ensure_value(value: Any) -> MaybeValue:
    """Map host-side ``None`` onto the evaluator's "no value" marker."""
    if value is None:
        return NO_VALUE

    return value

def host_value(value: MaybeValue) -> Any:
    """Inverse of ensure_value, for values handed to host operations."""
    if value is NO_VALUE:
        return None

    return value

# ---------- Scope ----------

class Scope:
    """One lexical scope.

    Child scopes are built by copying the parent's bindings as they are at
    creation time and overlaying the block's own declarations. There is no
    link back to the parent afterwards.
    """

    def __init__(self, bindings: Optional[Mapping[str, Value]]=None):
        self.vars: Dict[str, Value] = dict(bindings) if bindings else {}

    def get(self, name: Optional[str]) -> MaybeValue:
        if not isinstance(name, str) or name not in self.vars:
            return NO_VALUE

        return ensure_value(self.vars[name])

    def define(self, name: str, val: Value) -> None:
        self.vars[name] = val

    def child(self, overlay: Optional[Mapping[str, Value]]=None) -> 'Scope':
        scope = Scope(self.vars)

        if overlay:
            scope.vars.update(overlay)

        return scope

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.vars

    def __repr__(self) -> str:
        return f"Scope({sorted(self.vars)!r})"

# ---------- Exceptions ----------

class DslError(Exception):
    pass

class DslLoadError(DslError):
    """Input could not be turned into a program at all."""

class DslEvalError(DslError):
    node: Optional['DslNode']

    def __init__(self, message: str, node: Optional['DslNode']=None):
        super().__init__(message)
        self.node = node

class DslTypeMismatch(DslEvalError):
    pass

class DslInvalidPosition(DslEvalError):
    pass

class DslNotAFunction(DslEvalError):
    pass

class DslOperationError(DslEvalError):
    pass
