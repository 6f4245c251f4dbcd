from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, Optional

from .types import Value

logger = logging.getLogger(__name__)

HostOp = Callable[[Any, Any], Value]

HOST_OPS: Dict[str, HostOp] = {}

_STDLIB_INITIALIZED = False

def init_stdlib() -> None:
    """Load the stdlib module (idempotent) so register_host_op hooks run."""
    global _STDLIB_INITIALIZED

    if _STDLIB_INITIALIZED:
        return

    importlib.import_module("dslrunner.stdlib")
    _STDLIB_INITIALIZED = True
    logger.debug("host operations loaded: %s", ", ".join(sorted(HOST_OPS)))

def register_host_op(name: str):
    def dec(fn: HostOp) -> HostOp:
        HOST_OPS[name] = fn
        return fn

    return dec

def get_host_op(name: str) -> Optional[HostOp]:
    init_stdlib()

    return HOST_OPS.get(name)

def default_bindings(**extra: Value) -> Dict[str, Value]:
    """Bindings holding every registered host operation, plus ``extra``."""
    init_stdlib()
    bindings: Dict[str, Value] = dict(HOST_OPS)
    bindings.update(extra)

    return bindings
