from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Union

from .evaluator import eval_node
from .runtime import default_bindings, get_host_op
from .tree import Program, program_from_obj
from .types import NO_VALUE, Scope, Value, DslLoadError

logger = logging.getLogger(__name__)

def run(ast: Union[Program, Mapping[str, Any]], interest_ids: Iterable[Hashable]) -> Dict[Hashable, Value]:
    """Evaluate every top-level node and collect results for the requested ids.

    Top-level nodes share one scope, so an assignment is visible to the
    nodes after it. Nodes that fail or produce nothing are left out.
    """
    program = program_from_obj(ast)
    wanted = list(interest_ids)
    scope = Scope(program.bindings)
    results: Dict[Hashable, Value] = {}

    for node in program.nodes:
        value = eval_node(node, program, scope)
        node_id = getattr(node, "id", None)
        logger.debug("top-level node %r -> %r", node_id, value)

        if value is not NO_VALUE and node_id in wanted:
            results[node_id] = value

    return results

# ---------------- Loading ----------------

def resolve_host_refs(bindings: Mapping[str, Any]) -> Dict[str, Value]:
    """Replace ``{"host": "<name>"}`` binding values with registered host operations."""
    resolved: Dict[str, Value] = {}

    for name, value in bindings.items():
        if isinstance(value, Mapping) and set(value) == {"host"}:
            if not isinstance(value["host"], str):
                raise DslLoadError(f"binding '{name}' host reference must be a string, got {value['host']!r}")
            op = get_host_op(value["host"])
            if op is None:
                raise DslLoadError(f"binding '{name}' refers to unknown host operation {value['host']!r}")
            value = op
        resolved[name] = value

    return resolved

def load_program(data: Any, with_stdlib: bool=True) -> Program:
    program = program_from_obj(data)
    bindings = resolve_host_refs(program.bindings)

    if with_stdlib:
        bindings = default_bindings(**bindings)

    return Program(nodes=program.nodes, bindings=bindings)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into document text.
    - None or "-" => read stdin.
    - Otherwise the argument is a path to a JSON file.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    if not candidate.exists():
        raise SystemExit(f"No such file: {arg}")

    return candidate.read_text(encoding="utf-8")

def _interest_keys(raw: str) -> List[Hashable]:
    # ids in JSON documents may be numbers or strings; accept either spelling
    keys: List[Hashable] = [raw]

    try:
        keys.append(int(raw))
    except ValueError:
        pass

    return keys

def main(argv: Optional[List[str]]=None) -> int:
    arg = None
    interest: List[Hashable] = []
    with_stdlib = True
    verbose = False
    it = iter(sys.argv[1:] if argv is None else argv)

    for token in it:
        if token == "--no-stdlib":
            with_stdlib = False
            continue

        if token in ("-v", "--verbose"):
            verbose = True
            continue

        if token.startswith("--interest="):
            interest.extend(_interest_keys(token.split("=", 1)[1]))
            continue

        if token == "--interest":
            try:
                interest.extend(_interest_keys(next(it)))
            except StopIteration:
                raise SystemExit("--interest flag requires an id") from None
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        program = load_program(json.loads(_load_source(arg)), with_stdlib=with_stdlib)
    except (json.JSONDecodeError, DslLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not interest:
        interest = [node.id for node in program.nodes]

    results = run(program, interest)
    print(json.dumps({str(k): v for k, v in results.items()}, default=repr))

    return 0

if __name__ == "__main__":
    sys.exit(main())
