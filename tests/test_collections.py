from __future__ import annotations

import pytest

from tests.support.harness import (
    array,
    assign,
    block,
    call,
    error_messages,
    ident,
    lit,
    run_runtime_case,
    unknown,
)

SCENARIOS = [
    pytest.param(array(), [], id="empty"),
    pytest.param(array(lit(1), lit(2), lit(3)), [1, 2, 3], id="literals"),
    pytest.param(array(lit(1), ident("missing"), lit(3)), [1, 3], id="drops-undefined"),
    pytest.param(array(lit(0), lit(0.0)), [0, 0.0], id="keeps-zero"),
    pytest.param(array(lit(1), lit("x"), lit(3)), [1, 3], id="drops-failed"),
    pytest.param(array(unknown(), lit(2)), [2], id="drops-unknown-shape"),
    pytest.param(array(array(lit(1)), array()), [[1], []], id="nested"),
    pytest.param(array(call("add", lit(1), lit(1)), block(lit(4))), [2, 4], id="mixed"),
    pytest.param(
        block(assign("n", lit(5)), array(ident("n"), call("mul", ident("n"), lit(2)))),
        [5, 10],
        id="uses-enclosing-scope",
    ),
    pytest.param(
        block(array(block(assign("k", lit(1)), ident("k"))), ident("k")),
        [1],
        id="block-element-scope-isolated",
    ),
    pytest.param(block(array()), [], id="empty-array-is-a-value"),
]


@pytest.mark.parametrize("node, expected", SCENARIOS)
def test_array(node, expected) -> None:
    run_runtime_case(node, expected)


def test_assignment_element_is_dropped(diagnostics) -> None:
    node = block(array(assign("z", lit(1)), lit(2)), ident("z"))
    # z never gets bound, so the block ends on the array value
    run_runtime_case(node, [2])

    messages = error_messages(diagnostics)
    assert len(messages) == 1
    assert "Array" in messages[0]
