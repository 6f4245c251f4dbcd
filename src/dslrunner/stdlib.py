"""Built-in binary host operations registered via dslrunner.runtime."""

from __future__ import annotations

import operator

from .runtime import register_host_op

register_host_op("add")(operator.add)
register_host_op("sub")(operator.sub)
register_host_op("mul")(operator.mul)
register_host_op("div")(operator.truediv)
register_host_op("mod")(operator.mod)
register_host_op("pow")(operator.pow)

@register_host_op("min")
def std_min(left, right):
    return min(left, right)

@register_host_op("max")
def std_max(left, right):
    return max(left, right)
