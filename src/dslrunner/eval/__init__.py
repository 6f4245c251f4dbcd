"""Per-shape evaluator modules for the dslrunner evaluator."""

__all__ = [
    "arrays",
    "bind",
    "blocks",
    "fn",
    "literals",
]
