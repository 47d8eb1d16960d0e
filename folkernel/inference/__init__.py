from .equal import (
    equalitize, equality_axioms, equivalence_axioms,
    function_congruence, predicate_congruence,
)

__all__ = [
    "equalitize", "equality_axioms", "equivalence_axioms",
    "function_congruence", "predicate_congruence",
]
