"""
Hypothesis strategies shared by the test modules.
"""

from hypothesis import strategies as st

from folkernel.core.terms import Var, constant, apply_function
from folkernel.core.formulas import (
    Connective, BinOp, truth, negate, for_all, exists, pred, eq,
)


leaf_terms = st.one_of(
    st.sampled_from(["x", "y", "z"]).map(Var),
    st.sampled_from(["a", "b"]).map(constant),
)

# f(t) so that congruence axioms have a function to work on
small_terms = st.one_of(
    leaf_terms,
    leaf_terms.map(lambda t: apply_function("f", [t])),
)

atomic_formulas = st.one_of(
    st.builds(lambda t: pred("P", [t]), small_terms),
    st.builds(lambda s, t: pred("R", [s, t]), small_terms, small_terms),
    st.builds(eq, small_terms, small_terms),
)

connectives = st.sampled_from(list(Connective))

@st.composite
def formulas(draw, max_depth=3):
    if max_depth == 0:
        return draw(st.one_of(atomic_formulas, st.booleans().map(truth)))
    choice = draw(st.integers(min_value=0, max_value=4))
    if choice == 0:
        return draw(atomic_formulas)
    if choice == 1:
        return negate(draw(formulas(max_depth=max_depth - 1)))
    if choice == 2:
        q = draw(st.sampled_from([for_all, exists]))
        return q(draw(st.sampled_from(["x", "y", "z"])), draw(formulas(max_depth=max_depth - 1)))
    return BinOp(draw(formulas(max_depth=max_depth - 1)),
                 draw(connectives),
                 draw(formulas(max_depth=max_depth - 1)))
