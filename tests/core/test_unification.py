"""
Property-based and unit tests for the unification algorithm.

The core claims:
    - Symmetry:      unify(A,B) succeeds iff unify(B,A) succeeds
    - Correctness:   if unify(A,B)=σ then resolve(σ,A) == resolve(σ,B)
    - Occurs check:  unify(X, f(X)) always fails
    - Shape:         atoms unify only with atoms of the same shape
"""

from hypothesis import given
from hypothesis import strategies as st

from folkernel.core.terms import Var, constant, apply_function, occurs_in
from folkernel.core.atoms import apply_predicate, equate
from folkernel.core.unification import (
    resolve_bindings, unify_terms, unify_pairs, unify_atoms,
)


X, Y, Z = Var("X"), Var("Y"), Var("Z")
a, b = constant("a"), constant("b")


def f(*args):
    return apply_function("f", args)


def g(*args):
    return apply_function("g", args)


# ── Generators ──────────────────────────────────────────────────────────────

constants = st.sampled_from(["a", "b", "zero"]).map(constant)
variables = st.sampled_from(["X", "Y", "Z", "W"]).map(Var)

@st.composite
def ground_terms(draw, max_depth=3):
    if max_depth == 0:
        return draw(constants)
    choice = draw(st.integers(min_value=0, max_value=2))
    if choice == 0:
        return draw(constants)
    fname = draw(st.sampled_from(["f", "g"]))
    arity = draw(st.integers(min_value=1, max_value=2))
    return apply_function(fname, [draw(ground_terms(max_depth=max_depth - 1))
                                  for _ in range(arity)])

@st.composite
def terms(draw, max_depth=2):
    if max_depth == 0:
        return draw(st.one_of(constants, variables))
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        return draw(constants)
    if choice == 1:
        return draw(variables)
    fname = draw(st.sampled_from(["f", "g"]))
    arity = draw(st.integers(min_value=1, max_value=2))
    return apply_function(fname, [draw(terms(max_depth=max_depth - 1))
                                  for _ in range(arity)])


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestResolveBindings:
    def test_follows_chains(self):
        assert resolve_bindings({"X": Y, "Y": a}, f(X)) == f(a)

    def test_unbound_left_alone(self):
        assert resolve_bindings({"X": a}, g(Y, X)) == g(Y, a)


class TestUnifyTerms:
    def test_identical(self):
        assert unify_terms(f(a), f(a)) == {}

    def test_variable_binds(self):
        assert unify_terms(X, a) == {"X": a}
        assert unify_terms(a, X) == {"X": a}

    def test_nested(self):
        sub = unify_terms(f(X, g(Y)), f(a, g(b)))
        assert sub == {"X": a, "Y": b}

    def test_application_against_variable(self):
        assert unify_terms(f(X), Y) == {"Y": f(X)}
        assert unify_terms(f(Y), Y) is None

    def test_different_functor(self):
        assert unify_terms(f(X), g(X)) is None

    def test_different_arity(self):
        assert unify_terms(f(X), f(X, Y)) is None

    def test_different_constants(self):
        assert unify_terms(a, b) is None

    def test_occurs_check(self):
        assert unify_terms(X, f(X)) is None
        assert unify_terms(g(f(X)), g(X)) is None

    def test_threads_existing_bindings(self):
        assert unify_terms(X, b, {"X": a}) is None
        assert unify_terms(X, a, {"X": a}) == {"X": a}

    def test_does_not_mutate_input(self):
        sub = {"X": a}
        unify_terms(Y, b, sub)
        assert sub == {"X": a}

    def test_pairs(self):
        assert unify_pairs([(X, Y), (Y, a)]) is not None
        assert unify_pairs([(X, a), (X, b)]) is None


class TestUnifyAtoms:
    def test_predicates(self):
        sub = unify_atoms(apply_predicate("P", [X, b]), apply_predicate("P", [a, Y]))
        assert sub == {"X": a, "Y": b}

    def test_different_predicates(self):
        assert unify_atoms(apply_predicate("P", [X]), apply_predicate("Q", [X])) is None

    def test_equations_side_by_side(self):
        assert unify_atoms(equate(X, a), equate(b, Y)) == {"X": b, "Y": a}

    def test_equations_are_not_symmetric(self):
        assert unify_atoms(equate(X, a), equate(b, a)) == {"X": b}
        assert unify_atoms(equate(a, X), equate(b, a)) is None

    def test_equation_never_unifies_with_predicate(self):
        assert unify_atoms(equate(X, Y), apply_predicate("P", [X, Y])) is None


# ── Property-based tests ─────────────────────────────────────────────────────

class TestUnificationProperties:

    @given(terms(), terms())
    def test_symmetry(self, t1, t2):
        assert (unify_terms(t1, t2) is None) == (unify_terms(t2, t1) is None)

    @given(terms(), terms())
    def test_correctness(self, t1, t2):
        sub = unify_terms(t1, t2)
        if sub is not None:
            assert resolve_bindings(sub, t1) == resolve_bindings(sub, t2)

    @given(ground_terms())
    def test_ground_self_unifies_empty(self, t):
        assert unify_terms(t, t) == {}

    @given(ground_terms(), ground_terms())
    def test_ground_unify_iff_equal(self, t1, t2):
        assert (unify_terms(t1, t2) is not None) == (t1 == t2)

    @given(variables, terms())
    def test_occurs_check_property(self, v, t):
        if occurs_in(v.name, t):
            assert unify_terms(v, f(t)) is None

    @given(terms(), terms())
    def test_idempotent_resolution(self, t1, t2):
        sub = unify_terms(t1, t2)
        if sub is not None:
            once = resolve_bindings(sub, t1)
            assert resolve_bindings(sub, once) == once
