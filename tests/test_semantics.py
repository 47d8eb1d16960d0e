"""
Tests for truth in finite interpretations.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from folkernel.core.terms import Var, constant, apply_function
from folkernel.core.formulas import (
    TRUE, FALSE, pred, eq, for_all, exists, conj, disj, implies, iff, negate,
)
from folkernel.core.freevars import generalize
from folkernel.domains.arithmetic import (
    bool_interp, mod_interp, mod_models,
    make_bool_cover_formula, make_mod_cover_formula, make_mod_inverse_formula,
    make_all_zero_formula, make_each_zero_formula,
)
from folkernel.semantics import Interpretation, term_value, holds_atom, holds


x, y = Var("x"), Var("y")
ZERO, ONE = constant("0"), constant("1")


def holds_in_sizes(fm, max_modulus=45):
    return [len(m.domain) for m in mod_models(max_modulus) if holds(m, {}, fm)]


class TestTermValue:
    def test_variable(self):
        assert term_value(mod_interp(5), {"x": 3}, x) == 3

    def test_application(self):
        t = apply_function("+", [x, ONE])
        assert term_value(mod_interp(5), {"x": 4}, t) == 0

    def test_undefined_variable(self):
        with pytest.raises(ValueError, match="Undefined variable: y"):
            term_value(mod_interp(5), {"x": 1}, y)

    def test_uninterpreted_function(self):
        with pytest.raises(ValueError, match="uninterpreted function: f/1"):
            term_value(mod_interp(5), {"x": 1}, apply_function("f", [x]))

    def test_arity_is_part_of_the_symbol(self):
        with pytest.raises(ValueError, match=r"\+/3"):
            term_value(mod_interp(5), {"x": 1}, apply_function("+", [x, x, x]))

    def test_message_names_the_interpretation(self):
        with pytest.raises(ValueError, match="mod_interp"):
            term_value(mod_interp(5), {}, constant("c"))


class TestHoldsAtom:
    def test_equation_uses_equals(self):
        model = Interpretation(domain=[0, 1, 2], equals=lambda a, b: a % 2 == b % 2)
        assert holds(model, {"x": 0, "y": 2}, eq(x, y))
        assert not holds(model, {"x": 0, "y": 1}, eq(x, y))

    def test_predicate(self):
        model = Interpretation(domain=[0, 1], predicates={("P", 1): lambda v: v == 1})
        assert holds_atom(model, {"x": 1}, pred("P", [x]).atom)

    def test_uninterpreted_predicate(self):
        with pytest.raises(ValueError, match="uninterpreted predicate: Q/0"):
            holds(mod_interp(2), {}, pred("Q"))


class TestConnectives:
    model = bool_interp()

    @pytest.mark.parametrize("p,q", [(TRUE, TRUE), (TRUE, FALSE), (FALSE, TRUE), (FALSE, FALSE)])
    def test_truth_tables(self, p, q):
        vp, vq = p.value, q.value
        assert holds(self.model, {}, conj(p, q)) == (vp and vq)
        assert holds(self.model, {}, disj(p, q)) == (vp or vq)
        assert holds(self.model, {}, implies(p, q)) == ((not vp) or vq)
        assert holds(self.model, {}, iff(p, q)) == (vp == vq)
        assert holds(self.model, {}, negate(p)) == (not vp)

    def test_evaluates_both_operands(self):
        # the right operand is still looked at when the left decides the result
        with pytest.raises(ValueError):
            holds(self.model, {}, disj(TRUE, pred("Unknown")))


class TestQuantifiers:
    def test_bool_cover(self):
        assert holds(bool_interp(), {}, make_bool_cover_formula())

    def test_mod_cover(self):
        assert holds(mod_interp(2), {}, make_mod_cover_formula())
        assert not holds(mod_interp(3), {}, make_mod_cover_formula())

    def test_empty_domain(self):
        empty = Interpretation(domain=[])
        assert holds(empty, {}, for_all("x", FALSE))
        assert not holds(empty, {}, exists("x", TRUE))

    def test_binding_shadows_valuation(self):
        fm = for_all("x", eq(x, x))
        assert holds(mod_interp(3), {"x": "not a residue"}, fm)

    def test_valuation_not_mutated(self):
        valuation = {"y": 1}
        holds(mod_interp(3), valuation, exists("x", eq(x, y)))
        assert valuation == {"y": 1}

    def test_free_variable_needs_a_value(self):
        with pytest.raises(ValueError, match="Undefined variable"):
            holds(mod_interp(3), {}, eq(x, ZERO))


class TestArithmeticModels:
    def test_mod_inverse_holds_for_one_and_primes(self):
        fm = generalize(make_mod_inverse_formula())
        assert holds_in_sizes(fm) == [1, 2, 3, 5, 7, 11, 13, 17, 19, 23,
                                      29, 31, 37, 41, 43]

    def test_all_zero_holds_everywhere(self):
        assert holds(mod_interp(3), {}, make_all_zero_formula())
        assert holds_in_sizes(make_all_zero_formula(), 10) == list(range(1, 11))

    def test_each_zero_only_modulo_one(self):
        assert not holds(mod_interp(3), {}, make_each_zero_formula())
        assert holds_in_sizes(make_each_zero_formula(), 10) == [1]

    def test_mod_cover_sizes(self):
        assert holds_in_sizes(make_mod_cover_formula(), 10) == [1, 2]


class TestHoldsProperties:

    @given(st.integers(min_value=1, max_value=8), st.integers(min_value=0, max_value=7))
    def test_every_element_has_an_additive_inverse(self, n, v):
        fm = exists("y", eq(apply_function("+", [x, y]), ZERO))
        assert holds(mod_interp(n), {"x": v % n}, fm)

    @given(st.integers(min_value=1, max_value=6))
    def test_forall_is_not_exists_not(self, n):
        body = eq(apply_function("*", [x, x]), x)
        model = mod_interp(n)
        assert holds(model, {}, for_all("x", body)) == \
            (not holds(model, {}, exists("x", negate(body))))
