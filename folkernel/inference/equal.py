"""
Equality by axiomatization.

Paramodulation treats = natively. A prover that knows nothing about
equality can still reason with it if the formula carries the axioms of
equality explicitly:

    equivalence:  ∀x. x = x
                  ∀x y z. x = y ∧ x = z ⇒ y = z
                  (with reflexivity this gives symmetry and transitivity)
    congruence:   ∀x1 y1. x1 = y1 ⇒ f(x1) = f(y1)           for each f/n
                  ∀x1 y1. x1 = y1 ⇒ (P(x1) ⇒ P(y1))         for each P/n

equalitize(fm) returns (axioms ⇒ fm), which is valid exactly when fm is
valid in first-order logic with equality. Axiom variables are closed
within each axiom, so they never meet the free variables of fm.

A formula without any equation is returned untouched: no axioms.
"""

from ..core.terms import Var, apply_function
from ..core.atoms import apply_predicate, fold_equate, is_equate
from ..core.formulas import (
    atomic, eq, for_all, for_all_many, implies, conj, conjoin,
    atom_union, formula_functions,
)
from ..render import render_formula


def _argument_names(n: int):
    xs = [f"x{i}" for i in range(1, n + 1)]
    ys = [f"y{i}" for i in range(1, n + 1)]
    return xs, ys


def _pairwise_equal(xs, ys):
    """x1 = y1 ∧ (x2 = y2 ∧ ...). Right nested, at least one pair."""
    return conjoin(eq(Var(x), Var(y)) for x, y in zip(xs, ys))


def function_congruence(function: str, arity: int) -> set:
    """
    {∀x1..xn y1..yn. x1 = y1 ∧ ... ∧ xn = yn ⇒ f(x1..xn) = f(y1..yn)}

    Empty for a constant: reflexivity already covers it.
    """
    if arity == 0:
        return set()
    xs, ys = _argument_names(arity)
    conclusion = eq(apply_function(function, [Var(x) for x in xs]),
                    apply_function(function, [Var(y) for y in ys]))
    return {for_all_many(xs + ys, implies(_pairwise_equal(xs, ys), conclusion))}


def predicate_congruence(atom) -> set:
    """
    {∀x1..xn y1..yn. x1 = y1 ∧ ... ∧ xn = yn ⇒ (P(x1..xn) ⇒ P(y1..yn))}

    Empty for equations and for nullary predicates. One direction is
    enough: the other follows by symmetry of the antecedent.
    """
    def for_predicate(p, args):
        if not args:
            return set()
        xs, ys = _argument_names(len(args))
        conclusion = implies(atomic(apply_predicate(p, [Var(x) for x in xs])),
                             atomic(apply_predicate(p, [Var(y) for y in ys])))
        return {for_all_many(xs + ys, implies(_pairwise_equal(xs, ys), conclusion))}

    return fold_equate(lambda _l, _r: set(), for_predicate, atom)


def equivalence_axioms() -> set:
    x, y, z = Var("x"), Var("y"), Var("z")
    return {
        for_all("x", eq(x, x)),
        for_all("x", for_all("y", for_all("z",
            implies(conj(eq(x, y), eq(x, z)), eq(y, z))))),
    }


def equality_axioms(fm) -> list:
    """
    All axioms equalitize would add for fm, in a fixed order.

    Empty when fm mentions no equation.
    """
    atoms = atom_union(lambda a: {a}, fm)
    equations = {a for a in atoms if is_equate(a)}
    if not equations:
        return []
    others = atoms - equations

    axioms = equivalence_axioms()
    for function, arity in formula_functions(fm):
        axioms |= function_congruence(function, arity)
    for atom in others:
        axioms |= predicate_congruence(atom)
    return sorted(axioms)


def equalitize(fm, verbose: bool = False):
    """
    Compile away equality: (equality axioms) ⇒ fm.

    Returns fm itself if it contains no equation.
    """
    axioms = equality_axioms(fm)
    if not axioms:
        if verbose:
            print("  [equalitize] no equations, formula unchanged")
        return fm

    if verbose:
        print(f"  [equalitize] {len(axioms)} axioms")
        for axiom in axioms:
            print(f"    {render_formula(axiom)}")

    return implies(conjoin(axioms), fm)
