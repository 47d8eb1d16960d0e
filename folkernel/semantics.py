"""
Truth of a formula in a finite interpretation.

An Interpretation fixes a finite domain and what the symbols mean:

    functions:   {(name, arity): callable(*values) -> value}
    predicates:  {(name, arity): callable(*values) -> bool}
    equals:      callable(a, b) -> bool, used for equations

A valuation is a dict from variable names to domain elements.

Quantifiers are checked by trying every element of the domain, so the
cost is |D|^k for k nested quantifiers. This is meant for small models
used to sanity-check axioms and counterexamples, not model checking.
Nothing is cached between branches.
"""

import operator
from dataclasses import dataclass, field
from typing import Callable

from .core.terms import fold_term
from .core.atoms import fold_equate
from .core.formulas import Quant, Connective, fold_quantified


@dataclass
class Interpretation:
    domain: list
    functions: dict = field(default_factory=dict)
    predicates: dict = field(default_factory=dict)
    equals: Callable = operator.eq
    name: str = "interpretation"

    def apply_function(self, f: str, args: list):
        meaning = self.functions.get((f, len(args)))
        if meaning is None:
            raise ValueError(f"{self.name} - uninterpreted function: {f}/{len(args)}")
        return meaning(*args)

    def apply_predicate(self, p: str, args: list) -> bool:
        meaning = self.predicates.get((p, len(args)))
        if meaning is None:
            raise ValueError(f"{self.name} - uninterpreted predicate: {p}/{len(args)}")
        return bool(meaning(*args))


def term_value(interp: Interpretation, valuation: dict, term):
    """The domain element a term denotes under interp and valuation."""
    def lookup(v):
        if v not in valuation:
            raise ValueError(f"Undefined variable: {v}")
        return valuation[v]

    return fold_term(
        lookup,
        lambda f, args: interp.apply_function(
            f, [term_value(interp, valuation, a) for a in args]),
        term,
    )


def holds_atom(interp: Interpretation, valuation: dict, atom) -> bool:
    def values(ts):
        return [term_value(interp, valuation, t) for t in ts]

    return fold_equate(
        lambda lhs, rhs: bool(interp.equals(*values((lhs, rhs)))),
        lambda p, args: interp.apply_predicate(p, values(args)),
        atom,
    )


def holds(interp: Interpretation, valuation: dict, fm) -> bool:
    """
    Is fm true in interp under valuation?

    ∀ over an empty domain is true and ∃ is false. Free variables of fm
    must be given a value in valuation.
    """
    def quant(q, x, p):
        results = [holds(interp, {**valuation, x: d}, p) for d in interp.domain]
        if q == Quant.FORALL:
            return all(results)
        return any(results)

    def combine(p, op, q):
        left = holds(interp, valuation, p)
        right = holds(interp, valuation, q)
        if op == Connective.AND:
            return left and right
        if op == Connective.OR:
            return left or right
        if op == Connective.IMP:
            return (not left) or right
        return left == right

    return fold_quantified(
        quant,
        combine,
        lambda p: not holds(interp, valuation, p),
        bool,
        lambda a: holds_atom(interp, valuation, a),
        fm,
    )
