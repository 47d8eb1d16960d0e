"""
folkernel: the symbolic core of a first-order logic toolkit.

Terms, atoms and formulas with one fold each; free variables and
capture-avoiding substitution; truth in finite interpretations; and
equalitize(), which compiles equality into explicit axioms so that a
prover without native equality can use the formula.

Usage:
    python -m folkernel --domain mod_inverse
    python -m folkernel --domain ewd
    python -m folkernel --domain wishnu --quiet
"""

from .core.terms import (
    Var, Apply, variable, apply_function, constant, fold_term,
    functions_of, zip_terms, variant, variants,
)
from .core.atoms import (
    Predicate, Equation, apply_predicate, equate, make_atom,
    fold_predicate, fold_equate, is_equate, zip_predicates, zip_predicates_eq,
)
from .core.formulas import (
    Quant, Connective, Truth, Atomic, Not, BinOp, Quantifier,
    fold_quantified, truth, atomic, negate, binop, quantify,
    for_all, exists, conj, disj, implies, iff, pred, eq, conjoin,
    formula_functions, fixity,
)
from .core.freevars import free_vars, generalize
from .core.substitution import subst, term_subst, atom_subst
from .core.unification import unify_terms, unify_atoms
from .semantics import Interpretation, term_value, holds
from .inference.equal import (
    equalitize, equivalence_axioms, function_congruence, predicate_congruence,
)
from .render import render_term, render_atom, render_formula, print_formula

__all__ = [
    "Var", "Apply", "variable", "apply_function", "constant", "fold_term",
    "functions_of", "zip_terms", "variant", "variants",
    "Predicate", "Equation", "apply_predicate", "equate", "make_atom",
    "fold_predicate", "fold_equate", "is_equate",
    "zip_predicates", "zip_predicates_eq",
    "Quant", "Connective", "Truth", "Atomic", "Not", "BinOp", "Quantifier",
    "fold_quantified", "truth", "atomic", "negate", "binop", "quantify",
    "for_all", "exists", "conj", "disj", "implies", "iff", "pred", "eq",
    "conjoin", "formula_functions", "fixity",
    "free_vars", "generalize",
    "subst", "term_subst", "atom_subst",
    "unify_terms", "unify_atoms",
    "Interpretation", "term_value", "holds",
    "equalitize", "equivalence_axioms", "function_congruence",
    "predicate_congruence",
    "render_term", "render_atom", "render_formula", "print_formula",
]
