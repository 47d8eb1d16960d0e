from .terms import (
    Var, Apply, variable, apply_function, constant, fold_term, is_variable,
    functions_of, term_vars, occurs_in, zip_terms, variant, variants,
)
from .atoms import (
    Predicate, Equation, EQUALS, RESERVED_PREDICATES,
    apply_predicate, equate, make_atom, fold_predicate, fold_equate, is_equate,
    atom_terms, over_terms, on_terms, atom_functions,
    zip_predicates, zip_predicates_eq,
)
from .formulas import (
    Quant, Connective, Truth, Atomic, Not, BinOp, Quantifier, TRUE, FALSE,
    fold_quantified, truth, atomic, negate, binop, quantify,
    for_all, exists, for_all_many, conj, disj, implies, iff, pred, eq, conjoin,
    on_atoms, atoms_of, over_atoms, atom_union, formula_functions, zip_quantified,
    Associativity, Fixity, fixity,
)
from .freevars import free_vars, atom_free_vars, all_vars, generalize
from .substitution import subst, term_subst, atom_subst, on_formula
from .unification import resolve_bindings, unify_terms, unify_pairs, unify_atoms

__all__ = [
    "Var", "Apply", "variable", "apply_function", "constant", "fold_term",
    "is_variable", "functions_of", "term_vars", "occurs_in", "zip_terms",
    "variant", "variants",
    "Predicate", "Equation", "EQUALS", "RESERVED_PREDICATES",
    "apply_predicate", "equate", "make_atom", "fold_predicate", "fold_equate",
    "is_equate", "atom_terms", "over_terms", "on_terms", "atom_functions",
    "zip_predicates", "zip_predicates_eq",
    "Quant", "Connective", "Truth", "Atomic", "Not", "BinOp", "Quantifier",
    "TRUE", "FALSE", "fold_quantified", "truth", "atomic", "negate", "binop",
    "quantify", "for_all", "exists", "for_all_many", "conj", "disj", "implies",
    "iff", "pred", "eq", "conjoin", "on_atoms", "atoms_of", "over_atoms", "atom_union",
    "formula_functions", "zip_quantified", "Associativity", "Fixity", "fixity",
    "free_vars", "atom_free_vars", "all_vars", "generalize",
    "subst", "term_subst", "atom_subst", "on_formula",
    "resolve_bindings", "unify_terms", "unify_pairs", "unify_atoms",
]
