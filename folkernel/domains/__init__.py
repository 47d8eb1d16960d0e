"""
Domain registry.

Each domain is a dict describing a worked example:
    make_formula:  () -> formula
    make_models:   (max_modulus) -> list[Interpretation]   [optional]
    description:   str

Domains with models are checked with holds() in every model. The others
are run through equalitize() to show the axioms an equality-free prover
would need.
"""

from .arithmetic import (
    bool_interp, mod_interp, mod_models, bool_models,
    make_bool_cover_formula, make_mod_cover_formula, make_mod_inverse_formula,
    make_all_zero_formula, make_each_zero_formula,
)
from .equality import (
    make_ewd_formula, make_wishnu_formula, make_group_inverse_formula,
)


DOMAINS = {
    "bool_cover": {
        "make_formula": make_bool_cover_formula,
        "make_models":  bool_models,
        "description":  "Every boolean is False or True",
    },
    "mod_cover": {
        "make_formula": make_mod_cover_formula,
        "make_models":  mod_models,
        "description":  "Every residue is 0 or 1 (true modulo 1 and 2 only)",
    },
    "mod_inverse": {
        "make_formula": make_mod_inverse_formula,
        "make_models":  mod_models,
        "description":  "Nonzero residues are invertible (true modulo primes)",
    },
    "all_zero": {
        "make_formula": make_all_zero_formula,
        "make_models":  mod_models,
        "description":  "(∀x. x = 0) ⇒ 1 = 0: true in every model",
    },
    "each_zero": {
        "make_formula": make_each_zero_formula,
        "make_models":  mod_models,
        "description":  "∀x. x = 0 ⇒ 1 = 0: true modulo 1 only",
    },
    "ewd": {
        "make_formula": make_ewd_formula,
        "description":  "EWD1266a: a one-element g-set inside f",
    },
    "wishnu": {
        "make_formula": make_wishnu_formula,
        "description":  "Unique fixpoints of f∘g and g∘f",
    },
    "group_inverse": {
        "make_formula": make_group_inverse_formula,
        "description":  "Group theory: left inverse and left identity give a right inverse",
    },
}
