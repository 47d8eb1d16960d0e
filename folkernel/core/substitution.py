"""
Capture-avoiding substitution.

A substitution is a plain dict from variable names to terms:
    {"y": Var("x"), "z": Apply("f", (Var("x"),))}

Unmapped variables are left alone. Replacement terms are inserted as they
are; they are not substituted into again (unlike the chain-following
bindings used by unification).

Under a quantifier ∀x. p the binder shadows any binding for x. If a
replacement term for some other free variable of p mentions x, pushing
the substitution inside would capture it, so the binder is renamed to a
fresh variant of x first:

    subst({"y": x}, ∀x. x = y)   ==   ∀x'. x' = x
"""

from typing import Callable

from .terms import Var, Apply, fold_term, occurs_in, variant
from .atoms import on_terms
from .formulas import (
    Quantifier, BinOp, Not, Atomic, fold_quantified, on_atoms, truth,
)
from .freevars import free_vars


def term_subst(sub: dict, term):
    """Replace variable leaves found in sub. One pass, no chasing."""
    return fold_term(
        lambda v: sub.get(v, term),
        lambda f, args: Apply(f, tuple(term_subst(sub, a) for a in args)),
        term,
    )


def atom_subst(sub: dict, atom):
    """Substitute into every term of an atom, keeping its shape."""
    return on_terms(lambda t: term_subst(sub, t), atom)


def subst(sub: dict, fm):
    """Apply sub to the free variables of fm, renaming binders as needed."""
    return fold_quantified(
        lambda q, x, p: _subst_quantifier(sub, q, x, p),
        lambda p, op, r: BinOp(subst(sub, p), op, subst(sub, r)),
        lambda p: Not(subst(sub, p)),
        truth,
        lambda a: Atomic(atom_subst(sub, a)),
        fm,
    )


def _subst_quantifier(sub: dict, quant, x: str, body):
    inner = {k: v for k, v in sub.items() if k != x}

    captured = any(
        occurs_in(x, inner.get(y, Var(y)))
        for y in free_vars(body) - {x}
    )
    if captured:
        x_new = variant(x, free_vars(subst(inner, body)))
    else:
        x_new = x

    inner[x] = Var(x_new)
    return Quantifier(quant, x_new, subst(inner, body))


def on_formula(fn: Callable, fm):
    """Apply a term-to-term function to the top-level terms of every atom."""
    return on_atoms(lambda a: Atomic(on_terms(fn, a)), fm)
