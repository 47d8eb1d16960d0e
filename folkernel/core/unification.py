"""
Robinson unification algorithm with occurs check.

Given two terms, find a substitution that makes them identical --
or report that no such substitution exists. Proof search engines use
this to match literals; the structural comparisons zip_terms and
zip_predicates_eq decide which pairs are even worth trying.

Unifiers are plain dicts, like substitutions, but bindings may refer to
other bound variables: {"X": Var("Y"), "Y": Apply("a", ())}.
resolve_bindings follows those chains; term_subst does not.
"""

from typing import Optional

from .terms import Apply, fold_term, occurs_in, zip_terms
from .atoms import zip_predicates_eq


def resolve_bindings(sub: dict, term):
    """Apply a unifier to a term, following chains of bindings."""
    return fold_term(
        lambda v: resolve_bindings(sub, sub[v]) if v in sub else term,
        lambda f, args: Apply(f, tuple(resolve_bindings(sub, a) for a in args)),
        term,
    )


def _bind(sub: dict, name: str, term) -> Optional[dict]:
    if occurs_in(name, term):
        return None  # occurs check: x unify f(x) is unsound
    sub = dict(sub)
    sub[name] = term
    return sub


def unify_terms(t1, t2, sub=None) -> Optional[dict]:
    """
    Unify two terms under substitution sub.

    Returns the extended substitution dict, or None if unification fails.
    """
    if sub is None:
        sub = {}

    t1 = resolve_bindings(sub, t1)
    t2 = resolve_bindings(sub, t2)

    if t1 == t2:
        return sub

    def applies(f1, args1, f2, args2):
        if f1 != f2:
            return None  # different functor
        return unify_pairs(list(zip(args1, args2)), sub)

    def left_application(f1, args1):
        # t2 may still be a variable; arity mismatch is None from zip.
        return fold_term(
            lambda v2: _bind(sub, v2, t1),
            lambda _f2, _args2: zip_terms(lambda _v1, _v2: None, applies, t1, t2),
            t2,
        )

    return fold_term(lambda v1: _bind(sub, v1, t2), left_application, t1)


def unify_pairs(pairs, sub=None) -> Optional[dict]:
    """Unify each (s, t) pair in turn, threading the substitution."""
    if sub is None:
        sub = {}
    for s, t in pairs:
        sub = unify_terms(s, t, sub)
        if sub is None:
            return None
    return sub


def unify_atoms(a1, a2, sub=None) -> Optional[dict]:
    """
    Unify two atoms of the same shape.

    Equations unify side by side (no symmetry is assumed). Applications
    need the same predicate and arity.
    """
    if sub is None:
        sub = {}
    return zip_predicates_eq(
        lambda l1, r1, l2, r2: unify_pairs([(l1, l2), (r1, r2)], sub),
        lambda _p, pairs: unify_pairs(pairs, sub),
        a1, a2,
    )


