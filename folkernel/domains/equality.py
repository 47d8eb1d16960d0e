"""
Domain: problems stated with equality.

Each formula here uses = and is meant to be handed to equalitize()
before an equality-free prover sees it.

ewd            -- Dijkstra's EWD1266a: if every f is a g and at most one
                  thing is a g, then every g that exists is an f
wishnu         -- Wishnu Prasetya: a unique fixpoint of f∘g exists iff a
                  unique fixpoint of g∘f does
group_inverse  -- right inverses from left inverse and left identity
"""

from ..core.terms import Var, constant, apply_function
from ..core.formulas import (
    for_all, exists, conj, implies, iff, pred, eq,
)


x, y, z = Var("x"), Var("y"), Var("z")


def f(t):
    return apply_function("f", [t])


def g(t):
    return apply_function("g", [t])


def make_ewd_formula():
    """
    (∀x. f(x) ⇒ g(x)) ∧ (∃x. f(x)) ∧ (∀x y. g(x) ∧ g(y) ⇒ x = y)
        ⇒ ∀y. g(y) ⇒ f(y)

    f and g are predicates here.
    """
    fx, gx = pred("f", [x]), pred("g", [x])
    fy, gy = pred("f", [y]), pred("g", [y])
    return implies(
        conj(for_all("x", implies(fx, gx)),
             conj(exists("x", fx),
                  for_all("x", for_all("y", implies(conj(gx, gy), eq(x, y)))))),
        for_all("y", implies(gy, fy)),
    )


def make_wishnu_formula():
    """
    (∃x. x = f(g(x)) ∧ ∀x'. x' = f(g(x')) ⇒ x = x')
        ⇔ (∃y. y = g(f(y)) ∧ ∀y'. y' = g(f(y')) ⇒ y = y')
    """
    x1, y1 = Var("x'"), Var("y'")
    return iff(
        exists("x", conj(eq(x, f(g(x))),
                         for_all("x'", implies(eq(x1, f(g(x1))), eq(x, x1))))),
        exists("y", conj(eq(y, g(f(y))),
                         for_all("y'", implies(eq(y1, g(f(y1))), eq(y, y1))))),
    )


def make_group_inverse_formula():
    """
    (∀x y z. x * (y * z) = (x * y) * z) ∧ (∀x. 1 * x = x) ∧ (∀x. i(x) * x = 1)
        ⇒ ∀x. x * i(x) = 1
    """
    def times(a, b):
        return apply_function("*", [a, b])

    def inv(a):
        return apply_function("i", [a])

    one = constant("1")
    return implies(
        conj(conj(for_all("x", for_all("y", for_all("z",
                      eq(times(x, times(y, z)), times(times(x, y), z))))),
                  for_all("x", eq(times(one, x), x))),
             for_all("x", eq(times(inv(x), x), one))),
        for_all("x", eq(times(x, inv(x)), one)),
    )
