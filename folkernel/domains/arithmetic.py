"""
Domain: small arithmetic models.

Two stock interpretations for checking formulas by brute force:

    bool_interp     domain {False, True}, + is xor, * is and
    mod_interp(n)   domain {0..n-1}, + and * modulo n

and a few formulas whose truth depends on the model. The classic one:

    ∀x. ¬(x = 0) ⇒ ∃y. x * y = 1

holds in mod_interp(n) exactly when n is 1 or a prime.
"""

from ..core.terms import Var, constant, apply_function
from ..core.formulas import for_all, exists, disj, implies, negate, eq
from ..semantics import Interpretation


def bool_interp() -> Interpretation:
    return Interpretation(
        domain=[False, True],
        functions={
            ("False", 0): lambda: False,
            ("True", 0): lambda: True,
            ("+", 2): lambda x, y: x != y,
            ("*", 2): lambda x, y: x and y,
        },
        name="bool_interp",
    )


def mod_interp(n: int) -> Interpretation:
    return Interpretation(
        domain=list(range(n)),
        functions={
            ("0", 0): lambda: 0,
            ("1", 0): lambda: 1 % n,
            ("+", 2): lambda x, y: (x + y) % n,
            ("*", 2): lambda x, y: (x * y) % n,
        },
        name="mod_interp",
    )


X, Y = Var("x"), Var("y")
ZERO, ONE = constant("0"), constant("1")


def times(a, b):
    return apply_function("*", [a, b])


def make_bool_cover_formula():
    """∀x. x = False ∨ x = True"""
    return for_all("x", disj(eq(X, constant("False")), eq(X, constant("True"))))


def make_mod_cover_formula():
    """∀x. x = 0 ∨ x = 1 -- true modulo 1 and 2 only."""
    return for_all("x", disj(eq(X, ZERO), eq(X, ONE)))


def make_mod_inverse_formula():
    """∀x. ¬(x = 0) ⇒ ∃y. x * y = 1 -- every nonzero element is invertible."""
    return for_all("x", implies(negate(eq(X, ZERO)),
                                exists("y", eq(times(X, Y), ONE))))


def make_all_zero_formula():
    """(∀x. x = 0) ⇒ 1 = 0"""
    return implies(for_all("x", eq(X, ZERO)), eq(ONE, ZERO))


def make_each_zero_formula():
    """∀x. x = 0 ⇒ 1 = 0 -- the quantifier now covers the implication."""
    return for_all("x", implies(eq(X, ZERO), eq(ONE, ZERO)))


def mod_models(max_modulus: int = 45) -> list:
    return [mod_interp(n) for n in range(1, max_modulus + 1)]


def bool_models(max_modulus: int = 45) -> list:
    return [bool_interp()]
