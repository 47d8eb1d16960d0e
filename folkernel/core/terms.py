"""
Terms: variables and function applications.

    Var("x")                         -> x
    Apply("f", (Var("x"), c))        -> f(x, c)
    Apply("c", ())                   -> the constant c

Variables and symbols are plain strings. A function symbol carries no
fixed arity: the arity of an occurrence is the length of its argument
tuple, and the same name may appear with several arities.

Everything here goes through fold_term. Nothing else looks at which
kind of term it was handed.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Callable, Optional


@total_ordering
@dataclass(frozen=True, eq=True)
class Var:
    """A variable leaf."""
    name: str

    def sort_key(self):
        return (0, self.name)

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass(frozen=True, eq=True)
class Apply:
    """A function symbol applied to a tuple of terms. No args: a constant."""
    function: str
    args: tuple = ()

    def sort_key(self):
        return (1, self.function, tuple(arg.sort_key() for arg in self.args))

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


def variable(name: str) -> Var:
    return Var(name)


def apply_function(function: str, args=()) -> Apply:
    """Build f(args). Any iterable of terms is accepted."""
    return Apply(function, tuple(args))


def constant(name: str) -> Apply:
    return Apply(name, ())


def fold_term(on_var: Callable, on_apply: Callable, term):
    """
    The eliminator for terms.

    on_var(name)             for a variable
    on_apply(function, args) for an application
    """
    if isinstance(term, Var):
        return on_var(term.name)
    if isinstance(term, Apply):
        return on_apply(term.function, term.args)
    raise TypeError(f"not a term: {term!r}")


def is_variable(term) -> bool:
    return fold_term(lambda _: True, lambda _f, _args: False, term)


def functions_of(term) -> set:
    """Every (function, arity) pair occurring anywhere in term."""
    def on_apply(f, args):
        found = {(f, len(args))}
        for arg in args:
            found |= functions_of(arg)
        return found

    return fold_term(lambda _: set(), on_apply, term)


def term_vars(term) -> set:
    """The variable leaves of a term."""
    return fold_term(
        lambda v: {v},
        lambda _f, args: set().union(*(term_vars(a) for a in args)),
        term,
    )


def occurs_in(name: str, term) -> bool:
    """Does variable `name` occur anywhere in term?"""
    return fold_term(
        lambda v: v == name,
        lambda _f, args: any(occurs_in(name, a) for a in args),
        term,
    )


def zip_terms(on_vars: Callable, on_applies: Callable, t1, t2) -> Optional[object]:
    """
    Combine two terms of the same shape.

    on_vars(v1, v2)                 when both are variables
    on_applies(f1, args1, f2, args2) when both are applications with the
                                    same number of arguments

    Anything else is no match: None.
    """
    def var_case(v1):
        return fold_term(lambda v2: on_vars(v1, v2), lambda _f, _a: None, t2)

    def apply_case(f1, args1):
        def other(f2, args2):
            if len(args1) != len(args2):
                return None
            return on_applies(f1, args1, f2, args2)
        return fold_term(lambda _: None, other, t2)

    return fold_term(var_case, apply_case, t1)


# ── Fresh names ──────────────────────────────────────────────────────────────

def variant(name: str, forbidden) -> str:
    """
    A name based on `name` that is not in `forbidden`.

    Appends a prime until the result is free. Returns `name` itself if it
    is already free. Terminates because `forbidden` is finite.
    """
    while name in forbidden:
        name = name + "'"
    return name


def variants(name: str):
    """Yield name, then successive variants of it, forever."""
    seen = set()
    while True:
        name = variant(name, seen)
        yield name
        seen.add(name)
