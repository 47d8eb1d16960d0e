"""
Atoms: predicate applications and equations.

    Predicate("P", (x, y))   -> P(x, y)
    Equation(s, t)           -> s = t

Equality gets its own shape instead of being a predicate called "=".
The names "=", "True" and "False" are reserved: apply_predicate refuses
them, so an equation can only be built through equate().

Two eliminators, matching the two ways a consumer may look at atoms:
    fold_predicate  -- everything is an application (an equation is "=")
    fold_equate     -- equations and applications are told apart
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Callable, Optional

from .terms import functions_of


EQUALS = "="
RESERVED_PREDICATES = frozenset({EQUALS, "True", "False"})


@total_ordering
@dataclass(frozen=True, eq=True)
class Predicate:
    name: str
    args: tuple = ()

    def sort_key(self):
        return (0, self.name, tuple(a.sort_key() for a in self.args))

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass(frozen=True, eq=True)
class Equation:
    lhs: object
    rhs: object

    def sort_key(self):
        return (1, self.lhs.sort_key(), self.rhs.sort_key())

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


def apply_predicate(name: str, args=()) -> Predicate:
    """Build P(args). Reserved names are a modeling error."""
    if name in RESERVED_PREDICATES:
        raise ValueError(f"bad predicate name: {name!r} is reserved")
    return Predicate(name, tuple(args))


def equate(lhs, rhs) -> Equation:
    return Equation(lhs, rhs)


def make_atom(name: str, args=()):
    """
    Build an atom from a symbol and an argument list.

    "=" must be applied to exactly two terms and yields an Equation.
    Every other name goes through apply_predicate.
    """
    args = tuple(args)
    if name == EQUALS:
        if len(args) != 2:
            raise ValueError(f"equate arity error: '=' applied to {len(args)} arguments")
        return Equation(args[0], args[1])
    return apply_predicate(name, args)


def fold_equate(on_equation: Callable, on_apply: Callable, atom):
    """
    on_equation(lhs, rhs)  for s = t
    on_apply(name, args)   for P(args)
    """
    if isinstance(atom, Equation):
        return on_equation(atom.lhs, atom.rhs)
    if isinstance(atom, Predicate):
        return on_apply(atom.name, atom.args)
    raise TypeError(f"not an atom: {atom!r}")


def fold_predicate(on_apply: Callable, atom):
    """View every atom as an application; an equation is "=" on two terms."""
    return fold_equate(
        lambda lhs, rhs: on_apply(EQUALS, (lhs, rhs)),
        on_apply,
        atom,
    )


def is_equate(atom) -> bool:
    return fold_equate(lambda _l, _r: True, lambda _p, _ts: False, atom)


def atom_terms(atom) -> tuple:
    """The top-level argument terms of an atom, left to right."""
    return fold_predicate(lambda _p, args: tuple(args), atom)


def over_terms(fn: Callable, acc, atom):
    """Right fold of fn(term, acc) over the top-level terms of an atom."""
    for term in reversed(atom_terms(atom)):
        acc = fn(term, acc)
    return acc


def on_terms(fn: Callable, atom):
    """Rebuild an atom with fn applied to each top-level term. Shape is kept."""
    return fold_equate(
        lambda lhs, rhs: equate(fn(lhs), fn(rhs)),
        lambda p, args: Predicate(p, tuple(fn(a) for a in args)),
        atom,
    )


def atom_functions(atom) -> set:
    return over_terms(lambda t, acc: acc | functions_of(t), set(), atom)


def zip_predicates(fn: Callable, atom1, atom2) -> Optional[object]:
    """
    fn(name, [(t1, t2), ...]) when both atoms apply the same symbol to the
    same number of arguments. None otherwise.
    """
    def first(p1, ts1):
        def second(p2, ts2):
            if p1 != p2 or len(ts1) != len(ts2):
                return None
            return fn(p1, list(zip(ts1, ts2)))
        return fold_predicate(second, atom2)

    return fold_predicate(first, atom1)


def zip_predicates_eq(on_equations: Callable, on_applies: Callable,
                      atom1, atom2) -> Optional[object]:
    """
    on_equations(l1, r1, l2, r2)      when both atoms are equations
    on_applies(name, [(t1, t2), ...]) when both are applications of the
                                      same symbol with the same arity

    Mixed shapes are no match: None.
    """
    def eq_case(l1, r1):
        return fold_equate(
            lambda l2, r2: on_equations(l1, r1, l2, r2),
            lambda _p, _ts: None,
            atom2,
        )

    def apply_case(p1, ts1):
        def second(p2, ts2):
            if p1 != p2 or len(ts1) != len(ts2):
                return None
            return on_applies(p1, list(zip(ts1, ts2)))
        return fold_equate(lambda _l, _r: None, second, atom2)

    return fold_equate(eq_case, apply_case, atom1)
