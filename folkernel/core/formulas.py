"""
Formulas: truth values, atoms, negation, binary connectives, quantifiers.

    Truth(True)                              -> ⊤
    Atomic(Predicate("P", (x,)))             -> P(x)
    Not(p)                                   -> ¬p
    BinOp(p, Connective.AND, q)              -> p ∧ q
    Quantifier(Quant.FORALL, "x", p)         -> ∀x. p

Each quantifier binds exactly one variable. ∀x y. p is two nested nodes.

fold_quantified is the only place that asks which variant a formula is.
Free variables, substitution, evaluation, the equality compiler and the
renderer are all written as folds, so a new variant only has to be added
here and in the handlers passed to the fold.

Most folds recurse, a few Python frames per level of nesting, so formulas
nested some hundreds of levels deep exceed the interpreter limit in
subst, holds and render_formula. atoms_of (behind over_atoms, atom_union
and formula_functions) and free_vars walk with an explicit stack instead.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Callable, NamedTuple, Optional

from .atoms import apply_predicate, equate, atom_functions


class Quant(Enum):
    FORALL = 0
    EXISTS = 1


class Connective(Enum):
    AND = 0
    OR = 1
    IMP = 2
    IFF = 3


class _Ordered:
    """Structural total order shared by the five formula variants."""

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass(frozen=True, eq=True)
class Truth(_Ordered):
    value: bool

    def sort_key(self):
        return (0, self.value)


@total_ordering
@dataclass(frozen=True, eq=True)
class Atomic(_Ordered):
    atom: object

    def sort_key(self):
        return (1, self.atom.sort_key())


@total_ordering
@dataclass(frozen=True, eq=True)
class Not(_Ordered):
    body: object

    def sort_key(self):
        return (2, self.body.sort_key())


@total_ordering
@dataclass(frozen=True, eq=True)
class BinOp(_Ordered):
    left: object
    op: Connective
    right: object

    def sort_key(self):
        return (3, self.op.value, self.left.sort_key(), self.right.sort_key())


@total_ordering
@dataclass(frozen=True, eq=True)
class Quantifier(_Ordered):
    quant: Quant
    var: str
    body: object

    def sort_key(self):
        return (4, self.quant.value, self.var, self.body.sort_key())


# ── The eliminator ───────────────────────────────────────────────────────────

def fold_quantified(on_quant: Callable, on_binop: Callable, on_not: Callable,
                    on_truth: Callable, on_atomic: Callable, fm):
    """
    on_quant(quant, var, body)
    on_binop(left, connective, right)
    on_not(body)
    on_truth(value)
    on_atomic(atom)
    """
    if isinstance(fm, Quantifier):
        return on_quant(fm.quant, fm.var, fm.body)
    if isinstance(fm, BinOp):
        return on_binop(fm.left, fm.op, fm.right)
    if isinstance(fm, Not):
        return on_not(fm.body)
    if isinstance(fm, Truth):
        return on_truth(fm.value)
    if isinstance(fm, Atomic):
        return on_atomic(fm.atom)
    raise TypeError(f"not a formula: {fm!r}")


# ── Constructors ─────────────────────────────────────────────────────────────

TRUE = Truth(True)
FALSE = Truth(False)


def truth(value: bool) -> Truth:
    return TRUE if value else FALSE


def atomic(atom) -> Atomic:
    return Atomic(atom)


def negate(fm) -> Not:
    return Not(fm)


def binop(left, op: Connective, right) -> BinOp:
    return BinOp(left, op, right)


def quantify(quant: Quant, var: str, body) -> Quantifier:
    return Quantifier(quant, var, body)


def for_all(var: str, body) -> Quantifier:
    return Quantifier(Quant.FORALL, var, body)


def exists(var: str, body) -> Quantifier:
    return Quantifier(Quant.EXISTS, var, body)


def for_all_many(names, body):
    """∀ names[0]. ∀ names[1]. ... body"""
    for name in reversed(list(names)):
        body = for_all(name, body)
    return body


def conj(p, q) -> BinOp:
    return BinOp(p, Connective.AND, q)


def disj(p, q) -> BinOp:
    return BinOp(p, Connective.OR, q)


def implies(p, q) -> BinOp:
    return BinOp(p, Connective.IMP, q)


def iff(p, q) -> BinOp:
    return BinOp(p, Connective.IFF, q)


def pred(name: str, args=()) -> Atomic:
    """The formula P(args)."""
    return Atomic(apply_predicate(name, args))


def eq(lhs, rhs) -> Atomic:
    """The formula lhs = rhs."""
    return Atomic(equate(lhs, rhs))


def conjoin(fms):
    """p1 ∧ (p2 ∧ (... ∧ pn)). Needs at least one formula."""
    fms = list(fms)
    if not fms:
        raise ValueError("conjoin: empty list of formulas")
    result = fms[-1]
    for fm in reversed(fms[:-1]):
        result = conj(fm, result)
    return result


# ── Traversals over atoms ────────────────────────────────────────────────────

def on_atoms(fn: Callable, fm):
    """Rebuild fm with every atom a replaced by the formula fn(a)."""
    return fold_quantified(
        lambda q, x, p: Quantifier(q, x, on_atoms(fn, p)),
        lambda p, op, r: BinOp(on_atoms(fn, p), op, on_atoms(fn, r)),
        lambda p: Not(on_atoms(fn, p)),
        truth,
        fn,
        fm,
    )


def atoms_of(fm) -> list:
    """
    The atoms of fm, left to right, repeats included.

    Walks with an explicit stack, so a long chain of connectives (such as
    the antecedent equalitize builds) does not hit the recursion limit.
    """
    found = []
    stack = [fm]
    while stack:
        node = stack.pop()
        fold_quantified(
            lambda _q, _x, p: stack.append(p),
            lambda p, _op, r: stack.extend([r, p]),
            lambda p: stack.append(p),
            lambda _v: None,
            found.append,
            node,
        )
    return found


def over_atoms(fn: Callable, fm, acc):
    """Right fold of fn(atom, acc) over the atoms of fm, left to right."""
    for atom in reversed(atoms_of(fm)):
        acc = fn(atom, acc)
    return acc


def atom_union(fn: Callable, fm) -> set:
    """Union of the sets fn(atom) over every atom in fm."""
    return over_atoms(lambda a, acc: acc | fn(a), fm, set())


def formula_functions(fm) -> set:
    """Every (function, arity) pair occurring in any term of fm."""
    return atom_union(atom_functions, fm)


def zip_quantified(on_quants: Callable, on_binops: Callable, on_nots: Callable,
                   on_truths: Callable, on_atomics: Callable,
                   fm1, fm2) -> Optional[object]:
    """
    Combine two formulas whose top-level variants agree.

    Each handler receives the parts of both formulas, e.g.
    on_binops(l1, op1, r1, l2, op2, r2). Different variants: None.
    """
    def none(*_):
        return None

    def quants(q1, x1, p1):
        return fold_quantified(
            lambda q2, x2, p2: on_quants(q1, x1, p1, q2, x2, p2),
            none, none, none, none, fm2)

    def binops(l1, op1, r1):
        return fold_quantified(
            none, lambda l2, op2, r2: on_binops(l1, op1, r1, l2, op2, r2),
            none, none, none, fm2)

    def nots(p1):
        return fold_quantified(
            none, none, lambda p2: on_nots(p1, p2), none, none, fm2)

    def truths(v1):
        return fold_quantified(
            none, none, none, lambda v2: on_truths(v1, v2), none, fm2)

    def atomics(a1):
        return fold_quantified(
            none, none, none, none, lambda a2: on_atomics(a1, a2), fm2)

    return fold_quantified(quants, binops, nots, truths, atomics, fm1)


# ── Fixity ───────────────────────────────────────────────────────────────────

class Associativity(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    ASSOC = "assoc"


class Fixity(NamedTuple):
    precedence: int
    associativity: Associativity


_CONNECTIVE_FIXITY = {
    Connective.AND: Fixity(4, Associativity.ASSOC),
    Connective.OR: Fixity(3, Associativity.ASSOC),
    Connective.IMP: Fixity(2, Associativity.RIGHT),
    Connective.IFF: Fixity(1, Associativity.ASSOC),
}


def fixity(fm) -> Fixity:
    """
    Precedence and associativity of the top-level node of fm.

    Higher binds tighter. A quantifier's body extends as far right as
    possible, so it has the loosest precedence of all.
    """
    return fold_quantified(
        lambda _q, _x, _p: Fixity(0, Associativity.RIGHT),
        lambda _p, op, _r: _CONNECTIVE_FIXITY[op],
        lambda _p: Fixity(5, Associativity.RIGHT),
        lambda _v: Fixity(10, Associativity.NONE),
        lambda _a: Fixity(10, Associativity.NONE),
        fm,
    )
