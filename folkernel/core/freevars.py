"""
Free variables and universal closure.
"""

from .terms import term_vars
from .atoms import over_terms
from .formulas import fold_quantified, over_atoms, for_all


def atom_free_vars(atom) -> set:
    """Every variable in every term of an atom. Atoms bind nothing."""
    return over_terms(lambda t, acc: acc | term_vars(t), set(), atom)


def free_vars(fm) -> set:
    """
    Variables with at least one occurrence not bound by a quantifier.

    Each node is visited with the set of names bound above it; the walk
    uses an explicit stack, like atoms_of.
    """
    found = set()
    stack = [(fm, frozenset())]
    while stack:
        node, bound = stack.pop()
        fold_quantified(
            lambda _q, x, p: stack.append((p, bound | {x})),
            lambda p, _op, q: stack.extend([(q, bound), (p, bound)]),
            lambda p: stack.append((p, bound)),
            lambda _v: None,
            lambda a: found.update(atom_free_vars(a) - bound),
            node,
        )
    return found


def all_vars(fm) -> set:
    """Every variable occurring in an atom of fm, bound or free."""
    return over_atoms(lambda a, acc: acc | atom_free_vars(a), fm, set())


def generalize(fm):
    """
    Universal closure of fm.

    Binders are added in lexicographic order, smallest name outermost,
    so the result does not depend on set iteration order.
    """
    for name in sorted(free_vars(fm), reverse=True):
        fm = for_all(name, fm)
    return fm
