"""
Text rendering of terms, atoms and formulas.

    ∀x. ∀y. (P(x) ⇒ Q(y)) ⇒ ¬x = y ∨ P(y)

Parentheses are decided by fixity(): a child is wrapped when it binds
more loosely than its parent, or equally loosely on the wrong side.
"""

from .core.terms import fold_term
from .core.atoms import fold_equate
from .core.formulas import (
    Quant, Connective, Associativity, fold_quantified, fixity,
)


QUANT_SYMBOLS = {Quant.FORALL: "∀", Quant.EXISTS: "∃"}

CONNECTIVE_SYMBOLS = {
    Connective.AND: "∧",
    Connective.OR: "∨",
    Connective.IMP: "⇒",
    Connective.IFF: "⇔",
}

_LEFT, _RIGHT = "left", "right"


def render_term(term) -> str:
    def on_apply(f, args):
        if not args:
            return f
        return f"{f}({', '.join(render_term(a) for a in args)})"

    return fold_term(lambda v: v, on_apply, term)


def render_atom(atom) -> str:
    def on_apply(p, args):
        if not args:
            return p
        return f"{p}({', '.join(render_term(a) for a in args)})"

    return fold_equate(
        lambda lhs, rhs: f"{render_term(lhs)} = {render_term(rhs)}",
        on_apply,
        atom,
    )


def _needs_parens(parent, child, side) -> bool:
    if parent is None:
        return False
    if child.precedence != parent.precedence:
        return child.precedence < parent.precedence
    if parent.associativity == Associativity.ASSOC:
        return False
    if parent.associativity == Associativity.RIGHT and side == _RIGHT:
        return False
    if parent.associativity == Associativity.LEFT and side == _LEFT:
        return False
    return True


def _render(fm, parent, side) -> str:
    fix = fixity(fm)

    text = fold_quantified(
        lambda q, x, p: f"{QUANT_SYMBOLS[q]}{x}. {_render(p, fix, _RIGHT)}",
        lambda p, op, r: (f"{_render(p, fix, _LEFT)} {CONNECTIVE_SYMBOLS[op]} "
                          f"{_render(r, fix, _RIGHT)}"),
        lambda p: f"¬{_render(p, fix, _RIGHT)}",
        lambda value: "⊤" if value else "⊥",
        render_atom,
        fm,
    )
    if _needs_parens(parent, fix, side):
        return f"({text})"
    return text


def render_formula(fm) -> str:
    return _render(fm, None, None)


def print_formula(fm, label: str = ""):
    """Print a formula, optionally after a label."""
    if label:
        print(f"{label}: {render_formula(fm)}")
    else:
        print(render_formula(fm))
