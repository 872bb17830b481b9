"""
Literals: a signed atom.

The atom is a Functor term whose name is the predicate symbol. Equations
use the synthetic binary predicate "=", so a=b is Functor("=", (a, b)).
A negative equation prints as a!=b.

    Literal(p(X))                 ->  p(X)
    Literal(p(X), negative=True)  -> ~p(X)
"""

from dataclasses import dataclass

from .terms import Functor, term_vars, term_weight
from .unification import match_terms

EQUALITY = "="


@dataclass(frozen=True)
class Literal:
    atom: Functor
    negative: bool = False

    @property
    def predicate(self) -> tuple:
        """(name, arity) of the atom. Resolution candidates must agree on this."""
        return (self.atom.name, len(self.atom.args))

    def is_positive(self) -> bool:
        return not self.negative

    def is_negative(self) -> bool:
        return self.negative

    def is_equational(self) -> bool:
        return self.atom.name == EQUALITY and len(self.atom.args) == 2

    def negate(self) -> "Literal":
        return Literal(self.atom, not self.negative)

    def is_opposite(self, other: "Literal") -> bool:
        """Same atom, different polarity."""
        return self.negative != other.negative and self.atom == other.atom

    def instantiate(self, subst) -> "Literal":
        return Literal(subst.apply(self.atom), self.negative)

    def collect_vars(self) -> set:
        return set(term_vars(self.atom))

    def weight(self, fweight: int, vweight: int) -> int:
        """Symbol-count weight of the atom. "=" counts as one function symbol."""
        return term_weight(self.atom, fweight, vweight)

    def match(self, other: "Literal", subst) -> bool:
        """
        One-way match: extend subst so this literal becomes other.
        Polarity must agree. subst is unchanged on failure.
        """
        if self.negative != other.negative:
            return False
        return match_terms(self.atom, other.atom, subst)

    def __str__(self):
        if self.is_equational():
            lhs, rhs = self.atom.args
            op = "!=" if self.negative else "="
            return f"{lhs}{op}{rhs}"
        return ("~" if self.negative else "") + str(self.atom)
