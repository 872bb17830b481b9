"""
First-order terms.

A term is either a Variable or a Functor applied to a tuple of argument
terms. A 0-ary functor is a constant. Both are frozen dataclasses: terms
are values, and substitution or renaming always builds new terms.

Naming convention (as in TPTP):
    name starting with uppercase -> Variable:  X, Y, Foo
    anything else                -> Functor:   a, f(X), $true, $false
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Variable:
    """A universally quantified variable."""
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Functor:
    """A function symbol applied to arguments. Constants have no arguments."""
    name: str
    args: tuple = ()

    @property
    def arity(self) -> int:
        return len(self.args)

    def __str__(self):
        if not self.args:
            return self.name
        return f"{self.name}({','.join(str(a) for a in self.args)})"


Term = Union[Variable, Functor]


def is_variable(term) -> bool:
    return isinstance(term, Variable)


def is_compound(term) -> bool:
    """Functor applications with at least one argument."""
    return isinstance(term, Functor) and len(term.args) > 0


def is_variable_name(name: str) -> bool:
    """Variables start with uppercase. Everything else names a functor."""
    return len(name) > 0 and name[0].isupper()


def make_term(name: str, *args) -> Term:
    """
    Build a term from a name, following the case convention.

        make_term("X")             -> Variable("X")
        make_term("f", X, "a")     -> f(X, a)   (string args are converted)
    """
    if is_variable_name(name):
        if args:
            raise ValueError(f"variable {name} cannot take arguments")
        return Variable(name)
    return Functor(name, tuple(make_term(a) if isinstance(a, str) else a
                               for a in args))


def term_vars(term, acc=None) -> list:
    """All variable occurrences in term, left to right (duplicates kept)."""
    if acc is None:
        acc = []
    if isinstance(term, Variable):
        acc.append(term)
    else:
        for arg in term.args:
            term_vars(arg, acc)
    return acc


def is_ground(term) -> bool:
    if isinstance(term, Variable):
        return False
    return all(is_ground(arg) for arg in term.args)


def term_weight(term, fweight: int, vweight: int) -> int:
    """
    Symbol-count weight: fweight per functor occurrence, vweight per
    variable occurrence.

        f(a,b) with (2,1) -> 6
        f(X,Y) with (2,1) -> 4
    """
    if isinstance(term, Variable):
        return vweight
    return fweight + sum(term_weight(arg, fweight, vweight) for arg in term.args)


def subterm(term, position) -> Optional[Term]:
    """
    Return the subterm at position (a sequence of 0-based argument
    indices), or None if the position does not exist in term.
    """
    for index in position:
        if isinstance(term, Variable) or not 0 <= index < len(term.args):
            return None
        term = term.args[index]
    return term
