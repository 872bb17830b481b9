"""
Clauses and per-run naming.

A Clause is a disjunction of literals plus its provenance: where it came
from (support: the names of its parent clauses), how (rationale), and the
substitution applied when it was derived. The empty clause prints as $false
and means contradiction -> proof found.

Clauses are immutable. Every operation that changes literals or names
returns a new Clause; a clause keeps its name and provenance across
renaming, so proof reconstruction can always look parents up by name.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .terms import Variable
from .literals import Literal
from .substitution import Substitution

AXIOM = "axiom"
NEGATED_CONJECTURE = "negated_conjecture"
PLAIN = "plain"

CLAUSE_TYPES = (AXIOM, NEGATED_CONJECTURE, PLAIN)


def normalize_type(role: str) -> str:
    """Map a TPTP role to one of the three clause types we keep."""
    return role if role in (AXIOM, NEGATED_CONJECTURE) else PLAIN


class NamingContext:
    """
    Clause names and fresh variables for one prover run.

    Generated clause names are c1, c2, ... and never collide with input
    names claimed earlier. Fresh variables are X1, X2, ...
    """

    def __init__(self, clause_prefix: str = "c", var_prefix: str = "X"):
        self.clause_prefix = clause_prefix
        self.var_prefix = var_prefix
        self._clause_counter = 0
        self._var_counter = 0
        self._used = set()

    def new_name(self) -> str:
        while True:
            self._clause_counter += 1
            name = f"{self.clause_prefix}{self._clause_counter}"
            if name not in self._used:
                self._used.add(name)
                return name

    def claim(self, name: str) -> str:
        """Reserve an input name. A taken name gets a _2, _3, ... suffix."""
        candidate, n = name, 1
        while candidate in self._used:
            n += 1
            candidate = f"{name}_{n}"
        self._used.add(candidate)
        return candidate

    def fresh_var(self) -> Variable:
        self._var_counter += 1
        return Variable(f"{self.var_prefix}{self._var_counter}")


@dataclass(frozen=True, eq=False)
class Clause:
    literals: tuple = ()
    name: str = ""
    type: str = PLAIN
    support: tuple = ()
    rationale: str = "input"
    subst: Optional[Substitution] = None

    # ── Shape ──────────────────────────────────────────────────────────────

    @property
    def length(self) -> int:
        return len(self.literals)

    def __len__(self):
        return len(self.literals)

    def is_empty(self) -> bool:
        return not self.literals

    def is_unit(self) -> bool:
        return len(self.literals) == 1

    def is_horn(self) -> bool:
        return sum(1 for lit in self.literals if lit.is_positive()) <= 1

    def get_literal(self, index: int) -> Literal:
        return self.literals[index]

    def collect_vars(self) -> set:
        result = set()
        for lit in self.literals:
            result |= lit.collect_vars()
        return result

    def weight(self, fweight: int, vweight: int) -> int:
        return sum(lit.weight(fweight, vweight) for lit in self.literals)

    # ── Simplification ─────────────────────────────────────────────────────

    def remove_dup_lits(self) -> "Clause":
        """Drop repeated literals, keeping first occurrences in order."""
        seen = []
        for lit in self.literals:
            if lit not in seen:
                seen.append(lit)
        if len(seen) == len(self.literals):
            return self
        return replace(self, literals=tuple(seen))

    def is_tautology(self) -> bool:
        """True if the clause contains some atom both positively and negatively."""
        for i, lit in enumerate(self.literals):
            for other in self.literals[i + 1:]:
                if lit.is_opposite(other):
                    return True
        return False

    # ── Renaming ───────────────────────────────────────────────────────────

    def instantiate(self, subst) -> "Clause":
        return replace(self, literals=tuple(lit.instantiate(subst) for lit in self.literals))

    def fresh_var_copy(self, naming: NamingContext) -> "Clause":
        """Copy with every variable replaced by a fresh one. Name and provenance are kept."""
        renaming = Substitution()
        for lit in self.literals:
            for var in sorted(lit.collect_vars(), key=lambda v: v.name):
                if var not in renaming:
                    renaming.add_binding(var, naming.fresh_var())
        return self.instantiate(renaming)

    def with_name(self, name: str) -> "Clause":
        return replace(self, name=name)

    def with_support(self, support) -> "Clause":
        return replace(self, support=tuple(support))

    # ── Printing ───────────────────────────────────────────────────────────

    def literals_str(self) -> str:
        if not self.literals:
            return "$false"
        return "|".join(str(lit) for lit in self.literals)

    def justification(self) -> str:
        if not self.support:
            return f"[{self.rationale}]"
        return f"[{self.rationale}: {', '.join(self.support)}]"

    def __str__(self):
        return f"cnf({self.name},{self.type},{self.literals_str()})."

    def __repr__(self):
        return f"Clause({self})"
