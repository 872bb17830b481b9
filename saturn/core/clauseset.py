"""
ClauseSet: an ordered multiset of clauses.

Used for the processed clauses of a proof search and as the container the
TPTP reader returns. Membership is by identity: two clauses with the same
literals are still two entries.
"""

from .clauses import Clause


class ClauseSet:

    def __init__(self, clauses=()):
        self.clauses = []
        self.add_all(clauses)

    def add(self, clause: Clause):
        self.clauses.append(clause)

    def add_all(self, clauses):
        for clause in clauses:
            self.add(clause)

    def extract_clause(self, clause: Clause) -> Clause:
        """Remove this exact clause. Raises ValueError if it is not in the set."""
        for i, candidate in enumerate(self.clauses):
            if candidate is clause:
                del self.clauses[i]
                return clause
        raise ValueError(f"{clause.name} is not in this clause set")

    def extract_first(self):
        """Remove and return the oldest clause, or None when empty."""
        if not self.clauses:
            return None
        return self.clauses.pop(0)

    def get(self, index: int) -> Clause:
        return self.clauses[index]

    def get_resolution_literals(self, lit) -> list:
        """
        Every (clause, index) whose literal could resolve with lit:
        opposite polarity, same predicate symbol and arity.
        """
        result = []
        for clause in self.clauses:
            for i, candidate in enumerate(clause.literals):
                if candidate.negative != lit.negative and candidate.predicate == lit.predicate:
                    result.append((clause, i))
        return result

    def by_name(self) -> dict:
        return {clause.name: clause for clause in self.clauses}

    def copy(self) -> "ClauseSet":
        return ClauseSet(self.clauses)

    def __len__(self):
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def __str__(self):
        return "\n".join(str(clause) for clause in self.clauses)
