"""
Subsumption: deleting clauses that say less than one we already have.

C subsumes D if C has no more literals than D and a single substitution
sigma maps every literal of C onto some literal of D, in any order. D is
then redundant: anything derivable with D is derivable with C.

Forward subsumption drops a new given clause that an old clause already
covers. Backward subsumption drops old clauses the new one covers.
"""

from ..core.clauses import Clause
from ..core.substitution import Substitution


def _subsume_literals(subsumer: tuple, subsumed: tuple, subst: Substitution) -> bool:
    """Backtracking search: match subsumer[0], then the rest under the extended subst."""
    if not subsumer:
        return True
    first, rest = subsumer[0], subsumer[1:]
    for candidate in subsumed:
        mark = subst.mark()
        if first.match(candidate, subst):
            if _subsume_literals(rest, subsumed, subst):
                return True
        subst.backtrack(mark)
    return False


def subsumes(subsumer: Clause, subsumed: Clause) -> bool:
    """Does subsumer subsume subsumed?"""
    if len(subsumer.literals) > len(subsumed.literals):
        return False
    return _subsume_literals(subsumer.literals, subsumed.literals, Substitution())


def forward_subsumption(clauses, clause: Clause) -> bool:
    """True if some member of clauses subsumes clause."""
    return any(subsumes(candidate, clause) for candidate in clauses)


def backward_subsumption(clause: Clause, clauses) -> int:
    """Remove every member of clauses that clause subsumes. Returns how many."""
    subsumed = [candidate for candidate in clauses if subsumes(clause, candidate)]
    for candidate in subsumed:
        clauses.extract_clause(candidate)
    return len(subsumed)
