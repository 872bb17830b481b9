"""
Binary resolution and factoring: the generating inferences of the prover.

Resolution takes one literal from each of two variable-disjoint clauses,
with opposite signs and unifiable atoms, and produces every other literal
of both parents under the unifier. Factoring unifies two same-signed
literals of one clause and drops the second.

Both rules return None when they do not apply. If the resolvent is empty,
a contradiction has been found.
"""

from typing import Optional

from ..core.clauses import Clause, PLAIN
from ..core.unification import mgu


def resolution(clause1: Clause, lit1: int, clause2: Clause, lit2: int,
               occurs_check: bool = False) -> Optional[Clause]:
    """
    Resolve clause1 on literal lit1 against clause2 on literal lit2.

    The clauses must not share variables. The result has no name or
    support yet; compute_all_resolvents fills those in.
    """
    l1 = clause1.get_literal(lit1)
    l2 = clause2.get_literal(lit2)
    if l1.negative == l2.negative:
        return None
    sigma = mgu(l1.atom, l2.atom, occurs_check=occurs_check)
    if sigma is None:
        return None
    rest = [lit for i, lit in enumerate(clause1.literals) if i != lit1]
    rest += [lit for i, lit in enumerate(clause2.literals) if i != lit2]
    resolvent = Clause(
        literals=tuple(lit.instantiate(sigma) for lit in rest),
        type=PLAIN,
        rationale="resolution",
        subst=sigma,
    )
    return resolvent.remove_dup_lits()


def factor(clause: Clause, lit1: int, lit2: int,
           occurs_check: bool = False) -> Optional[Clause]:
    """Factor clause on two same-signed literals, keeping lit1 and dropping lit2."""
    l1 = clause.get_literal(lit1)
    l2 = clause.get_literal(lit2)
    if l1.negative != l2.negative:
        return None
    sigma = mgu(l1.atom, l2.atom, occurs_check=occurs_check)
    if sigma is None:
        return None
    rest = [lit for i, lit in enumerate(clause.literals) if i != lit2]
    result = Clause(
        literals=tuple(lit.instantiate(sigma) for lit in rest),
        type=PLAIN,
        rationale="factor",
        subst=sigma,
    )
    return result.remove_dup_lits()


def compute_all_factors(clause: Clause, naming, occurs_check: bool = False) -> list:
    """Every factor of clause, named, with the clause as support."""
    results = []
    for i in range(len(clause.literals)):
        for j in range(i + 1, len(clause.literals)):
            fact = factor(clause, i, j, occurs_check=occurs_check)
            if fact is not None:
                results.append(_named(fact, naming, (clause.name,)))
    return results


def compute_all_resolvents(clause: Clause, clauses, naming,
                           occurs_check: bool = False) -> list:
    """
    Every resolvent between clause and the members of clauses (a ClauseSet).
    Candidate literals come from clauses.get_resolution_literals.
    """
    results = []
    for i, lit in enumerate(clause.literals):
        for partner, j in clauses.get_resolution_literals(lit):
            resolvent = resolution(clause, i, partner, j, occurs_check=occurs_check)
            if resolvent is not None:
                results.append(_named(resolvent, naming, (clause.name, partner.name)))
    return results


def _named(clause: Clause, naming, support) -> Clause:
    return clause.with_name(naming.new_name()).with_support(support)
