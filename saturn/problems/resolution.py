"""
Sample problems for the resolution prover.

socrates   -- the classic syllogism (mortal(socrates))
chain      -- multi-step implication chain (builds_with(alice, bob))
factoring  -- needs a factor before resolution can close the proof
no_proof   -- satisfiable: the search saturates
"""

from ..core.clauseset import ClauseSet
from ..fileformats.tptp import parse_string

SOCRATES = """
% All humans are mortal, Socrates is human. Is Socrates mortal?
cnf(all_humans_are_mortal, axiom, mortal(X)|~human(X)).
cnf(socrates_is_human, axiom, human(socrates)).
cnf(socrates_not_mortal, negated_conjecture, ~mortal(socrates)).
"""

CHAIN = """
% knows -> trusts -> cooperates -> builds_with
cnf(alice_knows_bob, axiom, knows(alice,bob)).
cnf(knowing_implies_trusting, axiom, ~knows(X,Y)|trusts(X,Y)).
cnf(trusting_implies_cooperating, axiom, ~trusts(X,Y)|cooperates(X,Y)).
cnf(cooperating_implies_building, axiom, ~cooperates(X,Y)|builds_with(X,Y)).
cnf(goal, negated_conjecture, ~builds_with(alice,bob)).
"""

FACTORING = """
% Every resolvent of the two clauses has two literals: only a factor
% of each gets down to units.
cnf(someone_is_p, axiom, p(X)|p(Y)).
cnf(nobody_is_p, negated_conjecture, ~p(X)|~p(Y)).
"""

NO_PROOF = """
% ~p(a) leaves q(a) open: there is a model, so no refutation exists.
cnf(p_or_q, axiom, p(X)|q(a)).
cnf(excluded_middle, axiom, p(X)|~p(X)).
cnf(not_p_a, negated_conjecture, ~p(a)).
"""


def make_socrates_problem() -> ClauseSet:
    """
    Classic syllogism as a resolution refutation problem.

    Axioms:
        all humans are mortal:  mortal(X) | ~human(X)
        socrates is human:      human(socrates)

    Negated goal (to refute):
        socrates is NOT mortal: ~mortal(socrates)
    """
    return parse_string(SOCRATES)


def make_chain_problem() -> ClauseSet:
    """Proves builds_with(alice, bob) through three implications."""
    return parse_string(CHAIN)


def make_factoring_problem() -> ClauseSet:
    return parse_string(FACTORING)


def make_no_proof_problem() -> ClauseSet:
    return parse_string(NO_PROOF)
