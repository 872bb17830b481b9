"""
Problem registry.

Each problem is a dict:
    make_problem:  () -> ClauseSet
    expected:      SZS status a complete search reports
    params:        SearchParams keyword arguments the problem needs [optional]
    description:   str
"""

from .resolution import (
    make_socrates_problem, make_chain_problem,
    make_factoring_problem, make_no_proof_problem,
)


PROBLEMS = {
    "socrates": {
        "make_problem": make_socrates_problem,
        "expected":     "Unsatisfiable",
        "description":  "Socrates syllogism: prove mortal(socrates)",
    },
    "chain": {
        "make_problem": make_chain_problem,
        "expected":     "Unsatisfiable",
        "description":  "Multi-step resolution: prove a chain of implications",
    },
    "factoring": {
        "make_problem": make_factoring_problem,
        "expected":     "Unsatisfiable",
        "description":  "Refutation that needs factoring",
    },
    "no_proof": {
        "make_problem": make_no_proof_problem,
        "expected":     "Satisfiable",
        "params":       {"delete_tautologies": True},
        "description":  "Satisfiable clause set: the search saturates",
    },
}


def get_problem(name: str):
    """Build the ClauseSet of a registered problem."""
    if name not in PROBLEMS:
        raise ValueError(f"Unknown problem {name!r}. Available: {', '.join(PROBLEMS)}")
    return PROBLEMS[name]["make_problem"]()
