"""
Running searches.

prove() is the one-call entry point: build a ProofState, saturate it, hand
it back. compare_strategies() runs the same problem under several given-
clause heuristics, each on its own copy with its own naming context, so the
runs cannot influence each other.
"""

from typing import Optional

from .clauses import NamingContext
from .heuristics import DEFAULT_EVALUATION, EVALUATIONS
from .state import ProofState, SearchParams


def prove(problem, evaluation=DEFAULT_EVALUATION,
          params: Optional[SearchParams] = None,
          timeout: Optional[float] = None,
          verbose: bool = False) -> ProofState:
    """
    Saturate problem (a ClauseSet) and return the finished ProofState.

    Args:
        problem:    input clauses
        evaluation: name from EVALUATIONS, or an EvalStructure
        params:     simplification switches
        timeout:    wall-clock limit in seconds (None = no limit)
        verbose:    print every given clause
    """
    state = ProofState(problem.copy(), evaluation, params=params,
                       naming=NamingContext(), verbose=verbose)
    state.saturate(timeout)
    return state


def compare_strategies(problem, evaluations=None,
                       params: Optional[SearchParams] = None,
                       timeout: Optional[float] = None) -> list:
    """
    One independent search per evaluation name.

    Returns a list of dicts with the name, status, SZS status, number of
    processed clauses, and elapsed seconds of each run.
    """
    rows = []
    for name in evaluations or list(EVALUATIONS):
        state = prove(problem, name, params=params, timeout=timeout)
        rows.append({
            "evaluation": name,
            "status": state.status,
            "szs_status": state.szs_status,
            "processed": state.proc_clause_count,
            "elapsed": state.elapsed,
        })
    return rows
