"""
Saturn: a given-clause resolution prover for first-order clause logic.

Reads TPTP CNF problems and searches for a refutation with binary
resolution and factoring, optionally deleting tautologies and subsumed
clauses. The answer is an SZS status: Unsatisfiable (with a proof),
Satisfiable (the search saturated) or Timeout.

Usage:
    python -m saturn problem.p -tfb
    python -m saturn --problem socrates
    python -m saturn --problem chain --heuristic fifo --dot proof.dot
    python -m saturn problem.p --compare --timeout 10
"""

from .core.terms import Variable, Functor
from .core.substitution import Substitution
from .core.unification import mgu, match_terms
from .core.literals import Literal
from .core.clauses import Clause, NamingContext
from .core.clauseset import ClauseSet
from .core.heuristics import EvalStructure, HeuristicClauseSet, EVALUATIONS, make_evaluation
from .core.state import ProofState, SearchParams
from .core.engine import prove, compare_strategies
from .inference.resolve import resolution, factor
from .inference.subsume import subsumes
from .fileformats.tptp import TPTPSyntaxError, parse_string, parse_file
from .visualization import proof_to_string, proof_to_dot, export_dot

__all__ = [
    "Variable", "Functor", "Substitution", "mgu", "match_terms",
    "Literal", "Clause", "NamingContext", "ClauseSet",
    "EvalStructure", "HeuristicClauseSet", "EVALUATIONS", "make_evaluation",
    "ProofState", "SearchParams", "prove", "compare_strategies",
    "resolution", "factor", "subsumes",
    "TPTPSyntaxError", "parse_string", "parse_file",
    "proof_to_string", "proof_to_dot", "export_dot",
]
