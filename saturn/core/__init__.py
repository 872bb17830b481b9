from .terms import Variable, Functor, is_variable, is_compound, make_term, term_vars, term_weight
from .substitution import Substitution
from .unification import occurs_in, mgu, mgu_lists, match_terms
from .literals import Literal, EQUALITY
from .clauses import Clause, NamingContext, AXIOM, NEGATED_CONJECTURE, PLAIN
from .clauseset import ClauseSet
from .heuristics import (
    SymbolCountEvaluation, FIFOEvaluation, EvalStructure,
    HeuristicClauseSet, EVALUATIONS, make_evaluation,
)
from .proof import collect_proof_clauses, derivation_graph, proof_order, generate_proof_tree
from .state import ProofState, SearchParams, REFUTED, SATURATED, TIMED_OUT
from .engine import prove, compare_strategies

__all__ = [
    "Variable", "Functor", "is_variable", "is_compound", "make_term", "term_vars", "term_weight",
    "Substitution",
    "occurs_in", "mgu", "mgu_lists", "match_terms",
    "Literal", "EQUALITY",
    "Clause", "NamingContext", "AXIOM", "NEGATED_CONJECTURE", "PLAIN",
    "ClauseSet",
    "SymbolCountEvaluation", "FIFOEvaluation", "EvalStructure",
    "HeuristicClauseSet", "EVALUATIONS", "make_evaluation",
    "collect_proof_clauses", "derivation_graph", "proof_order", "generate_proof_tree",
    "ProofState", "SearchParams", "REFUTED", "SATURATED", "TIMED_OUT",
    "prove", "compare_strategies",
]
