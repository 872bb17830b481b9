"""
ProofState: the given-clause saturation loop.

unprocessed: clauses waiting to be selected (a HeuristicClauseSet)
processed:   clauses that have been selected and used for inferences
archive:     every clause that ever entered processed, by name

Each step picks the best unprocessed clause (the given clause), simplifies
it against processed, then adds every factor of it and every resolvent
between it and processed back to unprocessed. Deriving the empty clause
refutes the input; running out of unprocessed clauses saturates it.
"""

import json
import time
from dataclasses import dataclass, asdict
from typing import Optional

from .clauses import Clause, NamingContext
from .clauseset import ClauseSet
from .heuristics import EvalStructure, HeuristicClauseSet, make_evaluation, DEFAULT_EVALUATION
from .proof import generate_proof_tree
from ..inference.resolve import compute_all_factors, compute_all_resolvents
from ..inference.subsume import forward_subsumption, backward_subsumption

RUNNING = "running"
REFUTED = "refuted"
SATURATED = "saturated"
TIMED_OUT = "timed_out"

SZS_STATUS = {
    RUNNING:   "Unknown",
    REFUTED:   "Unsatisfiable",
    SATURATED: "Satisfiable",
    TIMED_OUT: "Timeout",
}


@dataclass
class SearchParams:
    """Which simplifications the loop applies. All off by default."""
    delete_tautologies: bool = False
    forward_subsumption: bool = False
    backward_subsumption: bool = False
    occurs_check: bool = False


class ProofState:

    def __init__(self, clauses, evaluation=DEFAULT_EVALUATION,
                 params: Optional[SearchParams] = None,
                 naming: Optional[NamingContext] = None,
                 verbose: bool = False):
        if not isinstance(evaluation, EvalStructure):
            evaluation = make_evaluation(evaluation)
        self.params = params or SearchParams()
        self.naming = naming or NamingContext()
        self.verbose = verbose
        self.evaluation = evaluation
        self.unprocessed = HeuristicClauseSet(evaluation)
        self.processed = ClauseSet()
        self.archive = {}

        for clause in clauses:
            unique = self.naming.claim(clause.name) if clause.name else self.naming.new_name()
            self.unprocessed.add(clause if unique == clause.name else clause.with_name(unique))

        self.status = RUNNING
        self.witness = None
        self.elapsed = 0.0

        self.initial_clause_count = len(self.unprocessed)
        self.proc_clause_count = 0
        self.factor_count = 0
        self.resolvent_count = 0
        self.tautologies_deleted = 0
        self.forward_subsumed = 0
        self.backward_subsumed = 0

    @property
    def szs_status(self) -> str:
        return SZS_STATUS[self.status]

    # ── The loop ───────────────────────────────────────────────────────────

    def process_clause(self) -> Optional[Clause]:
        """
        One iteration of the given-clause loop.

        Returns the empty clause if the given clause is empty, else None.
        """
        given = self.unprocessed.extract_best()
        if given is None:
            raise IndexError("process_clause called with no unprocessed clauses")
        given = given.fresh_var_copy(self.naming)
        if self.verbose:
            print(f"# {given}")

        if given.is_empty():
            self.status = REFUTED
            self.witness = given
            return given

        if self.params.delete_tautologies and given.is_tautology():
            self.tautologies_deleted += 1
            if self.verbose:
                print(f"#  [tautology] {given.name}")
            return None

        if self.params.forward_subsumption and forward_subsumption(self.processed, given):
            self.forward_subsumed += 1
            if self.verbose:
                print(f"#  [subsumed] {given.name}")
            return None

        if self.params.backward_subsumption:
            removed = backward_subsumption(given, self.processed)
            self.backward_subsumed += removed
            if removed and self.verbose:
                print(f"#  [back-subsumed] {removed} clause(s) by {given.name}")

        occurs_check = self.params.occurs_check
        factors = compute_all_factors(given, self.naming, occurs_check=occurs_check)
        resolvents = compute_all_resolvents(given, self.processed, self.naming,
                                            occurs_check=occurs_check)
        self.proc_clause_count += 1
        self.factor_count += len(factors)
        self.resolvent_count += len(resolvents)

        self.processed.add(given)
        self.archive[given.name] = given
        for clause in factors + resolvents:
            self.unprocessed.add(clause)
        return None

    def saturate(self, timeout: Optional[float] = None) -> Optional[Clause]:
        """
        Run the loop until refutation, saturation, or timeout (seconds).

        Returns the empty clause on refutation, else None. The time limit
        is checked between iterations, never inside one.
        """
        start = time.monotonic()
        try:
            while len(self.unprocessed) > 0:
                witness = self.process_clause()
                if witness is not None:
                    return witness
                if timeout is not None and time.monotonic() - start >= timeout:
                    self.status = TIMED_OUT
                    return None
            self.status = SATURATED
            return None
        finally:
            self.elapsed += time.monotonic() - start

    # ── Results ────────────────────────────────────────────────────────────

    def generate_proof_tree(self, witness: Optional[Clause] = None) -> dict:
        witness = witness or self.witness
        if witness is None:
            raise ValueError("no refutation to reconstruct")
        return generate_proof_tree(witness, self.archive)

    def statistics(self) -> dict:
        return {
            "initial_clauses": self.initial_clause_count,
            "processed_clauses": self.proc_clause_count,
            "factors_computed": self.factor_count,
            "resolvents_computed": self.resolvent_count,
            "tautologies_deleted": self.tautologies_deleted,
            "forward_subsumed": self.forward_subsumed,
            "backward_subsumed": self.backward_subsumed,
            "elapsed_seconds": round(self.elapsed, 6),
        }

    def generate_statistics(self) -> str:
        return "\n".join([
            f"# Initial clauses    : {self.initial_clause_count}",
            f"# Processed clauses  : {self.proc_clause_count}",
            f"# Factors computed   : {self.factor_count}",
            f"# Resolvents computed: {self.resolvent_count}",
            f"# Tautologies deleted: {self.tautologies_deleted}",
            f"# Forward subsumed   : {self.forward_subsumed}",
            f"# Backward subsumed  : {self.backward_subsumed}",
            f"# Elapsed time       : {self.elapsed:.3f}s",
        ])

    def to_dict(self):
        proof = []
        if self.witness is not None:
            proof = [
                {"name": name, "clause": str(clause), "justification": clause.justification()}
                for name, clause in self.generate_proof_tree().items()
            ]
        return {
            "status": self.status,
            "szs_status": self.szs_status,
            "evaluation": self.evaluation.name,
            "params": asdict(self.params),
            "statistics": self.statistics(),
            "proof": proof,
        }

    def save(self, path="proof_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
