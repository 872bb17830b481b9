"""
Given-clause selection.

A weight function maps a clause to a non-negative integer; smaller is
better. An EvalStructure combines several weight functions in a round-robin
schedule: [(5, symbol_count), (1, fifo)] picks five clauses by symbol count,
then one by age, then repeats.

Named configurations live in the EVALUATIONS registry. Weight functions can
carry state (the FIFO counter), so make_evaluation() builds a fresh
structure for every proof search.
"""

from .clauseset import ClauseSet


class SymbolCountEvaluation:
    """fweight per function/predicate symbol, vweight per variable occurrence."""

    def __init__(self, fweight: int = 2, vweight: int = 1):
        self.fweight = fweight
        self.vweight = vweight

    def __call__(self, clause) -> int:
        return clause.weight(self.fweight, self.vweight)

    def __repr__(self):
        return f"SymbolCount({self.fweight},{self.vweight})"


class FIFOEvaluation:
    """Returns 1, 2, 3, ... on successive calls: oldest clause first."""

    def __init__(self):
        self.counter = 0

    def __call__(self, clause) -> int:
        self.counter += 1
        return self.counter

    def __repr__(self):
        return "FIFO"


class EvalStructure:
    """
    A list of (ratio, weight_function) pairs.

    evaluate() scores a clause under every function; next_eval() tells
    which function chooses the next given clause.
    """

    def __init__(self, schedule, name: str = ""):
        if not schedule:
            raise ValueError("an evaluation schedule needs at least one weight function")
        if any(ratio < 1 for ratio, _ in schedule):
            raise ValueError("ratios must be positive")
        self.ratios = [ratio for ratio, _ in schedule]
        self.eval_funs = [fun for _, fun in schedule]
        self.name = name
        self.current = 0
        self.remaining = self.ratios[0]

    def evaluate(self, clause) -> list:
        return [fun(clause) for fun in self.eval_funs]

    def next_eval(self) -> int:
        """Index of the weight function that is due, then advance the schedule."""
        index = self.current
        self.remaining -= 1
        if self.remaining == 0:
            self.current = (self.current + 1) % len(self.ratios)
            self.remaining = self.ratios[self.current]
        return index

    def __repr__(self):
        parts = ", ".join(f"({r}, {f!r})" for r, f in zip(self.ratios, self.eval_funs))
        return f"EvalStructure({self.name!r}: [{parts}])"


EVALUATIONS = {
    "fifo": {
        "schedule":    lambda: [(1, FIFOEvaluation())],
        "description": "Breadth-first: always the oldest clause",
    },
    "symbol_count": {
        "schedule":    lambda: [(1, SymbolCountEvaluation(2, 1))],
        "description": "Always the lightest clause (2 per symbol, 1 per variable)",
    },
    "pick_given_2": {
        "schedule":    lambda: [(2, SymbolCountEvaluation(2, 1)), (1, FIFOEvaluation())],
        "description": "Two lightest clauses, then the oldest",
    },
    "pick_given_5": {
        "schedule":    lambda: [(5, SymbolCountEvaluation(2, 1)), (1, FIFOEvaluation())],
        "description": "Five lightest clauses, then the oldest",
    },
}

DEFAULT_EVALUATION = "pick_given_5"


def make_evaluation(name: str = DEFAULT_EVALUATION) -> EvalStructure:
    if name not in EVALUATIONS:
        raise ValueError(
            f"Unknown evaluation {name!r}. Available: {', '.join(EVALUATIONS)}"
        )
    return EvalStructure(EVALUATIONS[name]["schedule"](), name)


class HeuristicClauseSet(ClauseSet):
    """
    A ClauseSet that remembers every clause's score vector and hands out
    the best clause under whichever weight function is due. Ties go to the
    clause inserted first.
    """

    def __init__(self, evaluation: EvalStructure, clauses=()):
        self.evaluation = evaluation
        self.scores = []
        super().__init__(clauses)

    def add(self, clause):
        self.scores.append(self.evaluation.evaluate(clause))
        super().add(clause)

    def extract_best(self):
        """Remove and return the best clause, or None when empty."""
        if not self.clauses:
            return None
        index = self.evaluation.next_eval()
        best = min(range(len(self.clauses)), key=lambda i: self.scores[i][index])
        del self.scores[best]
        return self.clauses.pop(best)

    def extract_clause(self, clause):
        for i, candidate in enumerate(self.clauses):
            if candidate is clause:
                del self.scores[i]
                del self.clauses[i]
                return clause
        raise ValueError(f"{clause.name} is not in this clause set")

    def extract_first(self):
        if not self.clauses:
            return None
        del self.scores[0]
        return self.clauses.pop(0)
