"""
Unit tests for given-clause selection.

Core claims:
    - pick_given_5 chooses five clauses by symbol count, then one by age
    - Ties go to the clause inserted first
    - Every run gets its own FIFO counter
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from saturn.core.heuristics import (
    SymbolCountEvaluation, FIFOEvaluation, EvalStructure,
    HeuristicClauseSet, EVALUATIONS, make_evaluation,
)
from saturn.fileformats.tptp import parse_clause


def clause(text, name):
    return parse_clause(f"cnf({name},axiom,{text}).")


class TestWeightFunctions:
    def test_symbol_count(self):
        c = clause("p(X)|~q(f(X,a), b)", "c1")
        assert SymbolCountEvaluation(2, 1)(c) == 12
        assert SymbolCountEvaluation(1, 1)(c) == 7

    def test_fifo_counts_up(self):
        fifo = FIFOEvaluation()
        c = clause("p(a)", "c1")
        assert [fifo(c), fifo(c), fifo(c)] == [1, 2, 3]

    def test_fifo_counters_are_per_instance(self):
        c = clause("p(a)", "c1")
        first, second = FIFOEvaluation(), FIFOEvaluation()
        first(c)
        first(c)
        assert second(c) == 1


class TestEvalStructure:
    def test_pick_given_5_schedule(self):
        evaluation = make_evaluation("pick_given_5")
        picks = [evaluation.next_eval() for _ in range(12)]
        assert picks == [0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1]

    def test_single_function_schedule(self):
        evaluation = make_evaluation("fifo")
        assert [evaluation.next_eval() for _ in range(3)] == [0, 0, 0]

    def test_evaluate_scores_every_function(self):
        evaluation = make_evaluation("pick_given_2")
        assert evaluation.evaluate(clause("p(a)", "c1")) == [4, 1]
        assert evaluation.evaluate(clause("p(X)", "c2")) == [3, 2]

    def test_empty_schedule_rejected(self):
        with pytest.raises(ValueError):
            EvalStructure([])

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError, match="Available"):
            make_evaluation("no_such_heuristic")

    def test_each_structure_is_fresh(self):
        first = make_evaluation("fifo")
        first.evaluate(clause("p(a)", "c1"))
        second = make_evaluation("fifo")
        assert second.evaluate(clause("p(a)", "c1")) == [1]

    def test_registry_names(self):
        assert set(EVALUATIONS) == {"fifo", "symbol_count", "pick_given_2", "pick_given_5"}


class TestHeuristicClauseSet:
    def test_extract_best_by_weight(self):
        queue = HeuristicClauseSet(make_evaluation("symbol_count"))
        heavy = clause("p(f(f(a)))", "heavy")
        light = clause("p(a)", "light")
        queue.add_all([heavy, light])
        assert queue.extract_best() is light
        assert queue.extract_best() is heavy
        assert queue.extract_best() is None

    def test_ties_go_to_first_inserted(self):
        queue = HeuristicClauseSet(make_evaluation("symbol_count"))
        first, second = clause("p(a)", "first"), clause("q(b)", "second")
        queue.add_all([first, second])
        assert queue.extract_best() is first

    def test_pick_given_5_takes_the_oldest_on_the_sixth_pick(self):
        queue = HeuristicClauseSet(make_evaluation("pick_given_5"))
        oldest = clause("p(f(f(f(a))))", "oldest")
        queue.add(oldest)
        light = [clause(f"q(c{i})", f"light{i}") for i in range(7)]
        queue.add_all(light)
        picks = [queue.extract_best() for _ in range(6)]
        assert picks[:5] == light[:5]
        assert picks[5] is oldest

    def test_extract_clause_keeps_scores_aligned(self):
        queue = HeuristicClauseSet(make_evaluation("symbol_count"))
        a, b, c = clause("p(f(a))", "a"), clause("p(a)", "b"), clause("p(f(f(a)))", "c")
        queue.add_all([a, b, c])
        queue.extract_clause(b)
        assert queue.extract_best() is a
        assert queue.extract_best() is c

    @given(st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=15))
    def test_symbol_count_extracts_in_weight_order(self, depths):
        queue = HeuristicClauseSet(make_evaluation("symbol_count"))
        for i, depth in enumerate(depths):
            term = "a"
            for _ in range(depth):
                term = f"f({term})"
            queue.add(clause(f"p({term})", f"c{i}"))
        weights = []
        while len(queue):
            weights.append(queue.extract_best().weight(2, 1))
        assert weights == sorted(weights)
