"""
Property-based and unit tests for resolution and factoring.

Core claims:
    - Every resolvent and every factor is a logical consequence of its
      parents (checked against all Herbrand interpretations of a small
      signature, not just syntactically)
    - Same-signed literals never resolve; opposite-signed ones never factor
    - The empty clause is derived from contradictory unit clauses
    - Derived clauses are named and record their parents
"""

import itertools

from hypothesis import given, settings
from hypothesis import strategies as st

from saturn.core.terms import Variable, Functor
from saturn.core.literals import Literal
from saturn.core.substitution import Substitution
from saturn.core.clauses import Clause, NamingContext
from saturn.core.clauseset import ClauseSet
from saturn.inference.resolve import (
    resolution, factor, compute_all_factors, compute_all_resolvents,
)
from saturn.fileformats.tptp import parse_clause


def clause(text, name="c"):
    return parse_clause(f"cnf({name},axiom,{text}).")


# ── Herbrand semantics over the constants a and b ────────────────────────────

DOMAIN = (Functor("a"), Functor("b"))
PREDICATES = {"p": 1, "q": 2}
HERBRAND_BASE = [
    Functor(pred, args)
    for pred, arity in PREDICATES.items()
    for args in itertools.product(DOMAIN, repeat=arity)
]


def ground_instances(c: Clause):
    variables = sorted(c.collect_vars(), key=lambda v: v.name)
    for values in itertools.product(DOMAIN, repeat=len(variables)):
        yield c.instantiate(Substitution(dict(zip(variables, values))))


def holds(c: Clause, true_atoms) -> bool:
    """Does the ground clause hold when exactly true_atoms are true?"""
    return any((lit.atom in true_atoms) != lit.negative for lit in c.literals)


def entails(premises, conclusion) -> bool:
    """Every Herbrand model of the premises is a model of the conclusion."""
    premise_instances = [g for p in premises for g in ground_instances(p)]
    conclusion_instances = list(ground_instances(conclusion))
    for bits in itertools.product([False, True], repeat=len(HERBRAND_BASE)):
        true_atoms = {atom for atom, bit in zip(HERBRAND_BASE, bits) if bit}
        if all(holds(g, true_atoms) for g in premise_instances):
            if not all(holds(g, true_atoms) for g in conclusion_instances):
                return False
    return True


# ── Generators ────────────────────────────────────────────────────────────────

arguments = st.sampled_from([Variable("X"), Variable("Y"), Functor("a"), Functor("b")])


@st.composite
def literals(draw):
    pred = draw(st.sampled_from(sorted(PREDICATES)))
    args = tuple(draw(arguments) for _ in range(PREDICATES[pred]))
    return Literal(Functor(pred, args), negative=draw(st.booleans()))


@st.composite
def clauses(draw, name="c"):
    lits = draw(st.lists(literals(), min_size=1, max_size=3))
    return Clause(literals=tuple(lits), name=name)


# ── Unit tests ────────────────────────────────────────────────────────────────

class TestResolution:
    c1 = clause("p(a,X)|p(X,a)", "c1")
    c2 = clause("~p(a,b)|p(f(Y),a)", "c2")
    c3 = clause("p(Z,X)|~p(f(Z),X0)", "c3")

    def test_resolves(self):
        res = resolution(self.c1, 0, self.c2, 0)
        assert res is not None
        assert res.literals_str() == "p(b,a)|p(f(Y),a)"
        assert res.rationale == "resolution"

    def test_same_sign_does_not_resolve(self):
        assert resolution(self.c1, 0, self.c3, 0) is None

    def test_resolves_against_second_clause(self):
        res = resolution(self.c2, 0, self.c3, 0)
        assert res is not None
        assert res.literals_str() == "p(f(Y),a)|~p(f(a),X0)"

    def test_functor_clash_does_not_resolve(self):
        assert resolution(self.c1, 0, self.c3, 1) is None

    def test_unifier_is_recorded(self):
        res = resolution(self.c1, 0, self.c2, 0)
        assert res.subst(Variable("X")) == Functor("b")

    def test_remaining_literals_survive(self):
        res = resolution(clause("p(X)|q(a)"), 0, clause("~p(a)|r(b)"), 0)
        assert res.literals_str() == "q(a)|r(b)"

    def test_socrates_step(self):
        res = resolution(clause("mortal(X)|~human(X)"), 1, clause("human(socrates)"), 0)
        assert res.literals_str() == "mortal(socrates)"

    def test_resolves_to_empty_clause(self):
        res = resolution(clause("mortal(socrates)"), 0, clause("~mortal(socrates)"), 0)
        assert res.is_empty()

    def test_different_predicates_do_not_resolve(self):
        assert resolution(clause("human(socrates)"), 0, clause("~mortal(socrates)"), 0) is None

    def test_duplicates_removed(self):
        res = resolution(clause("p(X)|q(a)"), 0, clause("~p(b)|q(a)"), 0)
        assert res.literals_str() == "q(a)"


class TestFactor:
    def test_factors_to_unit(self):
        res = factor(clause("p(a,X)|p(X,a)"), 0, 1)
        assert res is not None
        assert len(res) == 1
        assert res.literals_str() == "p(a,a)"
        assert res.rationale == "factor"

    def test_opposite_signs_do_not_factor(self):
        assert factor(clause("~p(a,b)|p(f(Y),a)"), 0, 1) is None

    def test_non_unifiable_do_not_factor(self):
        assert factor(clause("p(X,X)|p(a,f(Y))"), 0, 1) is None

    def test_instantiates_the_rest(self):
        res = factor(clause("p(X)|p(a)|q(X)"), 0, 1)
        assert res.literals_str() == "p(a)|q(a)"

    def test_simple_factor(self):
        assert factor(clause("p(X)|p(a)"), 0, 1).literals_str() == "p(a)"


class TestComputeAll:
    def test_all_factors_are_named_with_support(self):
        naming = NamingContext()
        factors = compute_all_factors(clause("p(X)|p(Y)|p(a)", "base"), naming)
        assert len(factors) == 3
        assert [f.name for f in factors] == ["c1", "c2", "c3"]
        assert all(f.support == ("base",) for f in factors)

    def test_all_resolvents_against_a_clause_set(self):
        naming = NamingContext()
        processed = ClauseSet([
            clause("~p(a)", "n1"),
            clause("~p(b)|q(b)", "n2"),
            clause("p(c)", "n3"),
        ])
        given = clause("p(X)|r(X)", "g")
        resolvents = compute_all_resolvents(given, processed, naming)
        assert sorted(r.literals_str() for r in resolvents) == ["r(a)", "r(b)|q(b)"]
        assert {r.support for r in resolvents} == {("g", "n1"), ("g", "n2")}

    def test_no_partners_no_resolvents(self):
        assert compute_all_resolvents(clause("p(a)"), ClauseSet(), NamingContext()) == []


# ── Property-based tests ──────────────────────────────────────────────────────

class TestSoundness:

    @given(clauses("left"), clauses("right"))
    @settings(max_examples=60, deadline=None)
    def test_resolvents_are_consequences(self, left, right):
        naming = NamingContext()
        left = left.fresh_var_copy(naming)
        right = right.fresh_var_copy(naming)
        for i in range(len(left)):
            for j in range(len(right)):
                res = resolution(left, i, right, j)
                if res is not None:
                    assert entails([left, right], res)

    @given(clauses())
    @settings(max_examples=60, deadline=None)
    def test_factors_are_consequences(self, c):
        for i in range(len(c)):
            for j in range(i + 1, len(c)):
                res = factor(c, i, j)
                if res is not None:
                    assert entails([c], res)

    @given(literals())
    def test_complementary_units_resolve_to_empty(self, lit):
        ground = Clause(literals=(lit,)).instantiate(
            Substitution({Variable("X"): Functor("a"), Variable("Y"): Functor("b")}))
        pos = Clause(literals=(Literal(ground.literals[0].atom),))
        neg = Clause(literals=(Literal(ground.literals[0].atom, negative=True),))
        assert resolution(pos, 0, neg, 0).is_empty()

    @given(clauses("left"), clauses("right"))
    def test_same_sign_never_resolves(self, left, right):
        right = right.fresh_var_copy(NamingContext())
        for i, l1 in enumerate(left.literals):
            for j, l2 in enumerate(right.literals):
                if l1.negative == l2.negative:
                    assert resolution(left, i, right, j) is None
