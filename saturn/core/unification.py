"""
Unification and matching.

mgu() computes a most general unifier of two terms: a substitution that
makes them identical, or None if no such substitution exists. match_terms()
is the one-way version used by subsumption: only the first term's variables
may be bound.

By default mgu() performs no occurs check, so X and f(X) "unify" to
{X<-f(X)}, which is not a unifier. Pass occurs_check=True for the sound
version. Whenever the checked version succeeds, both return the same
substitution.
"""

from typing import Optional

from .terms import Variable, Functor
from .substitution import Substitution


def occurs_in(var: Variable, term) -> bool:
    """Does var occur anywhere in term?"""
    if isinstance(term, Variable):
        return var == term
    return any(occurs_in(var, arg) for arg in term.args)


def mgu(t1, t2, occurs_check: bool = False) -> Optional[Substitution]:
    """
    Most general unifier of t1 and t2, or None.

    Works through a list of pending pairs. Each new binding is composed
    into the result and applied to the pairs still pending, so the result
    stays idempotent.
    """
    return mgu_lists([t1], [t2], occurs_check=occurs_check)


def mgu_lists(l1, l2, occurs_check: bool = False) -> Optional[Substitution]:
    """Simultaneous unifier of two equal-length term lists, or None."""
    if len(l1) != len(l2):
        return None
    subst = Substitution()
    l1, l2 = list(l1), list(l2)
    while l1:
        t1 = l1.pop()
        t2 = l2.pop()
        if t1 == t2:
            continue
        if isinstance(t2, Variable) and not isinstance(t1, Variable):
            t1, t2 = t2, t1
        if isinstance(t1, Variable):
            if occurs_check and occurs_in(t1, t2):
                return None
            subst.compose_binding(t1, t2)
            bind = Substitution({t1: t2})
            l1 = [bind.apply(t) for t in l1]
            l2 = [bind.apply(t) for t in l2]
            continue
        if t1.name != t2.name or len(t1.args) != len(t2.args):
            return None  # functor clash
        l1.extend(t1.args)
        l2.extend(t2.args)
    return subst


def match_terms(t1, t2, subst: Substitution) -> bool:
    """
    Extend subst so that subst(t1) == t2, binding only t1's variables.

    On failure subst is restored to its state before the call.
    """
    mark = subst.mark()
    if _match(t1, t2, subst):
        return True
    subst.backtrack(mark)
    return False


def _match(t1, t2, subst: Substitution) -> bool:
    if isinstance(t1, Variable):
        if t1 in subst:
            return subst[t1] == t2
        # X matching itself is recorded too, so X stays fixed afterwards.
        subst.add_binding(t1, t2, keep_identity=True)
        return True
    if not isinstance(t2, Functor):
        return False
    if t1.name != t2.name or len(t1.args) != len(t2.args):
        return False
    return all(_match(a1, a2, subst) for a1, a2 in zip(t1.args, t2.args))
