"""
Substitutions: finite maps from variables to terms.

Application is simultaneous and single-step: a bound variable is replaced
by its binding, which is not itself rewritten again. compose_binding keeps
the map idempotent by pushing each new binding into the existing right-hand
sides first.

Every insertion is recorded on a trail, so matching can try a binding and
undo it cheaply with mark()/backtrack().
"""

from .terms import Variable, Functor


class Substitution:
    """A mapping Variable -> Term with a backtracking trail."""

    def __init__(self, bindings=None):
        self._bindings = {}
        self._trail = []
        if bindings:
            for var, term in dict(bindings).items():
                self.add_binding(var, term)

    # ── Application ────────────────────────────────────────────────────────

    def apply(self, term):
        if isinstance(term, Variable):
            return self._bindings.get(term, term)
        if not term.args:
            return term
        return Functor(term.name, tuple(self.apply(arg) for arg in term.args))

    __call__ = apply

    # ── Construction ───────────────────────────────────────────────────────

    def add_binding(self, var: Variable, term, keep_identity: bool = False):
        """Insert var <- term as is. Identity bindings are skipped unless asked for."""
        if var == term and not keep_identity:
            return
        if var not in self._bindings:
            self._trail.append(var)
        self._bindings[var] = term

    def compose_binding(self, var: Variable, term):
        """
        Compose this substitution with {var <- term}.

        The new binding is applied to every existing right-hand side, then
        var <- term is added unless var is already bound.
        """
        single = Substitution({var: term})
        for bound in list(self._bindings):
            self._bindings[bound] = single.apply(self._bindings[bound])
            if self._bindings[bound] == bound:
                del self._bindings[bound]
                self._trail.remove(bound)
        if var not in self._bindings:
            self.add_binding(var, term)

    def mark(self) -> int:
        """Current trail position, for a later backtrack()."""
        return len(self._trail)

    def backtrack(self, mark: int):
        """Undo every binding added after mark."""
        while len(self._trail) > mark:
            del self._bindings[self._trail.pop()]

    def copy(self) -> "Substitution":
        """Independent copy, identity bindings and trail order included."""
        other = Substitution()
        other._bindings = dict(self._bindings)
        other._trail = list(self._trail)
        return other

    # ── Mapping protocol ───────────────────────────────────────────────────

    def domain(self) -> list:
        return list(self._bindings)

    def items(self):
        return self._bindings.items()

    def __contains__(self, var):
        return var in self._bindings

    def __getitem__(self, var):
        return self._bindings[var]

    def __len__(self):
        return len(self._bindings)

    def __eq__(self, other):
        return isinstance(other, Substitution) and self._bindings == other._bindings

    def __repr__(self):
        return f"Substitution({str(self)})"

    def __str__(self):
        pairs = ",".join(f"{var}<-{term}" for var, term in self._bindings.items())
        return "{" + pairs + "}"
