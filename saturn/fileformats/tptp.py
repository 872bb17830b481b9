"""
TPTP reader for clause normal form problems.

Reads cnf(name, role, literals). statements, % and /* */ comments, and
include('file'). directives. $false literals are dropped, a!=b becomes a
negative equation, and every role except axiom and negated_conjecture is
read as plain.

fof() statements are rejected: turning formulas into clauses is not
something this prover does.
"""

import os
import re
from pathlib import Path

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from ..core.terms import Variable, Functor
from ..core.literals import Literal, EQUALITY
from ..core.clauses import Clause, normalize_type
from ..core.clauseset import ClauseSet


tptp_parser = Lark(r"""
    %import common.WS
    %ignore WS
    %ignore COMMENT_LINE
    %ignore COMMENT_BLOCK

    tptp_file : (cnf_annotated | include)*

    include : "include" "(" FILE_NAME formula_selection? ")" "."
    formula_selection : "," "[" NAME ("," NAME)* "]"

    cnf_annotated : "cnf" "(" NAME "," ROLE "," cnf_formula annotations? ")" "."
    annotations : "," general_term ("," general_term)*

    cnf_formula : disjunction | "(" disjunction ")"
    disjunction : literal ("|" literal)*

    literal : atomic_formula                  -> positive
            | "~" atomic_formula              -> negative
            | term "!=" term                  -> disequation
            | "~" term "!=" term              -> negated_disequation

    ?atomic_formula : equation | function_term
    equation : term "=" term

    single_term : term

    ?term : function_term | variable
    function_term : FUNCTOR ("(" term ("," term)* ")")?
    variable : VARIABLE

    general_term : general_data | general_list
    general_data : ATOMIC_WORD ("(" general_term ("," general_term)* ")")?
                 | VARIABLE
                 | INTEGER
    general_list : "[" (general_term ("," general_term)*)? "]"

    FUNCTOR : ATOMIC_WORD | DOLLAR_WORD
    VARIABLE : UPPER_WORD
    NAME : ATOMIC_WORD | INTEGER
    ROLE : LOWER_WORD
    FILE_NAME : SINGLE_QUOTED

    ATOMIC_WORD : LOWER_WORD | SINGLE_QUOTED
    DOLLAR_WORD : "$" LOWER_WORD
    UPPER_WORD : /[A-Z][a-zA-Z0-9_]*/
    LOWER_WORD : /[a-z][a-zA-Z0-9_]*/
    SINGLE_QUOTED : /'([^'\\]|\\.)+'/
    INTEGER : /[0-9]+/

    COMMENT_LINE : /%[^\n]*/
    COMMENT_BLOCK : /\/\*[\s\S]*?\*\//
""", start=["tptp_file", "cnf_annotated", "literal", "single_term"])


class TPTPSyntaxError(ValueError):
    """Malformed TPTP input. line and column are 1-based, or None if unknown."""

    def __init__(self, message, line=None, column=None):
        if line is not None and line > 0:
            message = f"line {line}, column {column}: {message}"
        super().__init__(message)
        self.line = line
        self.column = column


FALSE_ATOM = Functor("$false")


class ClauseBuilder(Transformer):
    """Turns a parse tree into Terms, Literals and Clauses."""

    def variable(self, children):
        return Variable(str(children[0]))

    def function_term(self, children):
        return Functor(str(children[0]), tuple(children[1:]))

    def single_term(self, children):
        return children[0]

    def equation(self, children):
        return Functor(EQUALITY, (children[0], children[1]))

    def positive(self, children):
        return Literal(_atom(children[0]), negative=False)

    def negative(self, children):
        return Literal(_atom(children[0]), negative=True)

    def disequation(self, children):
        return Literal(Functor(EQUALITY, (children[0], children[1])), negative=True)

    def negated_disequation(self, children):
        return Literal(Functor(EQUALITY, (children[0], children[1])), negative=False)

    def disjunction(self, children):
        return tuple(lit for lit in children
                     if not (lit.is_positive() and lit.atom == FALSE_ATOM))

    def cnf_formula(self, children):
        return children[0]

    def annotations(self, children):
        return None

    def cnf_annotated(self, children):
        name, role, literals = children[0], children[1], children[2]
        return Clause(literals=literals, name=str(name),
                      type=normalize_type(str(role)), rationale="input")

    def formula_selection(self, children):
        return [str(name) for name in children]

    def include(self, children):
        selection = children[1] if len(children) > 1 else None
        return ("include", str(children[0])[1:-1], selection)

    def tptp_file(self, children):
        return children


def _atom(term):
    if isinstance(term, Variable):
        raise TPTPSyntaxError(f"variable {term} cannot be used as an atom")
    return term


def _parse(text: str, start: str):
    try:
        tree = tptp_parser.parse(text, start=start)
    except UnexpectedInput as e:
        pos = getattr(e, "pos_in_stream", None)
        if pos is not None and re.match(r"\s*fof\s*\(", text[pos:]):
            raise TPTPSyntaxError(
                "fof statements are not supported, only clause normal form (cnf)",
                e.line, e.column,
            ) from e
        raise TPTPSyntaxError(_describe(e), e.line, e.column) from e
    try:
        return ClauseBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, TPTPSyntaxError):
            raise e.orig_exc from e
        raise


def _describe(error: UnexpectedInput) -> str:
    first_line = str(error).strip().splitlines()[0] if str(error).strip() else ""
    return first_line or type(error).__name__


def parse_term(text: str):
    return _parse(text, "single_term")


def parse_literal(text: str) -> Literal:
    return _parse(text, "literal")


def parse_clause(text: str) -> Clause:
    """Parse a single cnf(...). statement."""
    return _parse(text, "cnf_annotated")


def parse_string(text: str, include_path=None, base_dir=None,
                 reading=frozenset()) -> ClauseSet:
    """
    Parse a whole TPTP problem into a ClauseSet, following includes.

    include() files are looked up in include_path, then $TPTP, then
    base_dir (the directory of the including file). reading holds the
    resolved paths of the files currently being read; an include that
    leads back into one of them raises TPTPSyntaxError.
    """
    clauses = ClauseSet()
    for entry in _parse(text, "tptp_file"):
        if isinstance(entry, Clause):
            clauses.add(entry)
            continue
        _, file_name, selection = entry
        path = resolve_include(file_name, include_path, base_dir)
        for clause in parse_file(path, include_path=include_path, reading=reading):
            if selection is None or clause.name in selection:
                clauses.add(clause)
    return clauses


def parse_file(path, include_path=None, reading=frozenset()) -> ClauseSet:
    path = Path(path)
    key = path.resolve()
    if key in reading:
        raise TPTPSyntaxError(f"include cycle through {path}")
    with open(path) as f:
        text = f.read()
    return parse_string(text, include_path=include_path, base_dir=path.parent,
                        reading=reading | {key})


def resolve_include(file_name: str, include_path=None, base_dir=None) -> Path:
    candidates = []
    for root in (include_path, os.environ.get("TPTP"), base_dir):
        if root:
            candidates.append(Path(root) / file_name)
    candidates.append(Path(file_name))
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"included file {file_name!r} not found")
