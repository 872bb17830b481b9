from .tptp import (
    TPTPSyntaxError, parse_string, parse_file,
    parse_term, parse_literal, parse_clause,
)

__all__ = [
    "TPTPSyntaxError", "parse_string", "parse_file",
    "parse_term", "parse_literal", "parse_clause",
]
