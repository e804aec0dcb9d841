"""
Utilities for the twosat package.
"""

from twosat.utils import cnf, exceptions, logging_utils
from twosat.utils.cnf import (
    check_assignment,
    count_satisfied_clauses,
    formula_to_text,
    load_two_sat_file,
    parse_two_sat,
    save_two_sat_file,
    validate_clause,
)

__all__ = [
    "load_two_sat_file",
    "save_two_sat_file",
    "parse_two_sat",
    "formula_to_text",
    "validate_clause",
    "check_assignment",
    "count_satisfied_clauses",
    "cnf",
    "exceptions",
    "logging_utils",
]
