"""
2-CNF file handling utilities.

This module provides functions for loading and parsing 2-SAT instances in the
plain text format used by the solvers, writing them back out, and checking
assignments against a clause list.

The format is a header line holding the number of variables and, optionally,
the number of clauses (which defaults to the number of variables), followed by
one clause per line as two signed integers. A minus sign denotes negation.
"""

import os
from typing import Any, TextIO

from .exceptions import InvalidClauseError, ParseError

Clause = tuple[int, int]


def load_two_sat_file(file_path: str) -> tuple[list[Clause], dict[str, Any]]:
    """
    Load a 2-SAT instance from a file.

    Args:
        file_path: Path to the instance file

    Returns:
        Tuple of (clauses, metadata)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ParseError: If the file format is invalid or the file is not UTF-8 text
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"2-SAT file not found: {file_path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            clauses, metadata = parse_two_sat(f)
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid text: {e}")

    metadata["source"] = file_path
    return clauses, metadata


def _parse_int(token: str, line_number: int, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Non-integer token {token!r}", line_number, line)


def parse_two_sat(source: str | TextIO) -> tuple[list[Clause], dict[str, Any]]:
    """
    Parse a 2-SAT instance.

    Args:
        source: Instance content as a string or file-like object

    Returns:
        Tuple of (clauses, metadata)
        - clauses: List of (u, v) literal pairs
        - metadata: Dictionary with num_variables, num_clauses and source

    Raises:
        ParseError: If the header or any clause line is malformed, or the
            number of clause lines differs from the declared count
    """
    if isinstance(source, str):
        lines = source.split("\n")
    else:
        lines = source.readlines()

    metadata = {"num_variables": 0, "num_clauses": 0, "source": ""}
    clauses = []
    header_found = False

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        # Skip empty lines
        if not line:
            continue

        tokens = line.split()

        if not header_found:
            if len(tokens) not in (1, 2):
                raise ParseError(
                    "Header must hold one or two integers", line_number, line
                )
            counts = [_parse_int(token, line_number, line) for token in tokens]
            if any(count < 0 for count in counts):
                raise ParseError("Negative count in header", line_number, line)

            metadata["num_variables"] = counts[0]
            metadata["num_clauses"] = counts[1] if len(counts) == 2 else counts[0]
            header_found = True
            continue

        if len(clauses) == metadata["num_clauses"]:
            raise ParseError(
                f"Expected {metadata['num_clauses']} clauses, but found more",
                line_number,
                line,
            )

        if len(tokens) != 2:
            raise ParseError(
                f"Clause must hold exactly two literals, got {len(tokens)}",
                line_number,
                line,
            )

        u, v = (_parse_int(token, line_number, line) for token in tokens)
        if u == 0 or v == 0:
            raise ParseError("Literal 0 is not a variable", line_number, line)

        clauses.append((u, v))

    if not header_found:
        raise ParseError("Missing header line")

    if len(clauses) != metadata["num_clauses"]:
        raise ParseError(
            f"Expected {metadata['num_clauses']} clauses, but found {len(clauses)}"
        )

    return clauses, metadata


def validate_clause(clause) -> Clause:
    """
    Check that a clause holds exactly two non-zero integer literals.

    Args:
        clause: Sequence of literals

    Returns:
        The clause as a (u, v) tuple

    Raises:
        InvalidClauseError: If the clause is not a valid 2-SAT clause
    """
    literals = tuple(clause)
    if len(literals) != 2:
        raise InvalidClauseError("Clause must hold exactly two literals", literals)
    if any(not isinstance(lit, int) or isinstance(lit, bool) for lit in literals):
        raise InvalidClauseError("Literals must be integers", literals)
    if 0 in literals:
        raise InvalidClauseError("Literal 0 is not a variable", literals)
    return literals


def formula_to_text(clauses: list[Clause], num_variables: int | None = None) -> str:
    """
    Convert a clause list to the 2-SAT text format.

    Args:
        clauses: List of (u, v) literal pairs
        num_variables: Number of variables (computed if not provided)

    Returns:
        Text representation with a two-number header
    """
    if num_variables is None:
        num_variables = len({abs(lit) for clause in clauses for lit in clause})

    lines = [f"{num_variables} {len(clauses)}"]
    for u, v in clauses:
        lines.append(f"{u} {v}")

    return "\n".join(lines) + "\n"


def save_two_sat_file(
    file_path: str, clauses: list[Clause], num_variables: int | None = None
) -> None:
    """
    Save a clause list to a 2-SAT file.

    Args:
        file_path: Path to save the file
        clauses: List of (u, v) literal pairs
        num_variables: Number of variables (computed if not provided)
    """
    with open(file_path, "w") as f:
        f.write(formula_to_text(clauses, num_variables))


def check_assignment(clauses: list[Clause], assignment: dict[int, bool]) -> bool:
    """
    Check if a variable assignment satisfies every clause.

    Args:
        clauses: List of (u, v) literal pairs
        assignment: Dictionary mapping variable indices to Boolean values

    Returns:
        True if the assignment satisfies the formula
    """
    return count_satisfied_clauses(clauses, assignment) == len(clauses)


def count_satisfied_clauses(clauses: list[Clause], assignment: dict[int, bool]) -> int:
    """
    Count the number of clauses satisfied by an assignment.

    Unassigned variables never satisfy a literal.

    Args:
        clauses: List of (u, v) literal pairs
        assignment: Dictionary mapping variable indices to Boolean values

    Returns:
        Number of satisfied clauses
    """
    satisfied_count = 0

    for clause in clauses:
        for literal in clause:
            var_idx = abs(literal)
            expected_value = literal > 0
            if var_idx in assignment and assignment[var_idx] == expected_value:
                satisfied_count += 1
                break

    return satisfied_count
