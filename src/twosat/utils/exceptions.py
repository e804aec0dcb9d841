"""
Custom exceptions for the twosat package.

This module defines the exception classes raised while reading 2-SAT instances
and handing clauses to the solvers. A solver that fails to find a satisfying
assignment does not raise: that outcome is reported through SolverResult.
"""


class TwoSatError(Exception):
    """Base class for all twosat specific exceptions."""

    def __init__(self, message: str = None):
        """
        Initialize the exception.

        Args:
            message: Optional error message
        """
        self.message = message
        super().__init__(message)


class ParseError(TwoSatError):
    """
    Exception raised when a 2-SAT input file is malformed.

    This covers a bad header, a clause line with the wrong number of tokens,
    non-integer tokens and out-of-range literals.
    """

    def __init__(
        self,
        message: str = "Malformed 2-SAT input",
        line_number: int = None,
        line: str = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            line_number: 1-based number of the offending line
            line: Text of the offending line
        """
        self.line_number = line_number
        self.line = line

        # Enhance the message with the location if available
        if line_number is not None:
            message = f"{message} (line {line_number}"
            if line is not None:
                message = f"{message}: {line!r}"
            message = f"{message})"

        super().__init__(message)


class InvalidClauseError(TwoSatError):
    """
    Exception raised when an invalid clause is handed to a solver.

    This occurs when a clause does not hold exactly two non-zero literals.
    """

    def __init__(self, message: str = "Invalid clause detected", clause=None):
        """
        Initialize the exception.

        Args:
            message: Error message
            clause: The invalid clause
        """
        self.clause = clause

        if clause is not None:
            message = f"{message}: {list(clause)}"

        super().__init__(message)
