"""
Clause model and pure-literal pruning for the random-walk solver.

A literal whose negation never occurs in the instance can simply be made true,
which satisfies every clause it appears in. Those clauses are removed before
the random walk starts, and the removal is repeated until no pure literal is
left, since deleting clauses can make other literals pure.
"""

import logging
import random
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from .utils.cnf import validate_clause

logger = logging.getLogger(__name__)


class Variable:
    """A positive variable label with a mutable truth value."""

    __slots__ = ("label", "value")

    def __init__(self, label: int, value: bool):
        self.label = label
        self.value = value

    def flip(self) -> None:
        self.value = not self.value

    def __repr__(self) -> str:
        return f"var{self.label}{str(self.value).upper()}"


class Clause:
    """
    The disjunction of two (variable, sign) pairs. A true sign means the
    variable appears unnegated.
    """

    __slots__ = ("index", "var1", "sign1", "var2", "sign2", "value")

    def __init__(
        self, index: int, var1: Variable, sign1: bool, var2: Variable, sign2: bool
    ):
        self.index = index
        self.var1 = var1
        self.sign1 = sign1
        self.var2 = var2
        self.sign2 = sign2
        self.value = False

    @property
    def literals(self) -> tuple[int, int]:
        """The clause as two signed integers."""
        return (
            self.var1.label if self.sign1 else -self.var1.label,
            self.var2.label if self.sign2 else -self.var2.label,
        )

    @property
    def variables(self) -> tuple[Variable, Variable]:
        return self.var1, self.var2

    def evaluate(self) -> bool:
        """Recompute and cache the clause value under the current assignment."""
        first = self.var1.value if self.sign1 else not self.var1.value
        second = self.var2.value if self.sign2 else not self.var2.value
        self.value = first or second
        return self.value

    def __repr__(self) -> str:
        return (
            f"({'' if self.sign1 else '-'}{self.var1!r} v "
            f"{'' if self.sign2 else '-'}{self.var2!r})"
        )


def build_clauses(
    literal_pairs: Iterable, rng: random.Random
) -> tuple[list[Clause], dict[int, Variable]]:
    """
    Turn (u, v) literal pairs into Clause objects sharing Variable objects.

    A variable gets a uniformly random value from ``rng`` the first time its
    label is seen.

    Args:
        literal_pairs: Iterable of (u, v) literal pairs
        rng: Random source for the initial values

    Returns:
        Tuple of (clauses, variables by label)

    Raises:
        InvalidClauseError: If a pair is not a valid 2-SAT clause
    """
    variables: dict[int, Variable] = {}

    def get_or_create_variable(literal: int) -> Variable:
        label = abs(literal)
        if label not in variables:
            variables[label] = Variable(label, rng.random() < 0.5)
        return variables[label]

    clauses = []
    for index, pair in enumerate(literal_pairs):
        u, v = validate_clause(pair)
        clauses.append(
            Clause(
                index,
                get_or_create_variable(u),
                u > 0,
                get_or_create_variable(v),
                v > 0,
            )
        )

    return clauses, variables


@dataclass
class PruningResult:
    """Outcome of pruning: the surviving clauses and variables."""

    clauses: list[Clause]
    variables: dict[int, Variable] = field(default_factory=dict)
    sweeps: int = 0
    removed: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.clauses


def _index_clauses(
    clauses: Iterable[Clause],
) -> tuple[set[int], dict[int, list[Clause]]]:
    literals = set()
    by_variable = defaultdict(list)
    for clause in clauses:
        literals.update(clause.literals)
        by_variable[clause.var1.label].append(clause)
        if clause.var2 is not clause.var1:
            by_variable[clause.var2.label].append(clause)
    return literals, by_variable


def prune_clauses(clauses: list[Clause]) -> PruningResult:
    """
    Delete clauses satisfied by pure literals until a fixed point is reached.

    Each sweep collects every literal whose negation is absent from the
    surviving clauses and deletes every clause containing that literal's
    variable; the literal set and the variable -> clauses map are then rebuilt.
    The input list is not modified.

    Args:
        clauses: Clauses to prune

    Returns:
        PruningResult with the surviving clauses (in input order), the
        variables they use, the number of sweeps that deleted something, and
        the number of clauses removed
    """
    surviving = {clause.index: clause for clause in clauses}
    literals, by_variable = _index_clauses(surviving.values())
    sweeps = 0

    while True:
        pure = [literal for literal in literals if -literal not in literals]
        if not pure:
            break

        sweeps += 1
        for literal in pure:
            for clause in by_variable.get(abs(literal), ()):
                surviving.pop(clause.index, None)

        logger.debug(
            f"Sweep {sweeps}: {len(pure)} pure literals, {len(surviving)} clauses left"
        )
        literals, by_variable = _index_clauses(surviving.values())

    kept = [clause for clause in clauses if clause.index in surviving]
    variables = {}
    for clause in kept:
        for variable in clause.variables:
            variables.setdefault(variable.label, variable)

    return PruningResult(
        clauses=kept,
        variables=variables,
        sweeps=sweeps,
        removed=len(clauses) - len(kept),
    )
