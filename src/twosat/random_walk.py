"""
Papadimitriou's randomized local search for 2-SAT.

Repeat log2(n) times: start from a random assignment and, for up to 2n^2
steps, pick a falsified clause at random and flip one of its two variables at
random. If the formula is satisfiable, one round finds a satisfying assignment
with probability at least 1/2, so failing every round means the formula is
unsatisfiable with high probability. A satisfying verdict is always correct.
"""

import logging
import random

from .pruning import Clause, Variable

logger = logging.getLogger(__name__)


class FalsifiedClauses:
    """
    The set of currently falsified clauses with O(1) add, remove and uniform
    random choice.
    """

    def __init__(self):
        self._items: list[Clause] = []
        self._positions: dict[int, int] = {}

    def add(self, clause: Clause) -> None:
        if clause.index not in self._positions:
            self._positions[clause.index] = len(self._items)
            self._items.append(clause)

    def discard(self, clause: Clause) -> None:
        position = self._positions.pop(clause.index, None)
        if position is None:
            return
        last = self._items.pop()
        if last is not clause:
            self._items[position] = last
            self._positions[last.index] = position

    def choice(self, rng: random.Random) -> Clause:
        return self._items[rng.randrange(len(self._items))]

    def clear(self) -> None:
        self._items.clear()
        self._positions.clear()

    def __len__(self) -> int:
        return len(self._items)


class RandomWalkSearch:
    """
    Random walk over the assignments of a pruned clause set.

    The search owns ``clauses`` and ``variables`` for the duration of
    ``search()`` and flips variable values in place.

    Args:
        clauses: Clauses to satisfy
        variables: Every variable the clauses use, keyed by label
        rng: Random source for clause choice, variable choice and restarts
        debug: Emit a DEBUG trace of each round
    """

    def __init__(
        self,
        clauses: list[Clause],
        variables: dict[int, Variable],
        rng: random.Random,
        debug: bool = False,
    ):
        self.clauses = clauses
        self.variables = variables
        self.rng = rng
        self.debug = debug
        self.rounds = 0
        self.flips = 0
        self._falsified = FalsifiedClauses()
        self._clauses_by_variable: dict[int, list[Clause]] = {}
        for clause in clauses:
            self._clauses_by_variable.setdefault(clause.var1.label, []).append(clause)
            if clause.var2 is not clause.var1:
                self._clauses_by_variable.setdefault(clause.var2.label, []).append(
                    clause
                )

    @property
    def num_variables(self) -> int:
        return len(self.variables)

    def all_clauses_true(self) -> bool:
        """Re-evaluate every clause and rebuild the falsified set."""
        self._falsified.clear()
        for clause in self.clauses:
            if not clause.evaluate():
                self._falsified.add(clause)
        return not self._falsified

    def randomize(self) -> None:
        """Assign every variable a uniformly random value."""
        for variable in self.variables.values():
            variable.value = self.rng.random() < 0.5

    def flip(self, variable: Variable) -> None:
        """Flip one variable and re-evaluate only the clauses that contain it."""
        variable.flip()
        self.flips += 1
        for clause in self._clauses_by_variable.get(variable.label, ()):
            if clause.evaluate():
                self._falsified.discard(clause)
            else:
                self._falsified.add(clause)

    def step(self) -> None:
        """Flip a random variable of a random falsified clause."""
        clause = self._falsified.choice(self.rng)
        variable = clause.var1 if self.rng.random() < 0.5 else clause.var2
        self.flip(variable)

    def search(self) -> bool:
        """
        Run the random walk.

        Returns:
            True if a satisfying assignment was found, False if every round
            ran out of flips (probably unsatisfiable)
        """
        if not self.clauses:
            return True

        n = self.num_variables
        max_flips = 2 * n * n
        self.rounds = 0
        self.flips = 0

        i = 1
        while i <= n:
            self.rounds += 1
            if self.rounds > 1:
                self.randomize()

            if self.debug:
                logger.debug(f"Running round {self.rounds} (i = {i})")

            if self.all_clauses_true():
                return True
            for _ in range(max_flips):
                self.step()
                if not self._falsified:
                    logger.debug(
                        f"Satisfying assignment found after {self.flips} flips"
                    )
                    return True

            if self.debug:
                logger.debug(
                    f"Round {self.rounds} ended with "
                    f"{len(self._falsified)} false clauses"
                )
            i *= 2

        return False

    def assignment(self) -> dict[int, bool]:
        """The current value of every variable."""
        return {label: variable.value for label, variable in self.variables.items()}
