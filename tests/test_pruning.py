"""
Unit tests for the clause model and pure-literal pruning.
"""

import random
import unittest

from twosat.pruning import Clause, Variable, build_clauses, prune_clauses
from twosat.utils.exceptions import InvalidClauseError


class TestClauseModel(unittest.TestCase):
    """Test cases for Variable, Clause and build_clauses."""

    def test_clause_evaluation(self):
        """A clause is the OR of its two signed variables."""
        x1, x2 = Variable(1, False), Variable(2, True)
        clause = Clause(0, x1, True, x2, False)  # (x1 OR -x2)

        self.assertFalse(clause.evaluate())
        self.assertFalse(clause.value)
        x2.flip()
        self.assertTrue(clause.evaluate())
        self.assertTrue(clause.value)
        self.assertEqual(clause.literals, (1, -2))

    def test_variables_shared_between_clauses(self):
        """One Variable object per label."""
        clauses, variables = build_clauses([(1, 2), (-1, 3)], random.Random(0))

        self.assertEqual(sorted(variables), [1, 2, 3])
        self.assertIs(clauses[0].var1, clauses[1].var1)
        self.assertEqual([c.index for c in clauses], [0, 1])
        self.assertEqual(clauses[1].literals, (-1, 3))

    def test_initial_values_seeded(self):
        """Initial values come from the injected random source."""
        pairs = [(i, -(i + 1)) for i in range(1, 40)]
        _, first = build_clauses(pairs, random.Random(5))
        _, second = build_clauses(pairs, random.Random(5))

        self.assertEqual(
            {label: v.value for label, v in first.items()},
            {label: v.value for label, v in second.items()},
        )
        self.assertEqual({v.value for v in first.values()}, {True, False})

    def test_invalid_pair(self):
        """Invalid pairs are rejected."""
        with self.assertRaises(InvalidClauseError):
            build_clauses([(1, 0)], random.Random(0))


class TestPruneClauses(unittest.TestCase):
    """Test cases for prune_clauses."""

    def build(self, pairs):
        clauses, _ = build_clauses(pairs, random.Random(0))
        return clauses

    def test_pure_literal_clauses_removed(self):
        """Clauses containing a pure literal are deleted."""
        # x3 only appears positive
        clauses = self.build([(1, 2), (-1, -2), (1, 3), (-1, 2), (1, -2)])
        result = prune_clauses(clauses)

        self.assertEqual(
            [c.literals for c in result.clauses], [(1, 2), (-1, -2), (-1, 2), (1, -2)]
        )
        self.assertEqual(result.removed, 1)
        self.assertEqual(result.sweeps, 1)
        self.assertEqual(sorted(result.variables), [1, 2])

    def test_cascading_sweeps(self):
        """Deleting clauses can expose new pure literals."""
        # x3 is pure; once (-2 OR 3) is gone, x2 only appears positive
        clauses = self.build([(1, 2), (-2, 3), (-1, 4), (1, -4)])
        result = prune_clauses(clauses)

        self.assertEqual(result.sweeps, 2)
        self.assertEqual([c.literals for c in result.clauses], [(-1, 4), (1, -4)])
        self.assertEqual(sorted(result.variables), [1, 4])
        self.assertEqual(result.removed, 2)

    def test_everything_pruned(self):
        """An instance of pure literals only prunes to nothing."""
        result = prune_clauses(self.build([(1, 2), (-2, 3)]))

        self.assertTrue(result.is_empty)
        self.assertEqual(result.variables, {})
        self.assertEqual(result.removed, 2)

    def test_nothing_to_prune(self):
        """An instance where every literal occurs in both polarities is unchanged."""
        clauses = self.build([(1, 1), (-1, -1)])
        result = prune_clauses(clauses)

        self.assertEqual(len(result.clauses), 2)
        self.assertEqual(result.sweeps, 0)
        self.assertEqual(result.removed, 0)

    def test_empty_input(self):
        """No clauses in, no clauses out."""
        result = prune_clauses([])
        self.assertTrue(result.is_empty)
        self.assertEqual(result.sweeps, 0)

    def test_input_not_modified(self):
        """The input list is left as it was."""
        clauses = self.build([(1, 2), (3, 4)])
        prune_clauses(clauses)
        self.assertEqual(len(clauses), 2)

    def test_idempotent(self):
        """Pruning its own output deletes nothing more."""
        rng = random.Random(21)
        for _ in range(30):
            pairs = [
                (rng.randint(1, 8) * rng.choice((1, -1)), rng.randint(1, 8) * rng.choice((1, -1)))
                for _ in range(rng.randint(1, 16))
            ]
            first = prune_clauses(self.build(pairs))
            second = prune_clauses(first.clauses)

            with self.subTest(pairs=pairs):
                self.assertEqual(second.removed, 0)
                self.assertEqual(second.sweeps, 0)
                self.assertEqual(
                    [c.index for c in second.clauses], [c.index for c in first.clauses]
                )

    def test_survivors_have_both_polarities(self):
        """After pruning, every surviving literal's negation also survives."""
        clauses = self.build([(1, 2), (-1, 3), (-2, -3), (4, 5), (-4, 6)])
        result = prune_clauses(clauses)

        literals = {lit for c in result.clauses for lit in c.literals}
        for literal in literals:
            self.assertIn(-literal, literals)


if __name__ == "__main__":
    unittest.main()
