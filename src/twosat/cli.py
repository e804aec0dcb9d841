"""
Command-line interface for deciding 2-SAT instances.

Every file is solved independently; a file that cannot be read or parsed is
reported and skipped, and the remaining files are still processed.

Usage:
    twosat 2sat1.txt 2sat2.txt
    twosat --solver all --seed 7 --results results.jsonl data/2sat*.txt
"""

import argparse
import logging
import sys
import time

from twosat.solvers import (
    SolverRegistry,
    SolverResult,
    SolverStatus,
    load_config,
    reset_config,
)
from twosat.utils.cnf import load_two_sat_file
from twosat.utils.exceptions import ParseError
from twosat.utils.logging_utils import ResultLogger, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decide satisfiability of 2-CNF formulas",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("files", nargs="+", help="2-SAT instance files")
    parser.add_argument(
        "--solver",
        choices=SolverRegistry.list_solvers() + ["all"],
        default=None,
        help="Solver to run (default: solver.name from the configuration)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the randomized solver"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="YAML or JSON configuration file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace vertex, edge, component and clause state",
    )
    parser.add_argument(
        "--log-level", type=str, default=None, help="Logging level for the console"
    )
    parser.add_argument(
        "--results", type=str, default=None, help="Append results to a JSON Lines file"
    )
    return parser


def solve_file(file_path: str, solver_names: list[str], solver_kwargs: dict) -> dict:
    """
    Run every requested solver on one file.

    Args:
        file_path: Path of the instance
        solver_names: Registered names of the solvers to run
        solver_kwargs: Keyword arguments passed to every solver

    Returns:
        Mapping of solver name to SolverResult

    Raises:
        ParseError: If the file is malformed
        OSError: If the file cannot be read
    """
    clauses, metadata = load_two_sat_file(file_path)
    logger.debug(
        f"{file_path}: {metadata['num_variables']} variables, "
        f"{metadata['num_clauses']} clauses"
    )

    results = {}
    for name in solver_names:
        solver = SolverRegistry.create(name, **solver_kwargs)
        solver.add_clauses(clauses)
        results[name] = solver.solve()
    return results


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        0 if every file produced a verdict, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else reset_config()
    except FileNotFoundError as e:
        parser.error(str(e))

    if args.seed is not None:
        config.set("solver.seed", args.seed)
    if args.debug:
        config.set("solver.debug", True)
    if args.results:
        config.set("output.results", args.results)

    level = args.log_level or ("DEBUG" if args.debug else config.get("logging.level"))
    setup_logging(level, config.get("logging.file"), config.get("logging.format"))

    solver_name = args.solver or config.get("solver.name")
    try:
        solver_names = SolverRegistry.resolve(solver_name)
    except ValueError as e:
        parser.error(str(e))
    solver_kwargs = {
        "debug": config.get("solver.debug"),
    }

    results_path = config.get("output.results")
    result_logger = ResultLogger(results_path) if results_path else None

    failures = 0
    start_time = time.time()
    try:
        for file_path in args.files:
            print("=" * 58)
            print(f"Running {file_path}...")
            try:
                results = solve_file(file_path, solver_names, solver_kwargs)
            except (ParseError, OSError) as e:
                failures += 1
                logger.error(f"Skipping {file_path}: {e}")
                error = SolverResult(SolverStatus.ERROR, error_message=str(e))
                print(f"{file_path}: {error}")
                if result_logger:
                    result_logger.log_error(file_path, e)
                continue

            for name, result in results.items():
                print(f"{name}: {result}")
                if result_logger:
                    result_logger.log_result(file_path, name, result)
    finally:
        if result_logger:
            result_logger.close()

    print(f"Total elapsed time (in millisecs): {(time.time() - start_time) * 1000:.0f}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
