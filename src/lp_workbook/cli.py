#!/usr/bin/env python3
"""CLI entry point for lp-workbook."""

import argparse
import sys

from .catalog import EXAMPLES, Example, get_example
from .solvers import SolverError, SolverFactory
from .transport import shipment_frame
from .utils.config_manager import ConfigManager
from .utils.logger import get_logger, setup_logging
from .workflow import create_solver, run

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lp-workbook",
        description="Build, solve and report the workbook's linear programs.",
    )
    parser.add_argument("--config", help="Path to config directory or YAML file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="List the worked examples")

    run_parser = commands.add_parser("run", help="Solve worked examples")
    run_parser.add_argument("example", help="Example name, or 'all'")
    run_parser.add_argument(
        "--solver",
        choices=SolverFactory.get_available_solvers(),
        help="Solver backend (default from config)",
    )
    return parser


def list_examples() -> None:
    """Print the example catalog."""
    width = max(len(name) for name in EXAMPLES)
    for example in EXAMPLES.values():
        print(f"{example.name:<{width}}  [{example.archetype}] {example.description}")


def run_example(example: Example, solver, config_manager: ConfigManager) -> bool:
    """Solve one example and print its data and report.

    Returns:
        True if the example solved to a consistent optimum
    """
    precision = config_manager.get_config().reporting.precision

    print(f"\n{example.name}: {example.description}")
    print("=" * 50)
    print(example.data().to_string(na_rep=""))

    model = example.build()
    solution, solution_report = run(model, solver, config_manager)
    print()
    print(solution_report.to_text(precision))

    if example.problem is not None and solution.is_optimal:
        print("\nShipments")
        print("-" * 50)
        print(shipment_frame(example.problem, solution).to_string())

    return solution_report.is_consistent


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.config)
    if args.log_level:
        config_manager.config.logging.level = args.log_level
    setup_logging(config_manager)

    if args.command == "list":
        list_examples()
        return 0

    if args.example == "all":
        examples = list(EXAMPLES.values())
    else:
        try:
            examples = [get_example(args.example)]
        except KeyError as e:
            print(f"❌ {e.args[0]}", file=sys.stderr)
            return 1

    try:
        solver = create_solver(args.solver, config_manager)
        results = [run_example(example, solver, config_manager) for example in examples]
    except SolverError as e:
        logger.error(f"Solver error: {e}")
        print(f"❌ Solver error: {e}", file=sys.stderr)
        return 1

    solved = sum(results)
    print(f"\n{solved}/{len(results)} examples solved to a consistent optimum")
    return 0


def cli():
    """CLI entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    cli()
