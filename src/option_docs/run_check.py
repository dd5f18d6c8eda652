"""
Run the documentation completeness checks.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from option_docs.library.checks import CHECK_PASSES
from option_docs.library.config import CompletenessCheckConfig, load_check_config
from option_docs.library.exceptions import (
    AmbiguousOptionError,
    ConfigurationError,
    DataLoadingError,
    DocumentationOutdatedError,
)
from option_docs.library.reconciliation.problems import CompletenessProblem
from option_docs.library.utils.io import write_problem_table

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG_ERROR = 2


def run_checks(
    config: CompletenessCheckConfig, passes: list[str]
) -> list[CompletenessProblem]:
    """
    Run the selected check passes.

    Every pass runs even if an earlier one found completeness problems; an
    ambiguous declaration aborts immediately.

    Parameters
    ----------
    config
        Artifact locations
    passes
        Names of the passes to run, keys of ``CHECK_PASSES``

    Returns
    -------
    :
        Problems of all passes, in pass order

    Raises
    ------
    AmbiguousOptionError
        If two declarations of one key differ
    DocumentationOutdatedError
        If any pass found completeness problems
    """
    problems: list[CompletenessProblem] = []
    reports: list[str] = []
    for name in passes:
        try:
            CHECK_PASSES[name](config)
        except DocumentationOutdatedError as e:
            problems.extend(e.problems)
            reports.append(f"[{name}] {e.report}")

    if reports:
        raise DocumentationOutdatedError("\n\n".join(reports), problems)
    return problems


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """
    Command-line interface for the completeness checks.

    Usage
    -----
    From the project root::

        python -m option_docs.run_check --config docs/option_docs.yaml
        python -m option_docs.run_check --pass common --problems-csv problems.csv

    Exit codes: 0 when the documentation is complete, 1 on completeness
    problems or ambiguous declarations, 2 on configuration or loading errors.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Check that the generated option documentation is complete"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (defaults are used when omitted)",
    )
    parser.add_argument(
        "--pass",
        dest="pass_name",
        choices=[*CHECK_PASSES, "all"],
        default="all",
        help="Which check pass to run",
    )
    parser.add_argument(
        "--problems-csv",
        type=Path,
        help="Also write the completeness problems to this CSV file",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug output")
    parser.add_argument(
        "--quiet", action="store_true", help="Only show warnings and errors"
    )
    args = parser.parse_args(argv)

    if args.verbose and args.quiet:
        print("Error: --verbose and --quiet cannot be used together", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.problems_csv and not args.problems_csv.parent.is_dir():
        print(
            f"Error: Output directory does not exist: {args.problems_csv.parent}",
            file=sys.stderr,
        )
        return EXIT_CONFIG_ERROR

    _configure_logging(args.verbose, args.quiet)
    passes = list(CHECK_PASSES) if args.pass_name == "all" else [args.pass_name]

    try:
        config = (
            load_check_config(args.config) if args.config else CompletenessCheckConfig()
        )
        run_checks(config, passes)
    except (ConfigurationError, DataLoadingError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except AmbiguousOptionError as e:
        print(str(e), file=sys.stderr)
        return EXIT_PROBLEMS
    except DocumentationOutdatedError as e:
        print(e.report, file=sys.stderr)
        if args.problems_csv:
            write_problem_table(e.problems, args.problems_csv)
            print(f"Problems written to: {args.problems_csv}", file=sys.stderr)
        return EXIT_PROBLEMS

    if args.problems_csv:
        write_problem_table([], args.problems_csv)
    if not args.quiet:
        print("Documentation is complete.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
