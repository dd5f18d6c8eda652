"""
Aggregate reporting of completeness problems.

All problems of a pass are rendered into one report and raised as one error,
so an operator gets a single actionable list rather than a cascade of failures.
"""

from __future__ import annotations

from collections.abc import Sequence

from option_docs.library.exceptions import DocumentationOutdatedError
from option_docs.library.reconciliation.problems import CompletenessProblem

DEFAULT_INSTRUCTIONS = "docs/README.md"


def render_problem_report(
    problems: Sequence[CompletenessProblem],
    instructions: str = DEFAULT_INSTRUCTIONS,
) -> str | None:
    """
    Render the problems into a single report.

    Parameters
    ----------
    problems
        Problems in the order they were found
    instructions
        Where the documentation regeneration instructions live

    Returns
    -------
    :
        ``None`` if there are no problems, otherwise the report text: a fixed
        preamble followed by one line per problem
    """
    if not problems:
        return None

    lines = [
        "Documentation is outdated, please regenerate it according to the "
        f"instructions in {instructions}.",
        "\tProblems:",
    ]
    lines.extend(f"\t\t{problem.describe()}" for problem in problems)
    return "\n".join(lines)


def assert_documentation_complete(
    problems: Sequence[CompletenessProblem],
    instructions: str = DEFAULT_INSTRUCTIONS,
) -> None:
    """
    Raise one aggregate error if any completeness problem was found.

    Raises
    ------
    DocumentationOutdatedError
        If ``problems`` is not empty
    """
    report = render_problem_report(problems, instructions)
    if report is not None:
        raise DocumentationOutdatedError(report, list(problems))
