"""
I/O utilities for the option-docs library.

This module turns completeness problems into a table that CI jobs can archive
next to the human-readable report.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from option_docs.library.exceptions import DataLoadingError
from option_docs.library.reconciliation.problems import CompletenessProblem

PROBLEM_COLUMNS = [
    "kind",
    "key",
    "origin",
    "expected-default",
    "expected-description",
    "message",
]


def problems_to_dataframe(problems: Sequence[CompletenessProblem]) -> pd.DataFrame:
    """
    Convert completeness problems into a DataFrame.

    Parameters
    ----------
    problems
        Problems in report order

    Returns
    -------
    :
        One row per problem, in report order, with the columns in
        ``PROBLEM_COLUMNS``
    """
    rows = [
        {
            "kind": problem.kind.value,
            "key": problem.key,
            "origin": problem.origin,
            "expected-default": problem.expected_default,
            "expected-description": problem.expected_description,
            "message": problem.describe(),
        }
        for problem in problems
    ]
    return pd.DataFrame(rows, columns=PROBLEM_COLUMNS)


def write_problem_table(
    problems: Sequence[CompletenessProblem], output_path: Path
) -> Path:
    """
    Write completeness problems to a CSV file.

    Parameters
    ----------
    problems
        Problems in report order
    output_path
        Destination CSV file

    Returns
    -------
    :
        Path to the written file

    Raises
    ------
    DataLoadingError
        If the output directory does not exist
    """
    if not output_path.parent.exists():
        raise DataLoadingError(
            f"Output directory does not exist: {output_path.parent}"
        )

    problems_to_dataframe(problems).to_csv(output_path, index=False)
    return output_path
