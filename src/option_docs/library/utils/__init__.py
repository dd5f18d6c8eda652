"""
Utility functions for the option-docs library.

"""

from option_docs.library.utils.io import (
    PROBLEM_COLUMNS,
    problems_to_dataframe,
    write_problem_table,
)

__all__ = [
    "PROBLEM_COLUMNS",
    "problems_to_dataframe",
    "write_problem_table",
]
