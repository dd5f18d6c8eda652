"""
Validation that declared options are well defined.

The same option key may be declared more than once (for example when several
units re-export a shared option), but every declaration of a key must be
identical. A mismatch is a defect in the declarations, not a documentation
gap, so it aborts the check on the first conflict found.
"""

from __future__ import annotations

import logging
from functools import reduce

from option_docs.library.exceptions import (
    AmbiguousDefaultValueError,
    AmbiguousDescriptionError,
)
from option_docs.library.options.grouping import DeclaredOptions
from option_docs.library.options.records import DeclaredOption

logger = logging.getLogger(__name__)


def _collapse_identical(
    first: DeclaredOption, second: DeclaredOption
) -> DeclaredOption:
    if first == second:
        return first

    if first.default_value != second.default_value:
        raise AmbiguousDefaultValueError(
            f"Ambiguous option {first.key} due to distinct default values "
            f"({first.default_value} (in {first.origin}) vs "
            f"{second.default_value} (in {second.origin})).",
            key=first.key,
            first=first,
            second=second,
        )

    raise AmbiguousDescriptionError(
        f"Ambiguous option {first.key} due to distinct descriptions "
        f"({first.origin} vs {second.origin}).",
        key=first.key,
        first=first,
        second=second,
    )


def validate_declared_options_well_defined(declared: DeclaredOptions) -> None:
    """
    Validate that all declarations sharing a key are identical.

    Each key's occurrences are reduced left to right: identical neighbours
    collapse into one, the first differing pair raises.

    Parameters
    ----------
    declared
        Mapping from option key to its declared occurrences

    Raises
    ------
    AmbiguousDefaultValueError
        If two declarations of a key have distinct default values
    AmbiguousDescriptionError
        If two declarations of a key share the default value but differ in
        description or type
    """
    for occurrences in declared.values():
        if len(occurrences) > 1:
            reduce(_collapse_identical, occurrences)

    logger.debug("Declared options are well defined (%d keys)", len(declared))
