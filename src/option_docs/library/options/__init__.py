"""
Option records and their grouping by key.

"""

from option_docs.library.options.grouping import (
    DeclaredOptions,
    DocumentedOptions,
    count_records,
    group_by_key,
)
from option_docs.library.options.records import (
    DeclaredOption,
    DocumentedOption,
    OptionRecord,
)

__all__ = [
    "DeclaredOption",
    "DeclaredOptions",
    "DocumentedOption",
    "DocumentedOptions",
    "OptionRecord",
    "count_records",
    "group_by_key",
]
