"""Grouping of option records by key."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from option_docs.library.options.records import (
    DeclaredOption,
    DocumentedOption,
    OptionRecord,
)

RecordT = TypeVar("RecordT", bound=OptionRecord)

DeclaredOptions = Mapping[str, list[DeclaredOption]]
DocumentedOptions = Mapping[str, list[DocumentedOption]]


def group_by_key(records: Iterable[RecordT]) -> dict[str, list[RecordT]]:
    """
    Group option records by key.

    Keys keep the order in which they were first seen and each list keeps the
    order of its records.

    Parameters
    ----------
    records
        Option records in source order

    Returns
    -------
    :
        Mapping from key to the ordered occurrences of that key
    """
    grouped: dict[str, list[RecordT]] = {}
    for record in records:
        grouped.setdefault(record.key, []).append(record)
    return grouped


def count_records(options: Mapping[str, list[RecordT]]) -> int:
    """Total number of occurrences in a grouped mapping."""
    return sum(len(occurrences) for occurrences in options.values())
