"""
Reconciliation of declared options against documented options.

Every declared occurrence must find its own documented candidate with the same
key, default value and description. Candidates are consumed first come, first
served: declarations sharing a key are already known to be identical, so any
unconsumed candidate with the right content is as good a match as any other.
Whatever documentation is left over afterwards describes options that do not
exist.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from attrs import define, field

from option_docs.library.error_messages import close_matches
from option_docs.library.options.grouping import (
    DeclaredOptions,
    DocumentedOptions,
    count_records,
)
from option_docs.library.options.records import DeclaredOption, DocumentedOption
from option_docs.library.reconciliation.problems import CompletenessProblem

logger = logging.getLogger(__name__)


@define
class CandidateQueues:
    """
    Per-key queues of documented candidates still waiting for a declaration.

    The queues are private copies of the documented mapping, so consuming a
    candidate never changes the caller's data.
    """

    queues: dict[str, deque[DocumentedOption]] = field(factory=dict)

    @classmethod
    def from_documented(cls, documented: DocumentedOptions) -> CandidateQueues:
        return cls({key: deque(options) for key, options in documented.items()})

    def has_candidates(self, key: str) -> bool:
        return bool(self.queues.get(key))

    def consume_match(self, declared: DeclaredOption) -> DocumentedOption | None:
        """
        Remove and return the first candidate matching ``declared``.

        Returns ``None`` (consuming nothing) if no candidate matches.
        """
        queue = self.queues.get(declared.key)
        if not queue:
            return None

        for index, candidate in enumerate(queue):
            if declared.matches(candidate):
                del queue[index]
                return candidate
        return None

    def remaining(self) -> Iterator[DocumentedOption]:
        """Unconsumed candidates, in documented key order then queue order."""
        for queue in self.queues.values():
            yield from queue


def compare_documented_and_declared(
    documented: DocumentedOptions, declared: DeclaredOptions
) -> list[CompletenessProblem]:
    """
    Compare documented options with declared options.

    Parameters
    ----------
    documented
        Mapping from key to documented occurrences. Not modified.
    declared
        Mapping from key to declared occurrences, already validated to be
        well defined. Not modified.

    Returns
    -------
    :
        Problems in a deterministic order: problems of declared options in
        declared iteration order, followed by documented options that do not
        exist in documented iteration order
    """
    candidates = CandidateQueues.from_documented(documented)
    problems: list[CompletenessProblem] = []

    for key, occurrences in declared.items():
        for occurrence in occurrences:
            if not candidates.has_candidates(key):
                problems.append(CompletenessProblem.not_documented(occurrence))
            elif candidates.consume_match(occurrence) is None:
                problems.append(CompletenessProblem.outdated(occurrence))

    declared_keys = list(declared)
    for candidate in candidates.remaining():
        suggestion: tuple[str, ...] = ()
        if candidate.key not in declared:
            suggestion = tuple(close_matches(candidate.key, declared_keys))
        problems.append(CompletenessProblem.nonexistent(candidate, suggestion))

    logger.debug(
        "Compared %d documented with %d declared options: %d problems",
        count_records(documented),
        count_records(declared),
        len(problems),
    )
    return problems
