"""
Completeness problems found when comparing documentation with declarations.

"""

from __future__ import annotations

from enum import Enum

from attrs import frozen

from option_docs.library.options.records import DeclaredOption, DocumentedOption


class ProblemKind(Enum):
    """Kinds of documentation completeness problems."""

    NOT_DOCUMENTED = "not-documented"
    OUTDATED = "outdated"
    NONEXISTENT = "nonexistent"


@frozen
class CompletenessProblem:
    """A single documentation gap.

    Attributes
    ----------
    kind
        What is wrong with the documentation
    key
        The option key concerned
    origin
        Declaring unit for declared-side problems, documentation file for
        options that no longer exist
    expected_default
        Default value the documentation should show (outdated problems only)
    expected_description
        Description the documentation should show (outdated problems only)
    suggestion
        Declared keys close to a nonexistent documented key, best first
    """

    kind: ProblemKind
    key: str
    origin: str
    expected_default: str | None = None
    expected_description: str | None = None
    suggestion: tuple[str, ...] = ()

    @classmethod
    def not_documented(cls, declared: DeclaredOption) -> CompletenessProblem:
        return cls(ProblemKind.NOT_DOCUMENTED, declared.key, declared.origin)

    @classmethod
    def outdated(cls, declared: DeclaredOption) -> CompletenessProblem:
        return cls(
            ProblemKind.OUTDATED,
            declared.key,
            declared.origin,
            expected_default=declared.default_value,
            expected_description=declared.description,
        )

    @classmethod
    def nonexistent(
        cls, documented: DocumentedOption, suggestion: tuple[str, ...] = ()
    ) -> CompletenessProblem:
        return cls(
            ProblemKind.NONEXISTENT,
            documented.key,
            documented.origin,
            suggestion=suggestion,
        )

    def describe(self) -> str:
        """One-line, human-readable description of the problem."""
        if self.kind is ProblemKind.NOT_DOCUMENTED:
            return f"Option {self.key} in {self.origin} is not documented."

        if self.kind is ProblemKind.OUTDATED:
            return (
                f"Documentation of {self.key} in {self.origin} is outdated. "
                f"Expected: default=({self.expected_default}) "
                f"description=({self.expected_description})."
            )

        message = f"Documented option {self.key} (in {self.origin}) does not exist."
        if self.suggestion:
            message += f" Did you mean: {', '.join(self.suggestion)}?"
        return message
