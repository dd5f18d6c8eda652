"""
Exceptions that are used throughout the option-docs library.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from option_docs.library.options.records import DeclaredOption
    from option_docs.library.reconciliation.problems import CompletenessProblem


class OptionDocsError(Exception):
    """Base exception for option-docs library."""

    pass


class ConfigurationError(OptionDocsError):
    """Raised when the check configuration is invalid or missing."""

    pass


class DataError(OptionDocsError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when declaration manifests or documentation files cannot be loaded."""

    pass


class ValidationError(OptionDocsError):
    """Base exception for validation errors."""

    pass


class AmbiguousOptionError(ValidationError):
    """
    Raised when two declared options share a key but differ in content.

    This is a defect in the declarations themselves, so it is never batched
    with documentation completeness problems.
    """

    def __init__(
        self, message: str, key: str, first: DeclaredOption, second: DeclaredOption
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        message
            The error message

        key
            The ambiguous option key

        first
            The occurrence seen first

        second
            The conflicting occurrence
        """
        super().__init__(message)
        self.key = key
        self.first = first
        self.second = second


class AmbiguousDefaultValueError(AmbiguousOptionError):
    """Raised when declarations of the same key have distinct default values."""

    pass


class AmbiguousDescriptionError(AmbiguousOptionError):
    """Raised when declarations of the same key have distinct descriptions or types."""

    pass


class DocumentationOutdatedError(ValidationError):
    """
    Raised when the documentation is incomplete or stale.

    Carries every completeness problem found in one pass so a single
    regenerate-and-rerun cycle surfaces everything outstanding.
    """

    def __init__(self, report: str, problems: list[CompletenessProblem]) -> None:
        super().__init__(report)
        self.report = report
        self.problems = problems
