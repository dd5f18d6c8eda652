"""
Documentation completeness checks.

A check verifies that every declared configuration option is documented with
its current default value and description, and that the documentation does
not describe options that no longer exist. Two passes are run:

- the common section pass compares options tagged for the common section with
  the common section table
- the full reference pass compares all declared options with every reference
  table

Each pass builds its own declared and documented mappings, so passes never
share candidates.
"""

from __future__ import annotations

import logging

from option_docs.library.config.models import CompletenessCheckConfig
from option_docs.library.options.grouping import (
    DeclaredOptions,
    DocumentedOptions,
    count_records,
)
from option_docs.library.reconciliation.problems import CompletenessProblem
from option_docs.library.reconciliation.reconciler import (
    compare_documented_and_declared,
)
from option_docs.library.reconciliation.report import (
    DEFAULT_INSTRUCTIONS,
    assert_documentation_complete,
)
from option_docs.library.sources.declared import (
    DeclaredOptionSource,
    ManifestDeclaredOptionSource,
    all_options,
    in_section,
)
from option_docs.library.sources.documented import (
    parse_documented_common_options,
    parse_documented_reference_options,
)
from option_docs.library.validation.ambiguity import (
    validate_declared_options_well_defined,
)

logger = logging.getLogger(__name__)


def find_completeness_problems(
    documented: DocumentedOptions, declared: DeclaredOptions
) -> list[CompletenessProblem]:
    """
    Validate the declared options and compare them with the documentation.

    Raises
    ------
    AmbiguousOptionError
        If the declared options are not well defined. No completeness
        problems are reported in that case.
    """
    validate_declared_options_well_defined(declared)
    return compare_documented_and_declared(documented, declared)


def run_completeness_check(
    documented: DocumentedOptions,
    declared: DeclaredOptions,
    *,
    instructions: str = DEFAULT_INSTRUCTIONS,
) -> list[CompletenessProblem]:
    """
    Check that the documentation is complete and up to date.

    Parameters
    ----------
    documented
        Mapping from key to documented occurrences
    declared
        Mapping from key to declared occurrences
    instructions
        Where the documentation regeneration instructions live, named in the
        report

    Returns
    -------
    :
        The problem list, which is empty when the check passes

    Raises
    ------
    AmbiguousOptionError
        If two declarations of one key differ
    DocumentationOutdatedError
        With every completeness problem, if any was found
    """
    logger.info(
        "Checking %d documented against %d declared options",
        count_records(documented),
        count_records(declared),
    )
    problems = find_completeness_problems(documented, declared)
    assert_documentation_complete(problems, instructions)
    logger.info("Documentation is complete")
    return problems


def _declared_source(
    config: CompletenessCheckConfig, declared_source: DeclaredOptionSource | None
) -> DeclaredOptionSource:
    if declared_source is not None:
        return declared_source
    return ManifestDeclaredOptionSource(config.declarations_manifest_path)


def check_common_section_completeness(
    config: CompletenessCheckConfig,
    declared_source: DeclaredOptionSource | None = None,
) -> None:
    """
    Check the common section against the options tagged for it.

    Parameters
    ----------
    config
        Artifact locations
    declared_source
        Source of declared options, defaults to the configured manifest

    Raises
    ------
    AmbiguousOptionError
        If two declarations of one key differ
    DocumentationOutdatedError
        With every completeness problem, if any was found
    """
    logger.info("Common section pass: %s", config.common_section_path)
    documented = parse_documented_common_options(
        config.generated_docs_path, config.common_section_file
    )
    declared = _declared_source(config, declared_source)(
        in_section(config.common_section)
    )
    run_completeness_check(documented, declared, instructions=config.instructions)


def check_full_reference_completeness(
    config: CompletenessCheckConfig,
    declared_source: DeclaredOptionSource | None = None,
) -> None:
    """
    Check the full reference against all declared options.

    Parameters
    ----------
    config
        Artifact locations
    declared_source
        Source of declared options, defaults to the configured manifest

    Raises
    ------
    AmbiguousOptionError
        If two declarations of one key differ
    DocumentationOutdatedError
        With every completeness problem, if any was found
    """
    logger.info(
        "Full reference pass: %s (*%s*)",
        config.generated_docs_path,
        config.reference_file_filter,
    )
    documented = parse_documented_reference_options(
        config.generated_docs_path, config.reference_file_filter
    )
    declared = _declared_source(config, declared_source)(all_options)
    run_completeness_check(documented, declared, instructions=config.instructions)


CHECK_PASSES = {
    "common": check_common_section_completeness,
    "full": check_full_reference_completeness,
}
