"""
Error message templates for option documentation checks.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "manifest_not_found": """
Declaration manifest not found: {path}

WHAT HAPPENED:
  The declared options could not be loaded because the manifest file
  does not exist.

LIKELY CAUSE:
  The metadata extraction step has not been run, or the configured
  declarations_manifest path is wrong.

HOW TO FIX:
  1. Re-run the option metadata extraction to produce the manifest
  2. Or point declarations_manifest at the existing file
""",
    "manifest_invalid": """
Declaration manifest {path} is invalid.

WHAT HAPPENED:
  The manifest could not be read as a list of declaring units.
  {details}

LIKELY CAUSE:
  The manifest was hand edited, truncated, or written by an older extractor.

HOW TO FIX:
  Regenerate the manifest. Every unit needs a name and a list of options,
  and every option needs key, default_value, type_value and description
  (use an empty string rather than leaving a field out).
""",
    "docs_folder_not_found": """
Generated documentation folder not found: {path}

WHAT HAPPENED:
  No documentation files could be listed for the completeness check.

LIKELY CAUSE:
  root_dir or generated_docs_dir is misconfigured.

HOW TO FIX:
  Check the configuration:
  >>> print(config.generated_docs_path)
""",
    "invalid_check_config": """
Completeness check configuration {path} is invalid.

WHAT HAPPENED:
  {details}

HOW TO FIX:
  {suggestion}
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def close_matches(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> list[str]:
    """Return the close matches of ``value`` among ``valid_options``, best first."""
    return get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = close_matches(value, valid_options, max_suggestions)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
