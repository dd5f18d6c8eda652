"""Pydantic models for the completeness check configuration."""

from __future__ import annotations

from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, Field, field_validator
from pyprojroot import here

from option_docs.library.error_messages import format_error, suggest_similar
from option_docs.library.exceptions import ConfigurationError
from option_docs.library.reconciliation.report import DEFAULT_INSTRUCTIONS


def _default_root_dir() -> Path:
    try:
        return here()
    except RuntimeError:
        return Path.cwd()


class CompletenessCheckConfig(BaseModel):
    """Locations of the artifacts compared by the completeness checks.

    Relative paths are resolved against ``root_dir``.
    """

    root_dir: Path = Field(
        default_factory=_default_root_dir, description="Project root directory"
    )
    generated_docs_dir: str = Field(
        "docs/_includes/generated",
        description="Folder holding the generated option tables",
    )
    common_section_file: str = Field(
        "common_section.html",
        description="File name of the common section table",
    )
    reference_file_filter: str = Field(
        "configuration",
        min_length=1,
        description="Substring selecting the full reference files by name",
    )
    common_section: str = Field(
        "common",
        min_length=1,
        description="Section tag of options documented in the common section",
    )
    declarations_manifest: str = Field(
        "docs/option_declarations.yaml",
        description="Manifest of declared options written by the extractor",
    )
    instructions: str = Field(
        DEFAULT_INSTRUCTIONS,
        description="Where the documentation regeneration instructions live",
    )

    model_config = {"extra": "forbid"}

    @field_validator("common_section_file")
    @classmethod
    def validate_plain_file_name(cls, v: str) -> str:
        """Validate that the common section file is a file name, not a path."""
        if not v or Path(v).name != v:
            raise ValueError(
                f"common_section_file must be a file name inside "
                f"generated_docs_dir, got {v!r}"
            )
        return v

    @property
    def generated_docs_path(self) -> Path:
        return self.root_dir / self.generated_docs_dir

    @property
    def common_section_path(self) -> Path:
        return self.generated_docs_path / self.common_section_file

    @property
    def declarations_manifest_path(self) -> Path:
        return self.root_dir / self.declarations_manifest


def _suggestion_for(error: pydantic.ValidationError) -> str:
    valid_fields = sorted(CompletenessCheckConfig.model_fields)
    for detail in error.errors():
        if detail["type"] == "extra_forbidden":
            return suggest_similar(str(detail["loc"][0]), valid_fields)
    return "Correct the values listed above."


def load_check_config(path: Path) -> CompletenessCheckConfig:
    """
    Load the completeness check configuration from YAML.

    A relative ``root_dir`` is resolved against the folder of the
    configuration file; without ``root_dir`` that folder is the root.

    Parameters
    ----------
    path
        Path to the YAML configuration file

    Returns
    -------
    :
        The validated configuration

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise ConfigurationError(f"Completeness check configuration not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Could not read completeness check configuration {path}: {e}"
        ) from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Completeness check configuration {path} must be a mapping, "
            f"got {type(raw).__name__}"
        )

    if raw.get("root_dir") is None:
        raw["root_dir"] = "."
    raw["root_dir"] = (path.parent / str(raw["root_dir"])).resolve()

    try:
        return CompletenessCheckConfig.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            format_error(
                "invalid_check_config",
                path=path,
                details=str(e),
                suggestion=_suggestion_for(e),
            )
        ) from e
