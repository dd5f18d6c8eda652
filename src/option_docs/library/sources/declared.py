"""
Declared option source.

The declared options are extracted from the code base by an external metadata
extractor, which writes a manifest listing every declaring unit (for example a
class holding option definitions) with its options. Default values, types and
descriptions arrive already stringified and formatted.

Loading errors are never skipped: a broken declaration scan would hide real
options and let incomplete documentation pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Protocol

import pydantic
import yaml
from attrs import define
from pydantic import BaseModel, Field

from option_docs.library.error_messages import format_error
from option_docs.library.exceptions import DataLoadingError
from option_docs.library.options.grouping import group_by_key
from option_docs.library.options.records import DeclaredOption

logger = logging.getLogger(__name__)


class OptionDeclaration(BaseModel):
    """One declared option, as extracted from its declaring unit."""

    key: str = Field(..., min_length=1, description="Option key")
    default_value: str = Field(..., description="Stringified default value")
    type_value: str = Field(..., description="Stringified type descriptor")
    description: str = Field(..., description="Formatted description")
    sections: list[str] = Field(
        default_factory=list,
        description="Documentation sections the option is tagged for",
    )

    model_config = {"frozen": True}


class DeclarationUnit(BaseModel):
    """A unit (class or module) declaring configuration options."""

    name: str = Field(..., min_length=1, description="Name of the declaring unit")
    options: list[OptionDeclaration] = Field(default_factory=list)


class DeclarationManifest(BaseModel):
    """All declaring units found by the metadata extractor."""

    units: list[DeclarationUnit] = Field(default_factory=list)


OptionPredicate = Callable[[OptionDeclaration], bool]


def all_options(declaration: OptionDeclaration) -> bool:
    """Select every declared option."""
    return True


def in_section(section: str) -> OptionPredicate:
    """
    Select declared options tagged for a documentation section.

    Parameters
    ----------
    section
        Section name, e.g. ``"common"``

    Returns
    -------
    :
        Predicate accepting declarations tagged with ``section``
    """

    def predicate(declaration: OptionDeclaration) -> bool:
        return section in declaration.sections

    return predicate


def load_declaration_manifest(path: Path) -> DeclarationManifest:
    """
    Load a declaration manifest from YAML.

    The manifest holds a ``units`` list; each unit has a ``name`` and a list
    of ``options``.

    Parameters
    ----------
    path
        Path to the manifest

    Returns
    -------
    :
        The validated manifest

    Raises
    ------
    DataLoadingError
        If the file is missing, is not valid YAML or does not match the
        manifest schema
    """
    if not path.exists():
        raise DataLoadingError(format_error("manifest_not_found", path=path))

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise DataLoadingError(
            format_error("manifest_invalid", path=path, details=str(e))
        ) from e

    try:
        manifest = DeclarationManifest.model_validate(raw or {})
    except pydantic.ValidationError as e:
        raise DataLoadingError(
            format_error("manifest_invalid", path=path, details=str(e))
        ) from e

    logger.info("Loaded %d declaring units from %s", len(manifest.units), path)
    return manifest


def find_declared_options(
    units: Iterable[DeclarationUnit],
    predicate: OptionPredicate = all_options,
) -> dict[str, list[DeclaredOption]]:
    """
    Collect the declared options selected by ``predicate``, grouped by key.

    Parameters
    ----------
    units
        Declaring units in scan order
    predicate
        Selection over individual declarations

    Returns
    -------
    :
        Mapping from key to declared occurrences, in scan order
    """
    return group_by_key(
        DeclaredOption(
            key=declaration.key,
            default_value=declaration.default_value,
            type_value=declaration.type_value,
            description=declaration.description,
            origin=unit.name,
        )
        for unit in units
        for declaration in unit.options
        if predicate(declaration)
    )


class DeclaredOptionSource(Protocol):
    """Provider of declared options for a selection predicate."""

    def __call__(
        self, predicate: OptionPredicate = all_options
    ) -> Mapping[str, list[DeclaredOption]]: ...


@define
class ManifestDeclaredOptionSource:
    """Declared option source backed by a manifest file.

    The manifest is read on every call, so each check pass works on its own
    freshly built mapping.
    """

    manifest_path: Path

    def __call__(
        self, predicate: OptionPredicate = all_options
    ) -> dict[str, list[DeclaredOption]]:
        manifest = load_declaration_manifest(self.manifest_path)
        return find_declared_options(manifest.units, predicate)
