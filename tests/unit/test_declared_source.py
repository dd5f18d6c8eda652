"""Tests for loading and selecting declared options."""

from __future__ import annotations

import pytest
from conftest import write_manifest

from option_docs.library.exceptions import DataLoadingError
from option_docs.library.sources import (
    DeclarationUnit,
    ManifestDeclaredOptionSource,
    OptionDeclaration,
    all_options,
    find_declared_options,
    in_section,
    load_declaration_manifest,
)


def declaration(key: str, sections: list[str] | None = None) -> OptionDeclaration:
    return OptionDeclaration(
        key=key,
        default_value="1",
        type_value="Integer",
        description=f"Description of {key}.",
        sections=sections or [],
    )


class TestFindDeclaredOptions:
    """Tests for find_declared_options."""

    def test_groups_by_key_with_unit_origin(self):
        """Test that options are grouped by key and tagged with their unit."""
        units = [
            DeclarationUnit(name="A", options=[declaration("x"), declaration("y")]),
            DeclarationUnit(name="B", options=[declaration("x")]),
        ]

        declared = find_declared_options(units)

        assert list(declared) == ["x", "y"]
        assert [o.origin for o in declared["x"]] == ["A", "B"]
        assert declared["y"][0].description == "Description of y."

    def test_section_predicate_filters(self):
        """Test that in_section keeps only options tagged for the section."""
        units = [
            DeclarationUnit(
                name="A",
                options=[declaration("x", ["common"]), declaration("y", ["other"])],
            )
        ]

        declared = find_declared_options(units, in_section("common"))

        assert list(declared) == ["x"]

    def test_all_options_selects_everything(self):
        """Test that the default predicate keeps every declaration."""
        units = [DeclarationUnit(name="A", options=[declaration("x", ["common"])])]
        assert find_declared_options(units, all_options) == find_declared_options(
            units
        )


class TestLoadDeclarationManifest:
    """Tests for load_declaration_manifest."""

    def test_loads_manifest(self, tmp_path, sample_declarations):
        """Test that a valid manifest is loaded unit by unit."""
        path = write_manifest(tmp_path / "manifest.yaml", sample_declarations)

        manifest = load_declaration_manifest(path)

        assert [unit.name for unit in manifest.units] == ["CoreOptions", "WebOptions"]
        assert manifest.units[0].options[0].sections == ["common"]
        assert manifest.units[1].options[1].sections == []

    def test_missing_manifest_is_a_hard_error(self, tmp_path):
        """Test that a missing manifest is never treated as no declarations."""
        with pytest.raises(DataLoadingError, match="Declaration manifest not found"):
            load_declaration_manifest(tmp_path / "absent.yaml")

    def test_invalid_yaml_is_a_hard_error(self, tmp_path):
        """Test that unparsable YAML raises."""
        path = tmp_path / "manifest.yaml"
        path.write_text("units: [unclosed", encoding="utf-8")

        with pytest.raises(DataLoadingError, match="is invalid"):
            load_declaration_manifest(path)

    def test_missing_field_is_a_hard_error(self, tmp_path):
        """Test that an option without a description is rejected."""
        path = write_manifest(
            tmp_path / "manifest.yaml",
            {"A": [{"key": "x", "default_value": "1", "type_value": "Integer"}]},
        )

        with pytest.raises(DataLoadingError, match="description"):
            load_declaration_manifest(path)

    def test_empty_manifest_has_no_units(self, tmp_path):
        """Test that an empty file is an empty manifest."""
        path = tmp_path / "manifest.yaml"
        path.write_text("", encoding="utf-8")

        assert load_declaration_manifest(path).units == []


class TestManifestDeclaredOptionSource:
    """Tests for ManifestDeclaredOptionSource."""

    def test_source_applies_predicate(self, tmp_path, sample_declarations):
        """Test that the source loads the manifest and filters by predicate."""
        source = ManifestDeclaredOptionSource(
            write_manifest(tmp_path / "manifest.yaml", sample_declarations)
        )

        common = source(in_section("common"))
        everything = source()

        assert list(common) == ["parallelism.default", "web.port"]
        assert list(everything) == ["parallelism.default", "io.tmp.dirs", "web.port"]
        assert [o.origin for o in everything["io.tmp.dirs"]] == [
            "CoreOptions",
            "WebOptions",
        ]

    def test_each_call_builds_a_new_mapping(self, tmp_path, sample_declarations):
        """Test that separate calls never share mutable lists."""
        source = ManifestDeclaredOptionSource(
            write_manifest(tmp_path / "manifest.yaml", sample_declarations)
        )

        first = source()
        second = source()

        assert first == second
        assert first["web.port"] is not second["web.port"]
