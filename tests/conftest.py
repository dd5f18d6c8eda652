"""
Common fixtures for pytest unit and integration tests for the option-docs library.

"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from option_docs.library.options import (
    DeclaredOption,
    DocumentedOption,
    group_by_key,
)

# Standard test constants
STANDARD_DECLARING_UNIT = "CoreOptions"
STANDARD_DOCUMENT = "core_configuration.html"

TMP_DIRS_ROW = (
    "<h5>io.tmp.dirs</h5>",
    "none",
    "String",
    "Directories for temporary files.",
)


def declared(
    key: str,
    default_value: str = "5",
    type_value: str = "Integer",
    description: str = "desc",
    origin: str = STANDARD_DECLARING_UNIT,
) -> DeclaredOption:
    """Build a declared option with sensible defaults."""
    return DeclaredOption(
        key=key,
        default_value=default_value,
        type_value=type_value,
        description=description,
        origin=origin,
    )


def documented(
    key: str,
    default_value: str = "5",
    type_value: str = "Integer",
    description: str = "desc",
    origin: str = STANDARD_DOCUMENT,
) -> DocumentedOption:
    """Build a documented option with sensible defaults."""
    return DocumentedOption(
        key=key,
        default_value=default_value,
        type_value=type_value,
        description=description,
        origin=origin,
    )


def grouped(*records):
    """Group records by key, as the option sources do."""
    return group_by_key(records)


def option_table(
    rows: list[tuple[str, str, str, str]], with_tbody: bool = True
) -> str:
    """
    Render an option table the way the documentation generator does.

    Each row is (key cell, default, type, description) given as raw HTML.
    """
    body = "".join(
        f"<tr><td>{key}</td><td>{default}</td><td>{type_}</td><td>{desc}</td></tr>"
        for key, default, type_, desc in rows
    )
    if with_tbody:
        body = f"<tbody>{body}</tbody>"
    return (
        '<table class="configuration table table-bordered">'
        "<thead><tr><th>Key</th><th>Default</th><th>Type</th><th>Description</th>"
        f"</tr></thead>{body}</table>"
    )


def write_manifest(path: Path, units: dict[str, list[dict]]) -> Path:
    """Write a declaration manifest with the given units."""
    manifest = {
        "units": [
            {"name": name, "options": options} for name, options in units.items()
        ]
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(manifest, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def sample_declarations():
    """Declarations of two units sharing one key, in manifest form."""
    return {
        "CoreOptions": [
            {
                "key": "parallelism.default",
                "default_value": "1",
                "type_value": "Integer",
                "description": "Default parallelism for jobs.",
                "sections": ["common"],
            },
            {
                "key": "io.tmp.dirs",
                "default_value": "none",
                "type_value": "String",
                "description": "Directories for temporary files.",
                "sections": [],
            },
        ],
        "WebOptions": [
            {
                "key": "web.port",
                "default_value": "8081",
                "type_value": "Integer",
                "description": "Port of the <code>web</code> frontend.",
                "sections": ["common"],
            },
            {
                "key": "io.tmp.dirs",
                "default_value": "none",
                "type_value": "String",
                "description": "Directories for temporary files.",
            },
        ],
    }


@pytest.fixture
def project(tmp_path, sample_declarations):
    """
    A project tree whose documentation matches its declarations.

    Returns the project root; the generated tables live in
    docs/_includes/generated and the manifest in docs/option_declarations.yaml.
    """
    generated = tmp_path / "docs" / "_includes" / "generated"
    generated.mkdir(parents=True)

    common_rows = [
        (
            "<h5>parallelism.default</h5>",
            "1",
            "Integer",
            "Default parallelism for jobs.",
        ),
        (
            "<h5>web.port</h5>",
            "8081",
            "Integer",
            "Port of the <code>web</code> frontend.",
        ),
    ]
    (generated / "common_section.html").write_text(
        option_table(common_rows), encoding="utf-8"
    )
    (generated / "core_configuration.html").write_text(
        option_table(
            [
                common_rows[0],
                TMP_DIRS_ROW,
                TMP_DIRS_ROW,
            ]
        ),
        encoding="utf-8",
    )
    (generated / "web_configuration.html").write_text(
        option_table([common_rows[1]]), encoding="utf-8"
    )

    write_manifest(tmp_path / "docs" / "option_declarations.yaml", sample_declarations)
    return tmp_path
