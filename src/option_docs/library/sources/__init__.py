"""
Sources of declared and documented options.

"""

from option_docs.library.sources.declared import (
    DeclarationManifest,
    DeclarationUnit,
    DeclaredOptionSource,
    ManifestDeclaredOptionSource,
    OptionDeclaration,
    OptionPredicate,
    all_options,
    find_declared_options,
    in_section,
    load_declaration_manifest,
)
from option_docs.library.sources.documented import (
    find_documentation_files,
    parse_documented_common_options,
    parse_documented_options,
    parse_documented_options_from_file,
    parse_documented_options_from_html,
    parse_documented_reference_options,
)

__all__ = [
    "DeclarationManifest",
    "DeclarationUnit",
    "DeclaredOptionSource",
    "ManifestDeclaredOptionSource",
    "OptionDeclaration",
    "OptionPredicate",
    "all_options",
    "find_declared_options",
    "find_documentation_files",
    "in_section",
    "load_declaration_manifest",
    "parse_documented_common_options",
    "parse_documented_options",
    "parse_documented_options_from_file",
    "parse_documented_options_from_html",
    "parse_documented_reference_options",
]
