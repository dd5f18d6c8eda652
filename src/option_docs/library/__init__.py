"""
Main components for the option-docs library.

Nothing is exported from this module, users should import from specific submodules:
- option_docs.library.checks (completeness check passes)
- option_docs.library.options (option records)
- option_docs.library.reconciliation (matching and problem reporting)
- option_docs.library.sources (declared and documented option sources)
- option_docs.library.validation (declaration validation)
"""

from __future__ import annotations
