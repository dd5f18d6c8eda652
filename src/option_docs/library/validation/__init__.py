"""
Validation for the option-docs library.

"""

from .ambiguity import validate_declared_options_well_defined

__all__ = [
    "validate_declared_options_well_defined",
]
