"""
Option records shared by the declared and the documented option sets.

An option record is one occurrence of a configuration option: its key and the
already-stringified default value, type and description. Both sets use the
same content fields and differ only in what their ``origin`` names (the
declaring unit or the documentation file).

Equality and hashing cover the four content fields only. The origin is carried
along for messages and never takes part in comparisons.
"""

from __future__ import annotations

from attrs import field, frozen, validators

_text = validators.instance_of(str)


@frozen
class OptionRecord:
    """Content fields of a single configuration option occurrence.

    Attributes
    ----------
    key
        Stable identifier of the option, never empty
    default_value
        Stringified default value (empty string if there is none)
    type_value
        Stringified type descriptor
    description
        Formatted description, may contain markup
    """

    key: str = field(validator=[_text, validators.min_len(1)])
    default_value: str = field(validator=_text)
    type_value: str = field(validator=_text)
    description: str = field(validator=_text)

    @property
    def content(self) -> tuple[str, str, str, str]:
        """The four content fields, in declaration order."""
        return (self.key, self.default_value, self.type_value, self.description)

    def matches(self, other: OptionRecord) -> bool:
        """
        Whether ``other`` documents the same default value and description.

        The type text is not compared: documentation may word a type
        differently from the declaration.
        """
        return (
            self.default_value == other.default_value
            and self.description == other.description
        )


@frozen
class DeclaredOption(OptionRecord):
    """An option as declared in source metadata, tagged with its declaring unit."""

    origin: str = field(eq=False, validator=_text)


@frozen
class DocumentedOption(OptionRecord):
    """An option as parsed from generated documentation, tagged with its file."""

    origin: str = field(eq=False, validator=_text)
