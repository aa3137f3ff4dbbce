"""
Exceptions raised by the eaip library.

Extraction failures are reported as subclasses of EAIPError so callers can
handle every failure of a parse call with a single except clause, while still
being able to tell a missing table from an unparsable field.
"""

from typing import Optional


class EAIPError(Exception):
    """Base class for all eaip errors."""


class MissingStructureError(EAIPError):
    """An expected table or container is not present in the document."""

    def __init__(self, record_kind: str, structure: str):
        """
        Args:
            record_kind: Kind of record being extracted (e.g. 'navaids')
            structure: Description of the missing structure (e.g. 'base table')
        """
        super().__init__(record_kind, structure)
        self.record_kind = record_kind
        self.structure = structure

    def __str__(self) -> str:
        return f"Cannot extract {self.record_kind}: {self.structure} not present"


class UnknownEnumValueError(EAIPError):
    """A textual label does not match any known enum value."""

    def __init__(self, enum_name: str, value: str, record_kind: Optional[str] = None):
        super().__init__(enum_name, value)
        self.enum_name = enum_name
        self.value = value
        self.record_kind = record_kind

    def __str__(self) -> str:
        prefix = f"{self.record_kind}: " if self.record_kind else ""
        return f"{prefix}unknown {self.enum_name} {self.value!r}"


class FieldParseError(EAIPError):
    """A field's text did not match any accepted pattern."""

    def __init__(self, field: str, raw_text: str, record_kind: Optional[str] = None):
        """
        Args:
            field: Name of the field being parsed (e.g. 'frequency')
            raw_text: The text that failed to parse
            record_kind: Kind of record being extracted, filled in by the extractor
        """
        super().__init__(field, raw_text)
        self.field = field
        self.raw_text = raw_text
        self.record_kind = record_kind

    def __str__(self) -> str:
        prefix = f"{self.record_kind}: " if self.record_kind else ""
        return f"{prefix}cannot parse {self.field} from {self.raw_text!r}"


class FetchError(EAIPError):
    """A page could not be retrieved from an eAIP service."""

    def __init__(self, url: str, reason: str):
        super().__init__(url, reason)
        self.url = url
        self.reason = reason

    def __str__(self) -> str:
        return f"Error fetching {self.url}: {self.reason}"
