from typing import Dict, List, Type

from .base import EAIPParser


class EAIPParserFactory:
    """Factory for creating eAIP page parsers based on record kind."""

    _parsers: Dict[str, Type[EAIPParser]] = {}

    @classmethod
    def register_parser(cls, record_kind: str, parser_class: Type[EAIPParser]) -> None:
        """
        Register a parser for a record kind.

        Args:
            record_kind: Record kind (e.g., 'navaids', 'airport')
            parser_class: Parser class to register
        """
        cls._parsers[record_kind] = parser_class

    @classmethod
    def get_parser(cls, record_kind: str) -> EAIPParser:
        """
        Get a parser for a record kind.

        Raises:
            ValueError: If no parser is registered for the record kind
        """
        parser_class = cls._parsers.get(record_kind)
        if parser_class is None:
            raise ValueError(f"No parser registered for record kind: {record_kind}")
        return parser_class()

    @classmethod
    def get_supported_kinds(cls) -> List[str]:
        """Get list of record kinds with a registered parser."""
        return list(cls._parsers.keys())
