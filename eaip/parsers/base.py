import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import FieldParseError, MissingStructureError, UnknownEnumValueError
from .fields import parse_latlong

logger = logging.getLogger(__name__)


class SkipRow(Exception):
    """Raised by a column reader when the row is not a data row."""


class EAIPParser(ABC):
    """
    Base interface for eAIP page parsers.

    A parser turns the HTML of one eAIP page into records. Parsers keep no
    state between calls, so one instance can be shared freely.
    """

    # Kind of record produced, used in error messages and factory lookup
    RECORD_KIND: str = ''

    def parse(self, html_data: Union[bytes, str]) -> Any:
        """
        Parse eAIP page data.

        Args:
            html_data: Raw HTML, as text or UTF-8 bytes

        Returns:
            The records found on the page

        Raises:
            MissingStructureError: If the expected table or container is absent
            FieldParseError: If a field holds text in no accepted notation
            UnknownEnumValueError: If a label does not match a known value
        """
        if isinstance(html_data, bytes):
            html_data = html_data.decode('utf-8', errors='ignore')

        soup = BeautifulSoup(html_data, 'html.parser')
        try:
            return self._parse_soup(soup)
        except (FieldParseError, UnknownEnumValueError) as e:
            if e.record_kind is None:
                e.record_kind = self.RECORD_KIND
            logger.debug(f"Failed to parse {self.RECORD_KIND}: {e}")
            raise

    @abstractmethod
    def _parse_soup(self, soup: BeautifulSoup) -> Any:
        """Extract records from the parsed document."""
        pass

    def _select_first(self, element: Tag, selector: str, structure: str) -> Tag:
        """Return the first element matching selector, or raise MissingStructureError."""
        found = element.select_one(selector)
        if found is None:
            raise MissingStructureError(self.RECORD_KIND, structure)
        return found

    def _table_rows(self, soup: BeautifulSoup, row_selector: str = 'tr') -> List[Tag]:
        """
        Return the body rows of the first table in the document.

        Rows are read from the table's first <tbody>, or directly from the
        table when the page omits the tag (html.parser does not add it).
        """
        table = self._select_first(soup, 'table', 'base table')
        body = table.select_one(':scope > tbody')
        if body is None:
            body = table
        return body.select(f":scope > {row_selector}")


def merge_position(text: str, fields: Dict[str, Any]) -> None:
    """Parse coordinates from text into fields, keeping values already set for absent parts."""
    latitude, longitude = parse_latlong(text)
    if latitude is not None:
        fields['latitude'] = latitude
    if longitude is not None:
        fields['longitude'] = longitude
