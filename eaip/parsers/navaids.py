import logging
from typing import Any, Callable, Dict, List

from bs4 import BeautifulSoup

from ..errors import FieldParseError
from ..models import NavAid, NavAidKind
from .base import EAIPParser, SkipRow, merge_position
from .fields import parse_elevation, parse_frequency
from .text import clean_text

logger = logging.getLogger(__name__)

ColumnReader = Callable[[str, Dict[str, Any]], None]


def _read_name_and_kind(text: str, fields: Dict[str, Any]) -> None:
    # Name on the first line, type label (VOR/DME, NDB...) on the second
    lines = text.split('\n')
    kind = lines[1].strip() if len(lines) > 1 else ''
    if not kind:
        raise SkipRow()
    fields['name'] = lines[0].strip()
    fields['kind'] = NavAidKind.from_label(kind)


def _read_ident(text: str, fields: Dict[str, Any]) -> None:
    fields['ident'] = text


def _read_frequency(text: str, fields: Dict[str, Any]) -> None:
    fields['frequency_khz'] = parse_frequency(text)


def _read_position(text: str, fields: Dict[str, Any]) -> None:
    merge_position(text, fields)


def _read_elevation(text: str, fields: Dict[str, Any]) -> None:
    # NDBs usually have no published elevation
    try:
        fields['elevation'] = parse_elevation(text)
    except FieldParseError:
        fields['elevation'] = 0


class NavaidParser(EAIPParser):
    """
    Parser for the radio navigation aids table (ENR 4.1).

    Columns: name and type, ident, frequency, hours, coordinates, elevation.
    """

    RECORD_KIND = 'navaids'

    COLUMNS: Dict[int, ColumnReader] = {
        0: _read_name_and_kind,
        1: _read_ident,
        2: _read_frequency,
        4: _read_position,
        5: _read_elevation,
    }

    def _parse_soup(self, soup: BeautifulSoup) -> List[NavAid]:
        navaids = []
        for row in self._table_rows(soup):
            fields: Dict[str, Any] = {}
            try:
                for index, cell in enumerate(row.select('td')):
                    reader = self.COLUMNS.get(index)
                    if reader is not None:
                        reader(clean_text(cell), fields)
            except SkipRow:
                continue

            if 'kind' not in fields:
                logger.debug(f"Skipping row without navaid type: {fields}")
                continue

            fields.setdefault('ident', '')
            navaids.append(NavAid(**fields))

        logger.debug(f"Parsed {len(navaids)} navaids")
        return navaids
