import re
import logging
from typing import Any, Dict, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import FieldParseError, MissingStructureError
from ..models import Airport, Chart
from .base import EAIPParser, merge_position
from .fields import parse_elevation
from .text import clean_text

logger = logging.getLogger(__name__)


class AirportListParser(EAIPParser):
    """
    Parser for the aerodromes table of contents (AD 0.1).

    Only the ICAO code and name of each airport are available here; the
    rest of the airport comes from its own page (see AirportParser).
    """

    RECORD_KIND = 'airports'
    ENTRY_SELECTOR = '.toc-block:nth-of-type(2) > .toc-block a'
    ENTRY_PATTERN = re.compile(r'^([A-Z]{4})(?:\s*[—–-]\s*|\s+)(.+)$')

    def _parse_soup(self, soup: BeautifulSoup) -> List[Airport]:
        airports = []
        for anchor in soup.select(self.ENTRY_SELECTOR):
            match = self.ENTRY_PATTERN.match(clean_text(anchor))
            if match:
                airports.append(Airport(icao=match.group(1), name=match.group(2).strip()))

        logger.debug(f"Found {len(airports)} airports in table of contents")
        return airports


class AirportParser(EAIPParser):
    """
    Parser for a single aerodrome page (AD 2.<ICAO>).

    The page title (.TitleAD) reads "EGBO — WOLVERHAMPTON/HALFPENNY GREEN".
    Section <ICAO>-AD-2.2 holds the aerodrome data table, with the reference
    point coordinates in its first row and the elevation in its third.
    Section <ICAO>-AD-2.24 lists charts as alternating title and link cells.
    """

    RECORD_KIND = 'airport'
    TITLE_SELECTOR = '.TitleAD'
    TITLE_SEPARATOR = '—'
    DATA_SECTION_SUFFIX = '-2.2'
    CHARTS_SECTION_SUFFIX = '-2.24'

    def _parse_soup(self, soup: BeautifulSoup) -> Airport:
        for container in soup.select('div'):
            title = container.select_one(self.TITLE_SELECTOR)
            if title is None:
                continue
            # The page describes a single airport, stop at the first title
            return self._parse_container(container, clean_text(title))

        raise MissingStructureError(self.RECORD_KIND, 'title')

    def _parse_container(self, container: Tag, title: str) -> Airport:
        icao, separator, name = title.partition(self.TITLE_SEPARATOR)
        if not separator:
            raise FieldParseError('title', title)

        fields: Dict[str, Any] = {'icao': icao.strip(), 'name': name.strip()}
        charts: List[Chart] = []
        for div in container.select('div'):
            div_id = div.get('id')
            if not div_id:
                continue
            if div_id.endswith(self.DATA_SECTION_SUFFIX):
                self._parse_data_section(div, fields)
            elif div_id.endswith(self.CHARTS_SECTION_SUFFIX):
                charts.extend(self._parse_charts_section(div))

        logger.debug(f"Parsed airport {fields['icao']} with {len(charts)} charts")
        return Airport(charts=tuple(charts), **fields)

    def _data_cell_text(self, section: Tag, row_number: int, structure: str) -> str:
        cell = section.select_one(f"tr:nth-child({row_number}) td:last-child")
        if cell is None:
            raise MissingStructureError(self.RECORD_KIND, structure)
        return clean_text(cell)

    def _parse_data_section(self, section: Tag, fields: Dict[str, Any]) -> None:
        merge_position(self._data_cell_text(section, 1, 'reference point row'), fields)
        fields['elevation'] = parse_elevation(self._data_cell_text(section, 3, 'elevation row'))

    def _parse_charts_section(self, section: Tag) -> List[Chart]:
        charts = []
        title = None
        for cell in section.select('td'):
            if title is None:
                title = clean_text(cell)
                continue
            anchor = cell.find('a', href=True)
            if anchor is None:
                raise FieldParseError('chart link', clean_text(cell))
            charts.append(Chart(title=title, url=anchor['href']))
            title = None
        return charts
