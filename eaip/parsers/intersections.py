import logging
from typing import Any, Callable, Dict, List

from bs4 import BeautifulSoup

from ..models import Intersection
from .base import EAIPParser, SkipRow, merge_position
from .text import clean_text

logger = logging.getLogger(__name__)


def _read_designator(text: str, fields: Dict[str, Any]) -> None:
    if not text:
        raise SkipRow()
    fields['designator'] = text


def _read_position(text: str, fields: Dict[str, Any]) -> None:
    # A cell may stack several coordinate fragments, one per line
    for line in text.split('\n'):
        line = line.strip()
        if line:
            merge_position(line, fields)


class IntersectionParser(EAIPParser):
    """Parser for the en-route significant points table (ENR 4.4)."""

    RECORD_KIND = 'intersections'
    ROW_SELECTOR = 'tr.Table-row-type-3'

    COLUMNS: Dict[int, Callable[[str, Dict[str, Any]], None]] = {
        0: _read_designator,
        1: _read_position,
    }

    def _parse_soup(self, soup: BeautifulSoup) -> List[Intersection]:
        intersections = []
        for row in self._table_rows(soup, self.ROW_SELECTOR):
            fields: Dict[str, Any] = {}
            try:
                for index, cell in enumerate(row.select('td')):
                    reader = self.COLUMNS.get(index)
                    if reader is not None:
                        reader(clean_text(cell), fields)
            except SkipRow:
                continue

            if 'designator' not in fields:
                continue
            intersections.append(Intersection(**fields))

        logger.debug(f"Parsed {len(intersections)} intersections")
        return intersections
