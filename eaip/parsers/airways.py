import re
import logging
from typing import Dict, Iterator, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import FieldParseError
from ..models import Airway, AirwayWaypoint
from .base import EAIPParser
from .text import clean_text

logger = logging.getLogger(__name__)


class AirwayParser(EAIPParser):
    """
    Parser for the ATS routes page (ENR 3.x).

    Each <tbody> holds one airway (a whole table when the page omits the
    tag): a type-1 row with the designator, a type-2 row per waypoint and,
    between them, type-3 rows with the segment limits.
    """

    RECORD_KIND = 'airways'

    DESIGNATOR_SELECTOR = 'tr.Table-row-type-1 > td:first-child'
    WAYPOINT_SELECTOR = 'tr.Table-row-type-2 > td:nth-child(2)'
    DETAIL_SELECTOR = 'tr.Table-row-type-3'
    UPPER_LIMIT_SELECTOR = 'td:nth-child(4) td.Upper'
    LOWER_LIMIT_SELECTOR = 'td:nth-child(4) td.Lower'

    NAVAID_PATTERN = re.compile(r'\(([A-Z]{3})\)')
    INTERSECTION_PATTERN = re.compile(r'^([A-Z]{5})\b')

    def _parse_soup(self, soup: BeautifulSoup) -> List[Airway]:
        airways = []
        for group in self._groups(soup):
            airway = self._parse_group(group)
            if airway is not None:
                airways.append(airway)

        logger.debug(f"Parsed {len(airways)} airways")
        return airways

    def _groups(self, soup: BeautifulSoup) -> Iterator[Tag]:
        for table in soup.select('table'):
            bodies = table.select(':scope > tbody')
            if bodies:
                yield from bodies
            else:
                yield table

    def _parse_group(self, group: Tag):
        designator_cell = group.select_one(self.DESIGNATOR_SELECTOR)
        if designator_cell is None:
            return None
        # Designator on the first line, annotations (e.g. RNAV) below it
        designator = clean_text(designator_cell).split('\n')[0].strip()

        waypoints: List[Dict[str, str]] = [
            {'designator': self._waypoint_designator(clean_text(cell))}
            for cell in group.select(self.WAYPOINT_SELECTOR)
        ]

        details = group.select(self.DETAIL_SELECTOR)
        if len(details) > len(waypoints):
            logger.debug(f"{designator}: {len(details)} detail rows for {len(waypoints)} waypoints")
        for waypoint, detail in zip(waypoints, details):
            upper = detail.select_one(self.UPPER_LIMIT_SELECTOR)
            if upper is not None:
                waypoint['upper_limit'] = clean_text(upper)
            lower = detail.select_one(self.LOWER_LIMIT_SELECTOR)
            if lower is not None:
                waypoint['lower_limit'] = clean_text(lower)

        if not designator and not waypoints:
            return None
        return Airway(
            designator=designator,
            waypoints=tuple(AirwayWaypoint(**waypoint) for waypoint in waypoints),
        )

    def _waypoint_designator(self, text: str) -> str:
        # Navaid first: a navaid name may itself start with five capitals
        match = self.NAVAID_PATTERN.search(text)
        if match is None:
            match = self.INTERSECTION_PATTERN.search(text)
        if match is None:
            raise FieldParseError('waypoint', text)
        return match.group(1)
