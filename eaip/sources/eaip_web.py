#!/usr/bin/env python3

import logging
from dataclasses import replace
from typing import Any, List, Optional
from urllib.parse import urljoin

import requests

from .cached import CachedSource
from ..errors import FetchError
from ..models import Airport, Airway, Intersection, NavAid
from ..parsers import EAIPParserFactory
from ..parts import (
    AERODROMES, AIRWAYS, INTERSECTIONS, NAVAIDS,
    AD, EAIPType, Part, generate_location_with_airac,
)
from ..utils.airac import Airac

logger = logging.getLogger(__name__)


class EAIPWebSource(CachedSource):
    """
    Online source for an eAIP published in the Eurocontrol HTML layout.

    Pages are fetched for an AIRAC cycle (the current one unless given),
    cached with human-readable keys, and handed to the parser for the
    record kind they hold.

    Example:
        source = EAIPWebSource('https://www.aurora.nats.co.uk/htmlAIP/Publications', 'EG', 'en-GB')
        navaids = source.get_navaids()
    """

    DEFAULT_TIMEOUT = 30
    USER_AGENT = "eaip/0.1 (eAIP data extraction)"

    def __init__(self, base_url: str, country_code: str, locale: str,
                 cache_dir: Optional[str] = None, date_offset_days: int = 0,
                 session: Optional[requests.Session] = None,
                 timeout: int = DEFAULT_TIMEOUT, max_age_days: Optional[int] = 28):
        """
        Args:
            base_url: Root of the publications (without trailing slash)
            country_code: eAIP country prefix (e.g. 'EG')
            locale: Page locale (e.g. 'en-GB')
            cache_dir: Directory for caching pages, or None to disable caching
            date_offset_days: Days the publication directory is dated before the effective date
            session: Optional requests.Session for dependency injection (testing)
            timeout: HTTP request timeout in seconds
            max_age_days: Maximum age of a cached page
        """
        super().__init__(cache_dir)
        self.base_url = base_url.rstrip('/')
        self.country_code = country_code
        self.locale = locale
        self.date_offset_days = date_offset_days
        self.max_age_days = max_age_days
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def generate_url(self, airac: Airac, part: Part, typ: EAIPType = EAIPType.HTML) -> str:
        """Generate the URL of a page of this eAIP."""
        location = generate_location_with_airac(
            airac, self.country_code, part, self.locale, typ, self.date_offset_days
        )
        return f"{self.base_url}{location}"

    def fetch_page(self, url: str) -> str:
        """Download a page."""
        logger.info(f"Downloading {url}")
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e))
        # Pages are UTF-8 even when the Content-Type has no charset
        return resp.content.decode('utf-8', errors='ignore')

    def get_page(self, airac: Airac, part: Part) -> str:
        """Get the HTML of a page for an AIRAC cycle, from cache if available."""
        url = self.generate_url(airac, part)
        logger.debug(f"Getting page: {url}")
        return self.get_data(
            'page', 'html', url,
            cache_param=f"{self.country_code}_{airac.effective.isoformat()}_{part}",
            max_age_days=self.max_age_days,
        )

    def get_current_page(self, part: Part) -> str:
        """Get the HTML of a page for the current AIRAC cycle."""
        return self.get_page(Airac.current(), part)

    def _parse(self, record_kind: str, part: Part, airac: Optional[Airac]) -> Any:
        airac = airac or Airac.current()
        html = self.get_page(airac, part)
        return EAIPParserFactory.get_parser(record_kind).parse(html)

    def get_navaids(self, airac: Optional[Airac] = None) -> List[NavAid]:
        return self._parse('navaids', NAVAIDS, airac)

    def get_intersections(self, airac: Optional[Airac] = None) -> List[Intersection]:
        return self._parse('intersections', INTERSECTIONS, airac)

    def get_airways(self, airac: Optional[Airac] = None) -> List[Airway]:
        return self._parse('airways', AIRWAYS, airac)

    def get_airports(self, airac: Optional[Airac] = None) -> List[Airport]:
        """
        Get the airports listed in the table of contents.

        Only ICAO code and name are populated; use get_airport() for details.
        """
        return self._parse('airports', AERODROMES, airac)

    def get_airport(self, icao: str, airac: Optional[Airac] = None) -> Airport:
        """Get an airport's details, with chart links made absolute."""
        airac = airac or Airac.current()
        part = AD.aerodrome(icao)
        airport = self._parse('airport', part, airac)
        page_url = self.generate_url(airac, part)
        charts = tuple(replace(chart, url=urljoin(page_url, chart.url)) for chart in airport.charts)
        return replace(airport, charts=charts)
