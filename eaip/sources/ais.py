"""
Known online eAIP services.

Each entry describes where a country's aeronautical information service
publishes its eAIP, and builds an EAIPWebSource for it.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import requests

from .eaip_web import EAIPWebSource


@dataclass(frozen=True)
class NamedEAIP:
    """An eAIP service with a presentable name."""

    country: str  # ISO 3166 two letter country code
    name: str
    base_url: str
    country_code: str  # eAIP page prefix, the ICAO nationality letters
    locale: str
    date_offset_days: int = 0

    def source(self, cache_dir: Optional[str] = None,
               session: Optional[requests.Session] = None) -> EAIPWebSource:
        """Create a web source for this service."""
        return EAIPWebSource(
            self.base_url,
            self.country_code,
            self.locale,
            cache_dir=cache_dir,
            date_offset_days=self.date_offset_days,
            session=session,
        )


# United Kingdom: NATS
GB = NamedEAIP(
    country='GB',
    name='NATS',
    base_url='https://www.aurora.nats.co.uk/htmlAIP/Publications',
    country_code='EG',
    locale='en-GB',
)

# The Netherlands: LVNL, publication directories dated two weeks before the cycle
NL = NamedEAIP(
    country='NL',
    name='LVNL',
    base_url='https://eaip.lvnl.nl',
    country_code='EH',
    locale='en-GB',
    date_offset_days=14,
)

ALL: Dict[str, NamedEAIP] = {service.country: service for service in (GB, NL)}


def get_service(country: str) -> NamedEAIP:
    """
    Get the eAIP service for a country.

    Raises:
        ValueError: If no service is known for the country
    """
    service = ALL.get(country.upper())
    if service is None:
        raise ValueError(f"No eAIP service known for country: {country}")
    return service
