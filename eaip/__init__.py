"""
eAIP (electronic Aeronautical Information Publication) data extraction library.

This package extracts radio navigation aids, intersections, airways and
airports from the HTML pages of national eAIPs.

The main public API includes:
- NavaidParser, IntersectionParser, AirwayParser, AirportListParser, AirportParser:
  page parsers, also available by record kind from EAIPParserFactory
- NavAid, Intersection, Airway, Airport: the extracted records
- EAIPWebSource: fetches pages for an AIRAC cycle and parses them
- Airac: AIRAC cycle arithmetic
"""

from .errors import EAIPError, MissingStructureError, UnknownEnumValueError, FieldParseError, FetchError
from .models import NavAid, NavAidKind, Intersection, Airway, AirwayWaypoint, Airport, Chart
from .parsers import (
    EAIPParserFactory, NavaidParser, IntersectionParser, AirwayParser,
    AirportListParser, AirportParser, clean_text,
)
from .sources import EAIPWebSource
from .utils.airac import Airac

__version__ = '0.1.0'
__all__ = [
    'EAIPError',
    'MissingStructureError',
    'UnknownEnumValueError',
    'FieldParseError',
    'FetchError',
    'NavAid',
    'NavAidKind',
    'Intersection',
    'Airway',
    'AirwayWaypoint',
    'Airport',
    'Chart',
    'EAIPParserFactory',
    'NavaidParser',
    'IntersectionParser',
    'AirwayParser',
    'AirportListParser',
    'AirportParser',
    'clean_text',
    'EAIPWebSource',
    'Airac',
]
