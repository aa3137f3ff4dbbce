from .factory import EAIPParserFactory
from .base import EAIPParser
from .text import clean_text
from .fields import parse_frequency, parse_elevation, parse_latlong, channel_to_khz
from .navaids import NavaidParser
from .intersections import IntersectionParser
from .airways import AirwayParser
from .airports import AirportListParser, AirportParser

# Register one parser per record kind
EAIPParserFactory.register_parser(NavaidParser.RECORD_KIND, NavaidParser)
EAIPParserFactory.register_parser(IntersectionParser.RECORD_KIND, IntersectionParser)
EAIPParserFactory.register_parser(AirwayParser.RECORD_KIND, AirwayParser)
EAIPParserFactory.register_parser(AirportListParser.RECORD_KIND, AirportListParser)
EAIPParserFactory.register_parser(AirportParser.RECORD_KIND, AirportParser)

__all__ = [
    'EAIPParserFactory',
    'EAIPParser',
    'clean_text',
    'parse_frequency',
    'parse_elevation',
    'parse_latlong',
    'channel_to_khz',
    'NavaidParser',
    'IntersectionParser',
    'AirwayParser',
    'AirportListParser',
    'AirportParser',
]
