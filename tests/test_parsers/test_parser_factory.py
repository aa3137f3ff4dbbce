import pytest

from eaip.parsers import (
    AirportListParser, AirportParser, AirwayParser, EAIPParserFactory,
    IntersectionParser, NavaidParser,
)


@pytest.mark.parametrize('record_kind,parser_class', [
    ('navaids', NavaidParser),
    ('intersections', IntersectionParser),
    ('airways', AirwayParser),
    ('airports', AirportListParser),
    ('airport', AirportParser),
])
def test_get_parser(record_kind, parser_class):
    parser = EAIPParserFactory.get_parser(record_kind)
    assert isinstance(parser, parser_class)
    assert parser.RECORD_KIND == record_kind


def test_supported_kinds():
    assert set(EAIPParserFactory.get_supported_kinds()) >= {
        'navaids', 'intersections', 'airways', 'airports', 'airport'
    }


def test_unknown_kind():
    with pytest.raises(ValueError, match='runways'):
        EAIPParserFactory.get_parser('runways')
