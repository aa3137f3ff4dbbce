"""Tests for the extracted record types."""

import json
import pytest
from dataclasses import FrozenInstanceError

from eaip.errors import UnknownEnumValueError
from eaip.models import Airport, Airway, AirwayWaypoint, Chart, Intersection, NavAid, NavAidKind


class TestNavAid:
    def setup_method(self):
        self.navaid = NavAid(
            ident='ADN',
            name='ABERDEEN',
            kind=NavAidKind.VOR_DME,
            frequency_khz=114300,
            latitude=57.183916,
            longitude=-2.160197,
            elevation=600,
        )

    def test_frequency_mhz(self):
        assert self.navaid.frequency_mhz == pytest.approx(114.3)

    def test_to_dict(self):
        data = self.navaid.to_dict()
        assert data['kind'] == 'VOR/DME'
        assert data['frequency_khz'] == 114300
        # Must be JSON serializable
        json.dumps(data)

    def test_from_dict(self):
        assert NavAid.from_dict(self.navaid.to_dict()) == self.navaid

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            self.navaid.ident = 'XXX'

    def test_str(self):
        assert str(self.navaid) == 'ADN ABERDEEN VOR/DME 114300kHz'


class TestNavAidKind:
    @pytest.mark.parametrize('label,kind', [
        ('VOR', NavAidKind.VOR),
        ('DME', NavAidKind.DME),
        ('VOR/DME', NavAidKind.VOR_DME),
        ('NDB', NavAidKind.NDB),
        (' NDB ', NavAidKind.NDB),
    ])
    def test_from_label(self, label, kind):
        assert NavAidKind.from_label(label) == kind

    def test_unknown_label(self):
        with pytest.raises(UnknownEnumValueError) as excinfo:
            NavAidKind.from_label('TACAN')
        assert excinfo.value.enum_name == 'navaid kind'
        assert excinfo.value.record_kind is None


class TestAirway:
    def test_waypoint_kind(self):
        assert AirwayWaypoint('LON').is_navaid
        assert not AirwayWaypoint('LON').is_intersection
        assert AirwayWaypoint('KONAN').is_intersection
        assert not AirwayWaypoint('KONAN').is_navaid

    @pytest.mark.parametrize('designator,is_upper', [
        ('UN601', True),
        ('UL9', True),
        ('L9', False),
        ('U', False),
        ('N57', False),
    ])
    def test_is_upper(self, designator, is_upper):
        assert Airway(designator).is_upper == is_upper

    def test_dict_conversion(self):
        airway = Airway('L9', (AirwayWaypoint('KONAN', 'FL 105', 'FL 195'), AirwayWaypoint('LON')))
        data = airway.to_dict()
        assert data['waypoints'][0] == {'designator': 'KONAN', 'lower_limit': 'FL 105', 'upper_limit': 'FL 195'}
        assert Airway.from_dict(data) == airway

    def test_str(self):
        airway = Airway('L9', (AirwayWaypoint('KONAN'), AirwayWaypoint('LON')))
        assert str(airway) == 'L9: KONAN LON'


class TestAirport:
    def test_defaults(self):
        airport = Airport('EGBO', 'WOLVERHAMPTON/HALFPENNY GREEN')
        assert airport.latitude == 0.0
        assert airport.longitude == 0.0
        assert airport.elevation == 0
        assert airport.charts == ()

    def test_dict_conversion(self):
        airport = Airport('EGBO', 'WOLVERHAMPTON/HALFPENNY GREEN', 52.3104, -2.1534, 283,
                          (Chart('Aerodrome Chart', 'EG-AD-2.EGBO-2-1_en.pdf'),))
        data = airport.to_dict()
        assert data['charts'] == [{'title': 'Aerodrome Chart', 'url': 'EG-AD-2.EGBO-2-1_en.pdf'}]
        json.dumps(data)
        assert Airport.from_dict(data) == airport


def test_intersection_dict_conversion():
    intersection = Intersection('ABBEW', 50.2341, -3.573)
    assert intersection.to_dict() == {'designator': 'ABBEW', 'latitude': 50.2341, 'longitude': -3.573}
    assert Intersection.from_dict(intersection.to_dict()) == intersection
