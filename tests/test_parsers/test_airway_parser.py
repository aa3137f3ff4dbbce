"""Tests for the ATS routes (ENR 3.x) parser."""

import pytest

from eaip.errors import FieldParseError
from eaip.models import Airway, AirwayWaypoint
from eaip.parsers import AirwayParser


def test_page(load_html):
    airways = AirwayParser().parse(load_html('EG-ENR-3.3-en-GB.html'))

    assert [a.designator for a in airways] == ['L9', 'UN601']

    l9, un601 = airways
    assert l9.waypoints == (
        AirwayWaypoint('KONAN', lower_limit='FL 105', upper_limit='FL 195'),
        AirwayWaypoint('LON', lower_limit='5500 ft ALT', upper_limit='FL 245'),
        AirwayWaypoint('BRASO'),
    )
    assert not l9.is_upper

    assert [w.designator for w in un601.waypoints] == ['ADN', 'GIRVA']
    assert all(w.lower_limit == '' and w.upper_limit == '' for w in un601.waypoints)
    assert un601.is_upper


def test_limits_attach_in_order():
    html = """
    <table><tbody>
      <tr class="Table-row-type-1"><td>L612</td></tr>
      <tr class="Table-row-type-2"><td></td><td>ABBEW<br/>502341N 0035730W</td></tr>
      <tr class="Table-row-type-3"><td></td><td></td><td></td>
        <td><table><tr><td class="Upper">FL 460</td></tr><tr><td class="Lower">FL 75</td></tr></table></td></tr>
      <tr class="Table-row-type-2"><td></td><td>HONILEY (HON)</td></tr>
    </tbody></table>
    """
    airways = AirwayParser().parse(html)

    assert airways == [Airway('L612', (
        AirwayWaypoint('ABBEW', lower_limit='FL 75', upper_limit='FL 460'),
        AirwayWaypoint('HON'),
    ))]


def test_navaid_recognised_before_intersection():
    html = """
    <table><tbody>
      <tr class="Table-row-type-1"><td>N57</td></tr>
      <tr class="Table-row-type-2"><td></td><td>TALLA (TLA)</td></tr>
    </tbody></table>
    """
    airway = AirwayParser().parse(html)[0]
    assert airway.waypoints[0].designator == 'TLA'
    assert airway.waypoints[0].is_navaid


def test_group_without_designator_row_is_dropped():
    html = """
    <table><tbody>
      <tr class="Table-row-type-2"><td></td><td>ABBEW</td></tr>
    </tbody></table>
    """
    assert AirwayParser().parse(html) == []


def test_designator_without_waypoints():
    html = '<table><tbody><tr class="Table-row-type-1"><td>Y3</td></tr></tbody></table>'
    assert AirwayParser().parse(html) == [Airway('Y3')]


def test_unrecognised_waypoint():
    html = """
    <table><tbody>
      <tr class="Table-row-type-1"><td>L9</td></tr>
      <tr class="Table-row-type-2"><td></td><td>see remarks</td></tr>
    </tbody></table>
    """
    with pytest.raises(FieldParseError) as excinfo:
        AirwayParser().parse(html)
    assert excinfo.value.field == 'waypoint'
    assert excinfo.value.record_kind == 'airways'


def test_page_without_routes():
    assert AirwayParser().parse("<html><body><p>No routes</p></body></html>") == []


def test_table_without_body():
    html = """
    <table>
      <tr class="Table-row-type-1"><td>L9</td></tr>
      <tr class="Table-row-type-2"><td></td><td>KONAN<br/>510000N 0020000E</td></tr>
      <tr class="Table-row-type-3"><td></td><td></td><td></td>
        <td><table><tr><td class="Upper">FL 195</td></tr><tr><td class="Lower">FL 105</td></tr></table></td></tr>
      <tr class="Table-row-type-2"><td></td><td>LONDON (LON)</td></tr>
    </table>
    """
    assert AirwayParser().parse(html) == [Airway('L9', (
        AirwayWaypoint('KONAN', lower_limit='FL 105', upper_limit='FL 195'),
        AirwayWaypoint('LON'),
    ))]


def test_surplus_limit_rows_are_ignored():
    html = """
    <table><tbody>
      <tr class="Table-row-type-1"><td>Q41</td></tr>
      <tr class="Table-row-type-2"><td></td><td>KONAN</td></tr>
      <tr class="Table-row-type-3"><td></td><td></td><td></td>
        <td><table><tr><td class="Upper">FL 245</td></tr><tr><td class="Lower">FL 175</td></tr></table></td></tr>
      <tr class="Table-row-type-3"><td></td><td></td><td></td>
        <td><table><tr><td class="Upper">UNL</td></tr><tr><td class="Lower">FL 245</td></tr></table></td></tr>
    </tbody></table>
    """
    assert AirwayParser().parse(html) == [
        Airway('Q41', (AirwayWaypoint('KONAN', lower_limit='FL 175', upper_limit='FL 245'),))
    ]
