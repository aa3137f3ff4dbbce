"""
Data models for the eaip library.

Records are immutable and built fresh by each extraction call.
"""

from .navaid import NavAid, NavAidKind
from .intersection import Intersection
from .airway import Airway, AirwayWaypoint
from .airport import Airport, Chart

__all__ = [
    'NavAid',
    'NavAidKind',
    'Intersection',
    'Airway',
    'AirwayWaypoint',
    'Airport',
    'Chart',
]
