from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AirwayWaypoint:
    """
    A point along an airway.

    The designator is either a 3 letter navaid ident or a 5 letter
    intersection designator; the two are told apart by length only.
    Limits are kept as published (e.g. 'FL 245', '5500 ft ALT').
    """

    designator: str
    lower_limit: str = ''
    upper_limit: str = ''

    @property
    def is_navaid(self) -> bool:
        return len(self.designator) == 3

    @property
    def is_intersection(self) -> bool:
        return len(self.designator) == 5

    def to_dict(self) -> Dict[str, Any]:
        return {
            'designator': self.designator,
            'lower_limit': self.lower_limit,
            'upper_limit': self.upper_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AirwayWaypoint':
        return cls(
            designator=data['designator'],
            lower_limit=data.get('lower_limit', ''),
            upper_limit=data.get('upper_limit', ''),
        )


@dataclass(frozen=True)
class Airway:
    """An airway: a designator and its waypoints in route order."""

    designator: str
    waypoints: Tuple[AirwayWaypoint, ...] = ()

    @property
    def is_upper(self) -> bool:
        """Upper airways carry a 'U' prefix (e.g. UL9, UN601)."""
        return len(self.designator) > 1 and self.designator.startswith('U')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'designator': self.designator,
            'waypoints': [waypoint.to_dict() for waypoint in self.waypoints],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Airway':
        return cls(
            designator=data['designator'],
            waypoints=tuple(AirwayWaypoint.from_dict(w) for w in data.get('waypoints', [])),
        )

    def __str__(self) -> str:
        return f"{self.designator}: {' '.join(w.designator for w in self.waypoints)}"
