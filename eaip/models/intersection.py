from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Intersection:
    """An intersection (named en-route waypoint) with a 5 letter designator."""

    designator: str
    latitude: float = 0.0
    longitude: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'designator': self.designator,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Intersection':
        return cls(
            designator=data['designator'],
            latitude=float(data.get('latitude', 0.0)),
            longitude=float(data.get('longitude', 0.0)),
        )
