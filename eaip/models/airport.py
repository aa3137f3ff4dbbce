from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Chart:
    """A chart listed for an airport, with its link as found on the page."""

    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {'title': self.title, 'url': self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Chart':
        return cls(title=data['title'], url=data['url'])


@dataclass(frozen=True)
class Airport:
    """
    An airport as described by an eAIP.

    Airports built from the table of contents only have `icao` and `name`
    populated; position, elevation and charts come from the airport's own
    page (see AirportParser).
    """

    icao: str
    name: str
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: int = 0
    charts: Tuple[Chart, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'icao': self.icao,
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'elevation': self.elevation,
            'charts': [chart.to_dict() for chart in self.charts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Airport':
        """Create instance from dictionary."""
        return cls(
            icao=data['icao'],
            name=data['name'],
            latitude=float(data.get('latitude', 0.0)),
            longitude=float(data.get('longitude', 0.0)),
            elevation=int(data.get('elevation', 0)),
            charts=tuple(Chart.from_dict(c) for c in data.get('charts', [])),
        )

    def __str__(self) -> str:
        return f"{self.icao} {self.name}"
