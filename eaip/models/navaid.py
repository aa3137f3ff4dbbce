from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..errors import UnknownEnumValueError


class NavAidKind(Enum):
    """The kind of radio navigation aid, valued by its eAIP label."""

    VOR = 'VOR'
    DME = 'DME'
    VOR_DME = 'VOR/DME'
    NDB = 'NDB'

    @classmethod
    def from_label(cls, label: str) -> 'NavAidKind':
        """
        Map an eAIP type label (e.g. 'VOR/DME') to a NavAidKind.

        Raises:
            UnknownEnumValueError: If the label is not one of the known kinds
        """
        try:
            return cls(label.strip())
        except ValueError:
            raise UnknownEnumValueError('navaid kind', label)


@dataclass(frozen=True)
class NavAid:
    """
    A radio-based navigational aid.

    Coordinates are signed decimal degrees (South and West negative).
    Elevation is in feet; it is often not published for NDBs, in which
    case it is 0.
    """

    ident: str
    name: str
    kind: NavAidKind
    frequency_khz: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: int = 0

    @property
    def frequency_mhz(self) -> float:
        """Frequency in MHz."""
        return self.frequency_khz / 1000

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'ident': self.ident,
            'name': self.name,
            'kind': self.kind.value,
            'frequency_khz': self.frequency_khz,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'elevation': self.elevation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NavAid':
        """Create instance from dictionary."""
        return cls(
            ident=data['ident'],
            name=data['name'],
            kind=NavAidKind.from_label(data['kind']),
            frequency_khz=int(data.get('frequency_khz', 0)),
            latitude=float(data.get('latitude', 0.0)),
            longitude=float(data.get('longitude', 0.0)),
            elevation=int(data.get('elevation', 0)),
        )

    def __str__(self) -> str:
        return f"{self.ident} {self.name} {self.kind.value} {self.frequency_khz}kHz"
