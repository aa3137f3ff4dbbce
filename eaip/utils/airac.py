"""
AIRAC cycles.

AIRAC (Aeronautical Information Regulation and Control) cycles last 28
days and always become effective on a Thursday. Each cycle is identified
by the last two digits of its year and its number within that year
(e.g. 2510 for the cycle effective on 2025-10-02).
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

logger = logging.getLogger(__name__)

AIRAC_CYCLE_DAYS = 28

# Known AIRAC effective date (cycle 2510, a Thursday)
REFERENCE_DATE = date(2025, 10, 2)

DateLike = Union[str, date, datetime]


def _to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise ValueError(f"Invalid date format: {value}. Expected YYYY-MM-DD")


@dataclass(frozen=True, order=True)
class Airac:
    """An AIRAC cycle, identified by its effective date."""

    effective: date

    def __post_init__(self):
        if (self.effective - REFERENCE_DATE).days % AIRAC_CYCLE_DAYS != 0:
            raise ValueError(f"{self.effective.isoformat()} is not an AIRAC effective date")

    @classmethod
    def from_date(cls, value: DateLike) -> 'Airac':
        """Get the cycle in effect on a date (the most recent effective date not after it)."""
        day = _to_date(value)
        cycles = (day - REFERENCE_DATE).days // AIRAC_CYCLE_DAYS
        return cls(REFERENCE_DATE + timedelta(days=cycles * AIRAC_CYCLE_DAYS))

    @classmethod
    def current(cls, today: Optional[DateLike] = None) -> 'Airac':
        """Get the cycle in effect today."""
        return cls.from_date(today if today is not None else date.today())

    @property
    def ends(self) -> date:
        """Last day of the cycle."""
        return self.effective + timedelta(days=AIRAC_CYCLE_DAYS - 1)

    @property
    def ident(self) -> str:
        """Cycle identifier, YYNN."""
        year = self.effective.year
        first = Airac.from_date(date(year, 1, 1))
        if first.effective.year < year:
            first = first.next()
        number = (self.effective - first.effective).days // AIRAC_CYCLE_DAYS + 1
        return f"{year % 100:02d}{number:02d}"

    def next(self) -> 'Airac':
        return Airac(self.effective + timedelta(days=AIRAC_CYCLE_DAYS))

    def previous(self) -> 'Airac':
        return Airac(self.effective - timedelta(days=AIRAC_CYCLE_DAYS))

    def __str__(self) -> str:
        return f"AIRAC {self.ident} ({self.effective.isoformat()})"
