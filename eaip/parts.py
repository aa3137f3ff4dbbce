"""
Parts of an eAIP and the location of their pages.

An eAIP is split in three parts, General (GEN), En-Route (ENR) and
Aerodromes (AD), each made of numbered sections. Pages live at
`/<type>/eAIP/<country>-<part>-<section>-<locale>.<type>`, below a
`<YYYY-MM-DD>-AIRAC` directory for a given cycle.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

from .utils.airac import Airac


class EAIPType(Enum):
    """The type of file to get from the eAIP."""

    HTML = 'html'
    PDF = 'pdf'


@dataclass(frozen=True)
class GEN:
    """A General section: 0 overview, 1 regulations, 2 tables and codes, 3 services, 4 charges."""

    chapter: int
    page: int

    def __str__(self) -> str:
        return f"GEN-{self.chapter}.{self.page}"


@dataclass(frozen=True)
class ENR:
    """
    An En-Route section.

    Chapters: 0 table of contents, 1 general rules, 2 ATS airspace,
    3 ATS routes, 4 radio navigation aids, 5 navigation warnings,
    6 en-route charts (no page number).
    """

    chapter: int
    page: int = 0

    @classmethod
    def table_of_contents(cls) -> 'ENR':
        return cls(0, 1)

    @classmethod
    def charts(cls) -> 'ENR':
        return cls(6)

    def __str__(self) -> str:
        if self.chapter == 6:
            return "ENR-6"
        return f"ENR-{self.chapter}.{self.page}"


@dataclass(frozen=True)
class AD:
    """An Aerodromes section: 0 table of contents, 1 introduction, 2 aerodromes, 3 heliports."""

    chapter: int
    page: Union[int, str]

    @classmethod
    def table_of_contents(cls) -> 'AD':
        return cls(0, 1)

    @classmethod
    def aerodrome(cls, icao: str) -> 'AD':
        return cls(2, icao.upper())

    @classmethod
    def heliport(cls, icao: str) -> 'AD':
        return cls(3, icao.upper())

    def __str__(self) -> str:
        return f"AD-{self.chapter}.{self.page}"


Part = Union[GEN, ENR, AD]

# Sections the parsers understand
NAVAIDS = ENR(4, 1)
INTERSECTIONS = ENR(4, 4)
AIRWAYS = ENR(3, 3)
AERODROMES = AD.table_of_contents()


def generate_location(country_code: str, part: Part, locale: str,
                      typ: EAIPType = EAIPType.HTML) -> str:
    """
    Generate the location in an eAIP package for a section.

    Example:
        generate_location('EG', AD.aerodrome('EGBO'), 'en-GB')
        -> '/html/eAIP/EG-AD-2.EGBO-en-GB.html'
    """
    return f"/{typ.value}/eAIP/{country_code}-{part}-{locale}.{typ.value}"


def generate_location_with_airac(airac: Airac, country_code: str, part: Part, locale: str,
                                 typ: EAIPType = EAIPType.HTML, date_offset_days: int = 0) -> str:
    """
    Generate the location of a section within the publication for an AIRAC cycle.

    Args:
        date_offset_days: Days between the publication directory date and the
            cycle's effective date, for services that name the directory
            after the publication date rather than the effective date

    Example:
        generate_location_with_airac(Airac(date(2022, 5, 19)), 'EG', AD.aerodrome('EGBO'), 'en-GB')
        -> '/2022-05-19-AIRAC/html/eAIP/EG-AD-2.EGBO-en-GB.html'
    """
    published = airac.effective - timedelta(days=date_offset_days)
    return f"/{published.isoformat()}-AIRAC{generate_location(country_code, part, locale, typ)}"
