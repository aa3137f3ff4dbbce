"""
Field parsers for values found in eAIP tables.

Each parser takes normalized text (see clean_text) and returns a typed value,
raising FieldParseError when the text does not hold a value in any accepted
notation.
"""

import re
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from ..errors import FieldParseError

logger = logging.getLogger(__name__)

FREQUENCY_PATTERN = re.compile(r'([0-9.]{3,7})\s*([km])hz', re.IGNORECASE)
CHANNEL_PATTERN = re.compile(r'CH\s*(\d+)\s*([XY])', re.IGNORECASE)
ELEVATION_PATTERN = re.compile(r'(\d+)\s*ft', re.IGNORECASE)

# Compact notation: DDMMSS[.ss]N and DDDMMSS[.ss]E, read as a number / 10000
COMPACT_LATITUDE_PATTERN = re.compile(r'(?<![\d.])(\d{6}(?:\.\d+)?)\s?([NS])', re.IGNORECASE)
COMPACT_LONGITUDE_PATTERN = re.compile(r'(?<![\d.])(\d{7}(?:\.\d+)?)\s?([EW])', re.IGNORECASE)

# Degrees, minutes, seconds: 50°50'13.60"N
_DMS = r'(\d+)\s*°\s*(\d+)\s*[\'’′]\s*([\d.]+)\s*(?:"|”|″|\'\')\s*'
DMS_LATITUDE_PATTERN = re.compile(_DMS + r'([NS])', re.IGNORECASE)
DMS_LONGITUDE_PATTERN = re.compile(_DMS + r'([EW])', re.IGNORECASE)

# (upper bound of channel number, base frequency in kHz) per channel type
CHANNEL_BANDS = {
    'X': [(16, 134300), (59, 106300), (69, 127300), (None, 105300)],
    'Y': [(69, 106350), (None, 105350)],
}


def parse_frequency(text: str) -> int:
    """
    Parse a frequency, always returning kHz.

    Accepts '113.55MHz', '338 kHz' and DME channels such as 'CH82X', which
    are converted to the paired VHF frequency.

    Raises:
        FieldParseError: If no frequency or channel is found
    """
    match = FREQUENCY_PATTERN.search(text)
    if match:
        try:
            value = Decimal(match.group(1))
        except InvalidOperation:
            raise FieldParseError('frequency', text)
        if match.group(2).upper() == 'M':
            value *= 1000
        return int(value)

    match = CHANNEL_PATTERN.search(text)
    if match:
        return channel_to_khz(int(match.group(1)), match.group(2).upper())

    raise FieldParseError('frequency', text)


def channel_to_khz(channel: int, channel_type: str) -> int:
    """
    Convert a DME channel to its paired VHF frequency in kHz.

    Args:
        channel: Channel number (1-126)
        channel_type: 'X' or 'Y'
    """
    bands = CHANNEL_BANDS.get(channel_type)
    if bands is None:
        raise FieldParseError('channel type', f"CH{channel}{channel_type}")
    for upper, base in bands:
        if upper is None or channel <= upper:
            return base + channel * 100
    raise FieldParseError('channel', f"CH{channel}{channel_type}")


def parse_elevation(text: str) -> int:
    """
    Parse an elevation, always returning feet.

    Raises:
        FieldParseError: If the text holds no value in feet
    """
    match = ELEVATION_PATTERN.search(text)
    if not match:
        raise FieldParseError('elevation', text)
    return int(match.group(1))


def _compact(pattern: re.Pattern, text: str, negative: str) -> Optional[float]:
    match = pattern.search(text)
    if not match:
        return None
    value = float(match.group(1)) / 10000
    return -value if match.group(2).upper() == negative else value


def _dms(pattern: re.Pattern, text: str, negative: str) -> Optional[float]:
    match = pattern.search(text)
    if not match:
        return None
    degrees, minutes, seconds, hemisphere = match.groups()
    try:
        value = int(degrees) + int(minutes) / 60 + float(seconds) / 3600
    except ValueError:
        return None
    return -value if hemisphere.upper() == negative else value


def parse_latlong(text: str) -> Tuple[Optional[float], Optional[float]]:
    """
    Parse a latitude and/or longitude in decimal degrees.

    Both the compact notation ('571209N 0021153W') and degrees, minutes,
    seconds ('50°50\\'13.60"N') are accepted. For each coordinate the compact
    notation is used when present, DMS otherwise.

    Returns:
        (latitude, longitude); either may be None if absent from the text

    Raises:
        FieldParseError: If neither a latitude nor a longitude is found
    """
    latitude = _compact(COMPACT_LATITUDE_PATTERN, text, 'S')
    longitude = _compact(COMPACT_LONGITUDE_PATTERN, text, 'W')

    if latitude is None:
        latitude = _dms(DMS_LATITUDE_PATTERN, text, 'S')
    if longitude is None:
        longitude = _dms(DMS_LONGITUDE_PATTERN, text, 'W')

    if latitude is None and longitude is None:
        raise FieldParseError('latlong', text)
    return latitude, longitude
