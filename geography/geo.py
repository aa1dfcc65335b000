"""
Geography — Coordinate Conversion

Islands store their position in degrees/minutes/seconds, the way the
national gazetteer publishes it:

    03°19'03.44" N 097°07'41.73" E

These helpers parse that form and derive signed decimal degrees. They
perform no I/O and never mutate their input.

@file geography/geo.py
"""

import copy
import re
from dataclasses import dataclass

DMS_PATTERN = re.compile(
    r'(?P<degrees>\d{1,3})°\s*'
    r'(?P<minutes>\d{1,2})\'\s*'
    r'(?P<seconds>\d{1,2}(?:\.\d+)?)"\s*'
    r'(?P<hemisphere>[NSEW])'
)

NEGATIVE_HEMISPHERES = ('S', 'W')


@dataclass(frozen=True)
class DMS:
    degrees: int
    minutes: int
    seconds: float
    hemisphere: str

    def to_decimal(self) -> float:
        return dms_to_decimal(self.degrees, self.minutes, self.seconds, self.hemisphere)


def dms_to_decimal(degrees, minutes, seconds, hemisphere) -> float:
    """``degrees + minutes/60 + seconds/3600``, negative for S and W."""
    hemisphere = hemisphere.upper()
    if hemisphere not in ('N', 'S', 'E', 'W'):
        raise ValueError(f'Unknown hemisphere {hemisphere!r}')
    value = degrees + minutes / 60 + seconds / 3600
    return -value if hemisphere in NEGATIVE_HEMISPHERES else value


def parse_coordinate(coordinate: str) -> tuple[DMS, DMS]:
    """Split a ``<lat> <lon>`` DMS string into its two components."""
    parts = [
        DMS(
            degrees=int(match['degrees']),
            minutes=int(match['minutes']),
            seconds=float(match['seconds']),
            hemisphere=match['hemisphere'],
        )
        for match in DMS_PATTERN.finditer(coordinate or '')
    ]
    if len(parts) != 2 or parts[0].hemisphere not in 'NS' or parts[1].hemisphere not in 'EW':
        raise ValueError(f'Invalid DMS coordinate: {coordinate!r}')
    return parts[0], parts[1]


def to_decimal_pair(coordinate: str) -> tuple[float, float]:
    latitude, longitude = parse_coordinate(coordinate)
    return latitude.to_decimal(), longitude.to_decimal()


def with_decimal_coordinate(island):
    """
    Return a copy of ``island`` carrying ``latitude`` and ``longitude``
    in decimal degrees.
    """
    latitude, longitude = to_decimal_pair(island.coordinate)
    enriched = copy.copy(island)
    enriched.latitude = latitude
    enriched.longitude = longitude
    return enriched
