"""
Record types decoded from GHCN-Daily files.
"""

import datetime
from dataclasses import dataclass, field
from typing import List

from .dates import is_valid_date
from .exceptions import MalformedFieldError


@dataclass(frozen=True)
class DailyRecord:
    """One day of one element at one station."""

    station_id: str
    year: int
    month: int
    day: int
    element: str
    value: int  # -9999 means missing
    mflag: str = ""
    qflag: str = ""
    sflag: str = ""

    def __post_init__(self):
        if not is_valid_date(self.year, self.month, self.day):
            raise ValueError(f"{self.year:04d}-{self.month:02d}-{self.day:02d} is not a calendar date")

    @property
    def date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class StationRecord:
    """A row of the station metadata file."""

    station_id: str
    latitude: float
    longitude: float
    elevation: float
    state: str
    name: str
    gsn: bool
    hcn: bool
    crn: bool
    wmo_id: str


@dataclass
class FileDecodeResult:
    """Records and per-line errors from a single file."""

    path: str
    records: List[DailyRecord] = field(default_factory=list)
    errors: List[MalformedFieldError] = field(default_factory=list)


@dataclass
class DecodeResult:
    """Merged output of a batch, in file discovery order."""

    records: List[DailyRecord] = field(default_factory=list)
    errors: List[MalformedFieldError] = field(default_factory=list)
    num_files: int = 0


@dataclass
class StationDecodeResult:
    """Records and per-line errors from a station metadata file."""

    path: str
    records: List[StationRecord] = field(default_factory=list)
    errors: List[MalformedFieldError] = field(default_factory=list)
