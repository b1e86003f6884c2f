"""
CDOT (Climate Daily Observation Toolkit)

This library provides tools for working with GHCN-Daily data, including:
- Decoding daily observation (.dly) files into per-day records
- Decoding the station metadata list
- Parallel decoding of whole directories of daily files
- CSV and NetCDF export and simple filtering of the decoded tables
"""

from .exceptions import CDOTError, InvalidModeInputError, MalformedFieldError, UnreadableFileError
from .models import DailyRecord, DecodeResult, FileDecodeResult, StationDecodeResult, StationRecord

__version__ = "0.1.0"
