"""
Shared builders for fixed-width test lines.
"""

import pytest


def make_cdo_line(station_id="USW00094728", year=2020, month=2, element="TMAX", values=None, flags=None):
    """Build a 269-character daily line.

    ``values`` maps day -> int (default -9999), ``flags`` maps day -> 3-char
    string of mflag/qflag/sflag (default blanks).
    """
    values = values or {}
    flags = flags or {}
    line = f"{station_id:<11}{year:04d}{month:02d}{element:<4}"
    for day in range(1, 32):
        line += f"{values.get(day, -9999):5d}{flags.get(day, '   '):<3}"
    return line


def make_station_line(station_id="AGE00135039", latitude="36.7000", longitude="0.6500",
                      elevation="50.0", state="", name="ORAN-HOPITAL MILITAIRE",
                      gsn="", hcn_crn="", wmo_id=""):
    return (f"{station_id:<11} {latitude:>8} {longitude:>9} {elevation:>6} {state:<2} "
            f"{name:<30} {gsn:<3} {hcn_crn:<3} {wmo_id:<5}")


@pytest.fixture
def cdo_dir(tmp_path):
    """A directory with three small daily files and one file to ignore."""
    files = {
        "USW00094728.dly": [
            make_cdo_line("USW00094728", 2020, 1, "TMAX", {1: 10, 2: 20}),
            make_cdo_line("USW00094728", 2020, 2, "TMAX", {1: 150}),
        ],
        "AGE00135039.dly": [
            make_cdo_line("AGE00135039", 1999, 4, "PRCP", {30: 5}),
        ],
        "CA001011500.dly": [
            make_cdo_line("CA001011500", 2001, 12, "TMIN", {31: -40}),
        ],
    }
    for name, lines in files.items():
        (tmp_path / name).write_text("\n".join(lines) + "\n")
    (tmp_path / "readme.txt").write_text("not a daily file\n")
    return tmp_path
