GHCND_FILES_URL = "https://www.ncei.noaa.gov/pub/data/ghcn/daily/all/"

GHCND_STATION_LIST_URL = "https://www.ncei.noaa.gov/pub/data/ghcn/daily/ghcnd-stations.txt"

CDO_EXTENSION = ".dly"

ENCODING = "utf-8"

CDO_OUTPUT_FILE = "noaa-cdo.csv"
STATION_OUTPUT_FILE = "noaa-stations.csv"

# -9999 marks a day with no observation
MISSING_VALUE = -9999

# (name, offset, length), offsets are 0-indexed
CDO_HEADER_COLUMNS = [
    ("station_id", 0, 11),
    ("year", 11, 4),
    ("month", 15, 2),
    ("element", 17, 4),
]

CDO_SLOT_OFFSET = 21
CDO_SLOT_WIDTH = 8
CDO_DAYS_PER_LINE = 31

# relative to the start of a day slot
CDO_SLOT_COLUMNS = [
    ("value", 0, 5),
    ("mflag", 5, 1),
    ("qflag", 6, 1),
    ("sflag", 7, 1),
]

CDO_LINE_LENGTH = CDO_SLOT_OFFSET + CDO_SLOT_WIDTH * CDO_DAYS_PER_LINE

STATION_COLUMNS = [
    ("station_id", 0, 11),
    ("latitude", 12, 8),
    ("longitude", 21, 9),
    ("elevation", 31, 6),
    ("state", 38, 2),
    ("name", 41, 30),
    ("gsn_flag", 72, 3),
    ("hcn_crn_flag", 76, 3),
    ("wmo_id", 80, 5),
]

# Elements kept when sampling recent data for analysis
CORE_ELEMENTS = ["PRCP", "SNOW", "SNWD", "TMAX", "TMIN", "TAVG", "AWND", "AWDR"]

# Stations drawn and first year kept by sample_records
SAMPLE_SIZE = 100
SAMPLE_START_YEAR = 2010

# None lets concurrent.futures pick the pool size
DEFAULT_MAX_WORKERS = None

MAX_REPORTED_ERRORS = 10
