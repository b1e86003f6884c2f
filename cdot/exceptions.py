"""
Exceptions raised while decoding GHCN-Daily files.
"""


class CDOTError(Exception):
    """Base exception for cdot errors."""

    pass


class MalformedFieldError(CDOTError, ValueError):
    """A fixed-width field could not be parsed as its declared type.

    Scoped to a single line: the line yields no records and decoding carries on
    with the next one.
    """

    def __init__(self, field, raw, station_id=None, line_number=None, path=None):
        super().__init__(field, raw, station_id, line_number, path)
        self.field = field
        self.raw = raw
        self.station_id = station_id
        self.line_number = line_number
        self.path = path

    def located(self, path, line_number):
        """Return a copy of the error annotated with where it was found."""
        return MalformedFieldError(self.field, self.raw, self.station_id, line_number, str(path))

    def __str__(self):
        where = []
        if self.path is not None:
            where.append(str(self.path))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        location = ", ".join(where) if where else "unknown location"
        station = f" (station {self.station_id})" if self.station_id else ""
        return f"{location}{station}: could not parse {self.field} from {self.raw!r}"


class UnreadableFileError(CDOTError, OSError):
    """An input file could not be opened or read."""

    def __init__(self, path, reason):
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self):
        return f"Could not read {self.path}: {self.reason}"


class InvalidModeInputError(CDOTError, ValueError):
    """The input path does not match the requested decoding mode."""

    pass
