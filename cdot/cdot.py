"""
CDOT (Climate Daily Observation Toolkit)

Decoders for the two fixed-width formats of NOAA's GHCN-Daily archive:
- Daily observation files (.dly), one station/month/element per line
- The station metadata list (ghcnd-stations.txt), one station per line

plus batch decoding across a directory of files, CSV/NetCDF export and a few
helpers for filtering the decoded tables.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Type, Union
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from pathlib import Path
import argparse
import datetime
import os
import re
import sys

import numpy as np
import pandas as pd
import requests
import xarray as xr
from tqdm import tqdm

from . import cdotmetadata as metadata
from .exceptions import InvalidModeInputError, MalformedFieldError, UnreadableFileError
from .dates import is_valid_date
from .models import DailyRecord, DecodeResult, FileDecodeResult, StationDecodeResult, StationRecord

Record = Union[DailyRecord, StationRecord]
LineDecoder = Callable[[str, Optional[int]], List[DailyRecord]]

_CDO_HEADER = {name: (offset, length) for name, offset, length in metadata.CDO_HEADER_COLUMNS}
_CDO_SLOT = {name: (offset, length) for name, offset, length in metadata.CDO_SLOT_COLUMNS}
_STATION = {name: (offset, length) for name, offset, length in metadata.STATION_COLUMNS}

# plain ASCII numbers only, so "1_00", "nan" and "inf" are rejected
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

_EXECUTORS: Dict[str, Type[Executor]] = {
    'process': ProcessPoolExecutor,
    'thread': ThreadPoolExecutor,
}


def slice_field(line: str, offset: int, length: int) -> str:
    """Return the column at ``line[offset:offset + length]`` with whitespace trimmed.

    Lines shorter than ``offset + length`` give whatever is left, possibly ''.
    """
    return line[offset:offset + length].strip()


def _parse_int(raw: str, field: str, station_id: Optional[str], line_number: Optional[int]) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise MalformedFieldError(field, raw, station_id, line_number)
    return int(raw)


def _parse_float(raw: str, field: str, station_id: Optional[str], line_number: Optional[int]) -> float:
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise MalformedFieldError(field, raw, station_id, line_number)
    return float(raw)


def parse_cdo_line(line: str, line_number: Optional[int] = None) -> List[DailyRecord]:
    """Decode one line of a daily (.dly) file into per-day records.

    Args:
        line: A single line of the daily format. Trailing newlines are ignored.
        line_number: Optional 1-based line number, used in error messages.

    Returns:
        Up to 31 DailyRecords in ascending day order. Slots whose day does not
        exist in the line's month (e.g. February 30) are skipped.

    Raises:
        MalformedFieldError: If the year, month or the value of a real day is
            not an integer. The whole line is rejected.

    Examples:
        >>> records = parse_cdo_line(line)
        >>> records[0].station_id, records[0].day, records[0].value
        ('USW00094728', 1, 150)
    """
    line = line.rstrip('\r\n')

    station_id = slice_field(line, *_CDO_HEADER['station_id'])
    year = _parse_int(slice_field(line, *_CDO_HEADER['year']), 'year', station_id, line_number)
    month = _parse_int(slice_field(line, *_CDO_HEADER['month']), 'month', station_id, line_number)
    element = slice_field(line, *_CDO_HEADER['element'])

    records = []
    for day in range(1, metadata.CDO_DAYS_PER_LINE + 1):
        if not is_valid_date(year, month, day):
            continue

        slot_start = metadata.CDO_SLOT_OFFSET + (day - 1) * metadata.CDO_SLOT_WIDTH
        value_offset, value_length = _CDO_SLOT['value']
        value_raw = slice_field(line, slot_start + value_offset, value_length)
        value = _parse_int(value_raw, f"value (day {day})", station_id, line_number)

        records.append(DailyRecord(
            station_id=station_id,
            year=year,
            month=month,
            day=day,
            element=element,
            value=value,
            mflag=slice_field(line, slot_start + _CDO_SLOT['mflag'][0], _CDO_SLOT['mflag'][1]),
            qflag=slice_field(line, slot_start + _CDO_SLOT['qflag'][0], _CDO_SLOT['qflag'][1]),
            sflag=slice_field(line, slot_start + _CDO_SLOT['sflag'][0], _CDO_SLOT['sflag'][1]),
        ))

    return records


def parse_station_line(line: str, line_number: Optional[int] = None) -> StationRecord:
    """Decode one line of the station metadata file.

    The GSN column holds 'GSN' or blanks. The HCN/CRN column holds 'HCN',
    'CRN' or blanks; anything else leaves both flags False.

    Raises MalformedFieldError when latitude, longitude or elevation is not a
    number.
    """
    line = line.rstrip('\r\n')

    station_id = slice_field(line, *_STATION['station_id'])
    latitude = _parse_float(slice_field(line, *_STATION['latitude']), 'latitude', station_id, line_number)
    longitude = _parse_float(slice_field(line, *_STATION['longitude']), 'longitude', station_id, line_number)
    elevation = _parse_float(slice_field(line, *_STATION['elevation']), 'elevation', station_id, line_number)
    hcn_crn = slice_field(line, *_STATION['hcn_crn_flag'])

    return StationRecord(
        station_id=station_id,
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
        state=slice_field(line, *_STATION['state']),
        name=slice_field(line, *_STATION['name']),
        gsn=slice_field(line, *_STATION['gsn_flag']) == 'GSN',
        hcn=hcn_crn == 'HCN',
        crn=hcn_crn == 'CRN',
        wmo_id=slice_field(line, *_STATION['wmo_id']),
    )


def _read_lines(path: Path) -> List[str]:
    try:
        with open(path, 'r', encoding=metadata.ENCODING) as f:
            # split on newlines only, never on form feeds
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(str(path), str(e)) from e


def read_cdo_file(path: Union[str, Path], decoder: LineDecoder = parse_cdo_line) -> FileDecodeResult:
    """Decode every line of a single daily file, in file order.

    A malformed line is recorded in ``errors`` and contributes no records;
    decoding continues with the next line. Blank lines are skipped.

    Raises
    ------
    UnreadableFileError
        If the file cannot be opened or read.
    """
    path = Path(path)
    result = FileDecodeResult(path=str(path))

    for line_number, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            result.records.extend(decoder(line, line_number))
        except MalformedFieldError as e:
            result.errors.append(e.located(path, line_number))

    return result


def read_station_file(path: Union[str, Path]) -> StationDecodeResult:
    """Decode a station metadata file into one StationRecord per line.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a ghcnd-stations.txt style file. Directories are rejected.

    Returns
    -------
    StationDecodeResult
        Decoded stations in file order, plus any per-line errors.

    Raises
    ------
    InvalidModeInputError
        If ``path`` is a directory.
    UnreadableFileError
        If the file cannot be opened or read.
    """
    path = Path(path)
    if path.is_dir():
        raise InvalidModeInputError(f"Station decoding needs a file, not a directory: {path}")

    result = StationDecodeResult(path=str(path))
    for line_number, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            result.records.append(parse_station_line(line, line_number))
        except MalformedFieldError as e:
            result.errors.append(e.located(path, line_number))

    return result


def find_cdo_files(path: Union[str, Path], extension: str = metadata.CDO_EXTENSION) -> List[Path]:
    """List the daily files to decode.

    A directory yields its regular files ending in ``extension``, sorted by
    name so that the output order does not depend on the filesystem. A single
    file is returned as a one-element batch.
    """
    path = Path(path)
    if path.is_file():
        return [path]
    if not path.is_dir():
        raise InvalidModeInputError(f"No such file or directory: {path}")

    try:
        entries = list(path.iterdir())
    except OSError as e:
        raise UnreadableFileError(str(path), str(e)) from e

    return sorted((p for p in entries if p.is_file() and p.suffix == extension), key=lambda p: p.name)


def decode_files(paths: Sequence[Union[str, Path]],
                 decoder: LineDecoder = parse_cdo_line,
                 max_workers: Optional[int] = metadata.DEFAULT_MAX_WORKERS,
                 executor: str = 'process',
                 print_info: bool = True) -> DecodeResult:
    """Decode a batch of daily files in parallel and merge them in input order.

    Each file is decoded by one worker on its own; nothing is shared between
    workers. Results are buffered and concatenated by the file's position in
    ``paths`` once every file is done, so the output never depends on which
    worker finishes first.

    Parameters
    ----------
    paths : Sequence[Union[str, Path]]
        Files in discovery order.
    decoder : LineDecoder, optional
        Per-line decoder, by default parse_cdo_line. Must be picklable (a
        module-level function) when ``executor`` is 'process'.
    max_workers : Optional[int], optional
        Size of the worker pool. None lets concurrent.futures decide.
    executor : str, optional
        'process' (default) or 'thread'.
    print_info : bool, optional
        Whether to show a progress bar, by default True.

    Returns
    -------
    DecodeResult
        All records, ordered by file then line then day, and all per-line
        errors in the same order.

    Raises
    ------
    UnreadableFileError
        As soon as any file fails to open or read. Pending files are cancelled.
    ValueError
        If ``executor`` is not 'process' or 'thread'.
    """
    if executor not in _EXECUTORS:
        raise ValueError(f"executor must be one of {sorted(_EXECUTORS)}, got {executor!r}")

    paths = [Path(p) for p in paths]
    result = DecodeResult(num_files=len(paths))
    if not paths:
        return result

    with _EXECUTORS[executor](max_workers=max_workers) as pool:
        futures = [pool.submit(read_cdo_file, path, decoder) for path in paths]
        try:
            for future in tqdm(as_completed(futures), total=len(futures), desc="Decoding",
                               unit="file", disable=not print_info):
                future.result()
        except UnreadableFileError:
            for future in futures:
                future.cancel()
            raise

    # merge by submission index, not completion order
    for future in futures:
        file_result = future.result()
        result.records.extend(file_result.records)
        result.errors.extend(file_result.errors)

    return result


def record_columns(record_type: Type[Record]) -> List[str]:
    """Header row for a record type. Daily output carries a derived ``date`` column."""
    columns = list(record_type.__dataclass_fields__)
    if record_type is DailyRecord:
        columns.insert(columns.index('day') + 1, 'date')
    return columns


def records_to_df(records: Sequence[Record], record_type: Optional[Type[Record]] = None) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in the order given."""
    if record_type is None:
        if not records:
            raise ValueError("record_type is required when there are no records")
        record_type = type(records[0])

    columns = record_columns(record_type)
    rows = [tuple(getattr(record, column) for column in columns) for record in records]
    df = pd.DataFrame.from_records(rows, columns=columns)

    if 'date' in columns:
        df['date'] = [d.isoformat() for d in df['date']]

    return df


def write_records(records: Sequence[Record], sink, record_type: Optional[Type[Record]] = None) -> None:
    """Write records as CSV: a header row, then one row per record.

    ``sink`` can be a path or any writable text stream. A path is overwritten.
    """
    records_to_df(records, record_type).to_csv(sink, index=False)


def mask_missing(df: pd.DataFrame, column: str = 'value') -> pd.DataFrame:
    """Return a copy of ``df`` with the -9999 sentinel in ``column`` replaced by NaN."""
    df = df.copy()
    values = df[column].to_numpy(dtype=float)
    df[column] = np.where(values == metadata.MISSING_VALUE, np.nan, values)
    return df


def filter_records(df: pd.DataFrame,
                   start_year: Optional[int] = None,
                   end_year: Optional[int] = None,
                   elements: Optional[Iterable[str]] = None,
                   station_ids: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Filter a daily DataFrame by year range, element and station.

    Parameters
    ----------
    df : pd.DataFrame
        Output of records_to_df for DailyRecords.
    start_year, end_year : Optional[int]
        Inclusive year bounds. None leaves that side open.
    elements : Optional[Iterable[str]]
        Element codes to keep, e.g. metadata.CORE_ELEMENTS.
    station_ids : Optional[Iterable[str]]
        Stations to keep.

    Returns
    -------
    pd.DataFrame
        Matching rows, original order, fresh index.

    Examples
    --------
    >>> recent = filter_records(df, start_year=2010, elements=metadata.CORE_ELEMENTS)
    """
    mask = pd.Series(True, index=df.index)
    if start_year is not None:
        mask &= df['year'] >= start_year
    if end_year is not None:
        mask &= df['year'] <= end_year
    if elements is not None:
        mask &= df['element'].isin(list(elements))
    if station_ids is not None:
        mask &= df['station_id'].isin(list(station_ids))
    return df[mask].reset_index(drop=True)


def filter_stations(df: pd.DataFrame,
                    gsn: Optional[bool] = None,
                    hcn: Optional[bool] = None,
                    crn: Optional[bool] = None,
                    state: Optional[str] = None) -> pd.DataFrame:
    """Filter a station DataFrame by network membership and state.

    Each flag left as None is not filtered on.
    """
    mask = pd.Series(True, index=df.index)
    for column, wanted in (('gsn', gsn), ('hcn', hcn), ('crn', crn)):
        if wanted is not None:
            mask &= df[column] == wanted
    if state is not None:
        mask &= df['state'] == state
    return df[mask].reset_index(drop=True)


def sample_stations(df: pd.DataFrame, n: int = metadata.SAMPLE_SIZE, seed: Optional[int] = None) -> List[str]:
    """Pick ``n`` distinct station ids at random from a daily or station DataFrame.

    Fewer ids come back when the frame holds fewer than ``n`` stations. A fixed
    ``seed`` gives the same sample every time.
    """
    station_ids = pd.Series(df['station_id'].unique())
    return station_ids.sample(n=min(n, len(station_ids)), random_state=seed).tolist()


def sample_records(df: pd.DataFrame,
                   n: int = metadata.SAMPLE_SIZE,
                   start_year: Optional[int] = metadata.SAMPLE_START_YEAR,
                   elements: Optional[Iterable[str]] = metadata.CORE_ELEMENTS,
                   seed: Optional[int] = None) -> pd.DataFrame:
    """Recent core-element observations of a random sample of stations.

    Stations are drawn from the whole of ``df`` before the year and element
    filters are applied.

    Examples
    --------
    >>> sample = sample_records(df, n=100, seed=0)
    >>> gsn = gsn_stations(stations_df, sample['station_id'].unique())
    """
    return filter_records(df, start_year=start_year, elements=elements,
                          station_ids=sample_stations(df, n, seed))


def gsn_stations(stations_df: pd.DataFrame, sampled_ids: Iterable[str] = ()) -> pd.DataFrame:
    """GSN stations, with a ``sampled`` column marking those in ``sampled_ids``."""
    gsn = filter_stations(stations_df, gsn=True)
    gsn['sampled'] = gsn['station_id'].isin(list(sampled_ids))
    return gsn


def to_dataset(df: pd.DataFrame) -> xr.Dataset:
    """Pivot a daily DataFrame into an xarray Dataset.

    The Dataset has dimensions (station_id, date) and one variable per
    element. Missing values (-9999) become NaN. Flags are not carried over.
    """
    if df.empty:
        raise ValueError("Cannot build a Dataset from an empty DataFrame")

    data = mask_missing(df)
    if 'date' in data.columns:
        data['date'] = pd.to_datetime(data['date'])
    else:
        data['date'] = pd.to_datetime(data[['year', 'month', 'day']])

    values = data.set_index(['station_id', 'date', 'element'])['value'].unstack('element')
    values.columns.name = None
    ds = values.to_xarray()

    ds.attrs['title'] = 'GHCN-Daily observations'
    ds.attrs['source'] = 'Decoded from GHCN-Daily .dly files'
    ds.attrs['missing_sentinel'] = metadata.MISSING_VALUE
    ds.attrs['creation_date'] = datetime.datetime.now().strftime('%Y%m%d%H%M%S')
    return ds


def save_data(data: Union[Sequence[Record], pd.DataFrame, xr.Dataset], name: str) -> None:
    """Save decoded data, picking the format from the file suffix.

    Parameters
    ----------
    data : Union[Sequence[Record], pd.DataFrame, xr.Dataset]
        Decoded records, a DataFrame from records_to_df, or a Dataset from
        to_dataset.
    name : str
        Output path. A '.nc' suffix writes NetCDF, anything else writes CSV.

    Raises
    ------
    TypeError
        If ``data`` is none of the above.
    ValueError
        If a Dataset is to be written to CSV, or station data to NetCDF.
    """
    if isinstance(data, (list, tuple)):
        data = records_to_df(data) if data else pd.DataFrame()

    netcdf = Path(name).suffix == '.nc'

    if isinstance(data, xr.Dataset):
        if not netcdf:
            raise ValueError(f"A Dataset can only be saved as NetCDF (.nc), got {name}")
        data.to_netcdf(name)
    elif isinstance(data, pd.DataFrame):
        if netcdf:
            if 'element' not in data.columns:
                raise ValueError("Only daily data can be saved as NetCDF")
            to_dataset(data).to_netcdf(name)
        else:
            data.to_csv(name, index=False)
    else:
        raise TypeError(f"Expected records, a pandas DataFrame or an xarray Dataset, got {type(data).__name__}")


def download_station_file(station_id: str, output_dir: Optional[str] = None) -> Optional[str]:
    """
    Download a station's daily (.dly) file from the GHCN-Daily archive.

    Args:
        station_id: Station ID (e.g., "USW00094728" for Central Park, NY)
        output_dir: Optional directory to save the file. If None, uses current directory.

    Returns:
        Path to the downloaded file if successful, None otherwise.

    Examples:
        >>> file_path = download_station_file("USW00094728", "data")
        >>> result = read_cdo_file(file_path)
    """
    if output_dir is None:
        output_dir = os.getcwd()
    os.makedirs(output_dir, exist_ok=True)

    url = f"{metadata.GHCND_FILES_URL}{station_id}{metadata.CDO_EXTENSION}"
    output_path = os.path.join(output_dir, f"{station_id}{metadata.CDO_EXTENSION}")

    try:
        print(f"Downloading data for station {station_id}...")
        response = requests.get(url, stream=True)
        response.raise_for_status()

        total_size = int(response.headers.get('content-length', 0))

        with open(output_path, 'wb') as out_file, \
                tqdm(total=total_size, unit='iB', unit_scale=True, desc=f"Downloading {station_id}") as pbar:
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    out_file.write(chunk)
                    pbar.update(len(chunk))

        print(f"Successfully downloaded data to: {output_path}")
        return output_path

    except requests.exceptions.RequestException as e:
        print(f"Error downloading data for station {station_id}: {e}")
        return None


def read_station_locations(save_file: bool = False, print_info: bool = True) -> pd.DataFrame:
    """Download and parse the GHCN-Daily station list.

    Parameters
    ----------
    save_file : bool, optional
        Whether to also write the stations to metadata.STATION_OUTPUT_FILE,
        by default False.
    print_info : bool, optional
        Whether to print progress and parse warnings, by default True.

    Returns
    -------
    pd.DataFrame
        One row per station with the StationRecord columns. Empty if the
        download fails.

    Examples
    --------
    >>> stations_df = read_station_locations()
    >>> gsn = filter_stations(stations_df, gsn=True)
    """
    try:
        response = requests.get(metadata.GHCND_STATION_LIST_URL)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        print(f"Error downloading station list: {e}")
        return pd.DataFrame(columns=record_columns(StationRecord))

    stations = []
    errors = []
    for line_number, line in enumerate(response.text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            stations.append(parse_station_line(line, line_number))
        except MalformedFieldError as e:
            errors.append(e.located(metadata.GHCND_STATION_LIST_URL, line_number))

    report_errors(errors, print_info)

    df = records_to_df(stations, StationRecord)

    if save_file:
        df.to_csv(metadata.STATION_OUTPUT_FILE, index=False)
        if print_info:
            print(f"Saved station list to {metadata.STATION_OUTPUT_FILE}")

    return df


def report_errors(errors: Sequence[MalformedFieldError], print_info: bool = True) -> None:
    """Print how many lines were rejected and a few of the reasons."""
    if not errors or not print_info:
        return
    print(f"Skipped {len(errors)} malformed line(s)")
    for error in errors[:metadata.MAX_REPORTED_ERRORS]:
        print(f"  {error}")
    if len(errors) > metadata.MAX_REPORTED_ERRORS:
        print(f"  ... and {len(errors) - metadata.MAX_REPORTED_ERRORS} more")


def run(input_path: Union[str, Path],
        stations: bool = False,
        output: Optional[str] = None,
        max_workers: Optional[int] = metadata.DEFAULT_MAX_WORKERS,
        executor: str = 'process',
        extension: str = metadata.CDO_EXTENSION,
        print_info: bool = True) -> Union[DecodeResult, StationDecodeResult]:
    """Decode a station file or a directory of daily files and write CSV output.

    Parameters
    ----------
    input_path : Union[str, Path]
        Station file (``stations=True``) or a directory/file of daily data.
    stations : bool, optional
        Decode station metadata instead of daily data, by default False.
    output : Optional[str], optional
        Output CSV path. Defaults to metadata.STATION_OUTPUT_FILE or
        metadata.CDO_OUTPUT_FILE depending on the mode.

    Returns
    -------
    Union[DecodeResult, StationDecodeResult]
        The decoded records and per-line errors.

    Raises
    ------
    InvalidModeInputError
        If the input path does not fit the mode. Raised before any decoding.
    UnreadableFileError
        If any input file cannot be read. Nothing is written in that case.
    """
    input_path = Path(input_path)

    if stations:
        if input_path.is_dir():
            raise InvalidModeInputError(
                f"When decoding stations, a file must be specified, not a directory: {input_path}")
        output = output or metadata.STATION_OUTPUT_FILE

        result = read_station_file(input_path)
        write_records(result.records, output, StationRecord)
        if print_info:
            print(f"Wrote {len(result.records)} stations to {output}")
    else:
        output = output or metadata.CDO_OUTPUT_FILE

        files = find_cdo_files(input_path, extension)
        if print_info:
            print(f"Found {len(files)} {extension} files")

        result = decode_files(files, max_workers=max_workers, executor=executor, print_info=print_info)
        write_records(result.records, output, DailyRecord)
        if print_info:
            print(f"Wrote {len(result.records)} daily records from {result.num_files} files to {output}")

    report_errors(result.errors, print_info)
    return result


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='cdot',
        description="Decode GHCN-Daily .dly files or the station list into CSV.")
    parser.add_argument('input', help="Directory of daily files, a daily file, or the station list file")
    parser.add_argument('-s', '--stations', action='store_true',
                        help="Decode the station metadata file instead of daily data")
    parser.add_argument('-o', '--output', default=None,
                        help=f"Output CSV (default {metadata.CDO_OUTPUT_FILE} or {metadata.STATION_OUTPUT_FILE})")
    parser.add_argument('-j', '--workers', type=_positive_int, default=metadata.DEFAULT_MAX_WORKERS,
                        help="Number of parallel workers")
    parser.add_argument('--threads', action='store_true', help="Use threads instead of processes")
    parser.add_argument('--ext', default=metadata.CDO_EXTENSION, help="Extension of daily files")
    parser.add_argument('-q', '--quiet', action='store_true', help="Do not print progress")
    args = parser.parse_args(argv)

    try:
        run(args.input,
            stations=args.stations,
            output=args.output,
            max_workers=args.workers,
            executor='thread' if args.threads else 'process',
            extension=args.ext,
            print_info=not args.quiet)
    except (InvalidModeInputError, UnreadableFileError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
