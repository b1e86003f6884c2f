"""
Tests for tabular output, the analysis helpers and the command line entry point.
"""

import io
import json
from unittest.mock import Mock, patch

import numpy as np
import pandas as pd
import pytest
import requests
import xarray as xr

from cdot import cdotmetadata as metadata
from cdot.availability import get_availability, save_availability_json
from cdot.cdot import (
    download_station_file,
    filter_records,
    filter_stations,
    gsn_stations,
    main,
    mask_missing,
    parse_cdo_line,
    parse_station_line,
    read_station_locations,
    record_columns,
    records_to_df,
    run,
    sample_records,
    sample_stations,
    save_data,
    to_dataset,
    write_records,
)
from cdot.exceptions import InvalidModeInputError
from cdot.models import DailyRecord, StationRecord

from .conftest import make_cdo_line, make_station_line


@pytest.fixture
def daily_records():
    return (parse_cdo_line(make_cdo_line("USW00094728", 2020, 2, "TMAX", {1: 150, 2: 160}))
            + parse_cdo_line(make_cdo_line("USW00094728", 2020, 2, "TMIN", {1: -20}))
            + parse_cdo_line(make_cdo_line("AGE00135039", 2009, 4, "PRCP", {1: 3})))


@pytest.fixture
def station_records():
    return [
        parse_station_line(make_station_line("AGE00135039", gsn="GSN", wmo_id="60490")),
        parse_station_line(make_station_line("USW00094728", "40.7789", "-73.9692", "39.6", "NY",
                                             "NEW YORK CNTRL PK TWR", "", "HCN", "72506")),
        parse_station_line(make_station_line("USW00003047", "31.9", "-102.0", "900.0", "TX",
                                             "ODESSA", "", "CRN")),
    ]


class TestWriteRecords:
    def test_daily_header_and_rows(self, daily_records):
        sink = io.StringIO()
        write_records(daily_records, sink)

        lines = sink.getvalue().splitlines()
        assert lines[0] == "station_id,year,month,day,date,element,value,mflag,qflag,sflag"
        assert len(lines) == len(daily_records) + 1
        assert lines[1] == "USW00094728,2020,2,1,2020-02-01,TMAX,150,,,"

    def test_station_header_and_rows(self, station_records):
        sink = io.StringIO()
        write_records(station_records, sink)

        lines = sink.getvalue().splitlines()
        assert lines[0] == "station_id,latitude,longitude,elevation,state,name,gsn,hcn,crn,wmo_id"
        assert lines[1].startswith("AGE00135039,36.7,0.65,50.0,,ORAN-HOPITAL MILITAIRE,True,False,False,60490")

    def test_empty_writes_header_only(self):
        sink = io.StringIO()
        write_records([], sink, DailyRecord)
        assert sink.getvalue().splitlines() == [",".join(record_columns(DailyRecord))]

    def test_empty_without_type(self):
        with pytest.raises(ValueError):
            records_to_df([])

    def test_order_preserved(self, daily_records):
        df = records_to_df(list(reversed(daily_records)))
        assert df['station_id'].iloc[0] == "AGE00135039"
        assert df['station_id'].iloc[-1] == "USW00094728"
        assert len(df) == len(daily_records)

    def test_sentinel_preserved(self, daily_records):
        df = records_to_df(daily_records)
        assert (df['value'] == -9999).sum() == len(daily_records) - 4

    def test_writes_to_path(self, daily_records, tmp_path):
        out = tmp_path / "out.csv"
        out.write_text("stale\n")
        write_records(daily_records, out)
        assert out.read_text().splitlines()[0].startswith("station_id,")


class TestAnalysisHelpers:
    def test_mask_missing(self, daily_records):
        df = mask_missing(records_to_df(daily_records))
        assert df['value'].isna().sum() == len(daily_records) - 4
        assert df['value'].iloc[0] == 150.0

    def test_filter_records(self, daily_records):
        df = records_to_df(daily_records)

        recent = filter_records(df, start_year=2010)
        assert set(recent['station_id']) == {"USW00094728"}

        old = filter_records(df, end_year=2009)
        assert set(old['station_id']) == {"AGE00135039"}

        tmin = filter_records(df, elements=["TMIN"], station_ids=["USW00094728"])
        assert set(tmin['element']) == {"TMIN"}
        assert len(tmin) == 29

        assert len(filter_records(df, elements=metadata.CORE_ELEMENTS)) == len(df)

    def test_filter_stations(self, station_records):
        df = records_to_df(station_records)
        assert list(filter_stations(df, gsn=True)['station_id']) == ["AGE00135039"]
        assert list(filter_stations(df, hcn=True)['station_id']) == ["USW00094728"]
        assert list(filter_stations(df, crn=True, state="TX")['station_id']) == ["USW00003047"]
        assert len(filter_stations(df)) == 3

    def test_to_dataset(self, daily_records):
        ds = to_dataset(records_to_df(daily_records))

        assert set(ds.data_vars) == {"TMAX", "TMIN", "PRCP"}
        assert float(ds['TMAX'].sel(station_id="USW00094728", date=pd.Timestamp("2020-02-01"))) == 150.0
        assert float(ds['TMIN'].sel(station_id="USW00094728", date=pd.Timestamp("2020-02-01"))) == -20.0
        assert np.isnan(float(ds['TMAX'].sel(station_id="USW00094728", date=pd.Timestamp("2020-02-03"))))

    def test_to_dataset_empty(self):
        with pytest.raises(ValueError):
            to_dataset(records_to_df([], DailyRecord))

    def test_save_data(self, daily_records, tmp_path):
        df = records_to_df(daily_records)
        csv_path = tmp_path / "daily.csv"
        save_data(df, str(csv_path))
        assert len(pd.read_csv(csv_path)) == len(df)

        nc_path = tmp_path / "daily.nc"
        save_data(to_dataset(df), str(nc_path))
        with xr.open_dataset(nc_path) as ds:
            assert "TMAX" in ds.data_vars

    def test_save_records_by_suffix(self, daily_records, tmp_path):
        csv_path = tmp_path / "records.csv"
        save_data(daily_records, str(csv_path))
        assert list(pd.read_csv(csv_path).columns) == record_columns(DailyRecord)

        nc_path = tmp_path / "records.nc"
        save_data(daily_records, str(nc_path))
        with xr.open_dataset(nc_path) as ds:
            assert set(ds.data_vars) == {"TMAX", "TMIN", "PRCP"}

    def test_save_data_rejects_mismatches(self, station_records, tmp_path):
        with pytest.raises(ValueError):
            save_data(station_records, str(tmp_path / "stations.nc"))
        with pytest.raises(TypeError):
            save_data({"not": "data"}, str(tmp_path / "x.csv"))

    def test_sample_stations(self, daily_records):
        df = records_to_df(daily_records)

        one = sample_stations(df, n=1, seed=3)
        assert len(one) == 1
        assert one[0] in {"USW00094728", "AGE00135039"}
        assert sample_stations(df, n=1, seed=3) == one
        assert sorted(sample_stations(df, n=100)) == ["AGE00135039", "USW00094728"]

    def test_sample_records(self, daily_records):
        df = records_to_df(daily_records)
        recent = sample_records(df, n=10, seed=0)
        assert set(recent['station_id']) == {"USW00094728"}
        assert (recent['year'] >= metadata.SAMPLE_START_YEAR).all()
        assert len(recent) == 58

    def test_gsn_stations_marks_sampled(self, station_records):
        stations_df = records_to_df(station_records)
        gsn = gsn_stations(stations_df, ["AGE00135039", "USW00094728"])
        assert list(gsn['station_id']) == ["AGE00135039"]
        assert gsn['sampled'].tolist() == [True]

        assert gsn_stations(stations_df)['sampled'].tolist() == [False]


class TestAvailability:
    def test_summary(self, daily_records):
        availability = get_availability(records_to_df(daily_records))

        usw = availability["USW00094728"]
        assert usw['available_years'] == [2020]
        assert usw['elements'] == ["TMAX", "TMIN"]
        assert usw['num_total_records'] == 3
        assert usw['num_days_per_year'] == {2020: 2}
        assert availability["AGE00135039"]['num_months_per_year'] == {2009: 1}

    def test_keep_missing(self, daily_records):
        availability = get_availability(records_to_df(daily_records), skip_missing=False)
        assert availability["USW00094728"]['num_total_records'] == 58

    def test_save_json(self, daily_records, tmp_path):
        written = save_availability_json(get_availability(records_to_df(daily_records)), str(tmp_path))
        with open(written["AGE00135039"]) as f:
            data = json.load(f)
        assert data['station_id'] == "AGE00135039"


class TestRun:
    def test_daily_mode(self, cdo_dir, tmp_path):
        out = tmp_path / "noaa-cdo.csv"
        result = run(cdo_dir, output=str(out), executor="thread", print_info=False)

        df = pd.read_csv(out, keep_default_na=False)
        assert len(df) == len(result.records) == 31 + 29 + 30 + 31
        assert list(df['station_id'].unique()) == ["AGE00135039", "CA001011500", "USW00094728"]

    def test_station_mode(self, tmp_path):
        station_file = tmp_path / "ghcnd-stations.txt"
        station_file.write_text(make_station_line() + "\n")
        out = tmp_path / "noaa-stations.csv"

        result = run(station_file, stations=True, output=str(out), print_info=False)

        assert len(result.records) == 1
        assert pd.read_csv(out)['latitude'].iloc[0] == pytest.approx(36.7)

    def test_station_mode_rejects_directory(self, tmp_path):
        out = tmp_path / "noaa-stations.csv"
        with pytest.raises(InvalidModeInputError):
            run(tmp_path, stations=True, output=str(out), print_info=False)
        assert not out.exists()

    def test_reports_errors(self, tmp_path, capsys):
        path = tmp_path / "bad.dly"
        line = make_cdo_line(month=1)
        path.write_text(line[:21] + "xxxxx" + line[26:] + "\n" + line + "\n")

        result = run(path, output=str(tmp_path / "out.csv"), executor="thread", print_info=True)

        assert len(result.errors) == 1
        assert len(result.records) == 31
        assert "Skipped 1 malformed line(s)" in capsys.readouterr().out


class TestMain:
    def test_daily(self, cdo_dir, tmp_path):
        out = tmp_path / "cdo.csv"
        assert main([str(cdo_dir), "-o", str(out), "--threads", "-q"]) == 0
        assert out.exists()

    def test_stations_on_directory_fails(self, tmp_path, capsys):
        assert main([str(tmp_path), "--stations", "-q", "-o", str(tmp_path / "s.csv")]) == 1
        assert "directory" in capsys.readouterr().err

    def test_missing_input_fails(self, tmp_path):
        assert main([str(tmp_path / "nope"), "-q", "-o", str(tmp_path / "c.csv")]) == 1

    @pytest.mark.parametrize("workers", ["0", "-2", "many"])
    def test_rejects_bad_worker_count(self, cdo_dir, tmp_path, workers, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(cdo_dir), "-j", workers, "-q", "-o", str(tmp_path / "c.csv")])
        assert excinfo.value.code == 2
        assert "--workers" in capsys.readouterr().err


class TestDownloads:
    @patch("cdot.cdot.requests.get")
    def test_download_station_file(self, mock_get, tmp_path):
        payload = (make_cdo_line(month=1) + "\n").encode()
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.headers = {'content-length': str(len(payload))}
        mock_response.iter_content.return_value = [payload]
        mock_get.return_value = mock_response

        path = download_station_file("USW00094728", str(tmp_path))

        assert path == str(tmp_path / "USW00094728.dly")
        assert mock_get.call_args[0][0] == metadata.GHCND_FILES_URL + "USW00094728.dly"
        with open(path) as f:
            assert len(parse_cdo_line(f.readline())) == 31

    @patch("cdot.cdot.requests.get")
    def test_download_failure_returns_none(self, mock_get, tmp_path):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        assert download_station_file("USW00094728", str(tmp_path)) is None

    @patch("cdot.cdot.requests.get")
    def test_read_station_locations(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.text = "\n".join([
            make_station_line("AGE00135039", gsn="GSN"),
            make_station_line("BAD00000001", elevation="high"),
            make_station_line("USW00094728", "40.7789", "-73.9692", "39.6", "NY", "NEW YORK", "", "HCN"),
        ])
        mock_get.return_value = mock_response

        df = read_station_locations(print_info=False)

        assert list(df['station_id']) == ["AGE00135039", "USW00094728"]
        assert list(df.columns) == record_columns(StationRecord)

    @patch("cdot.cdot.requests.get")
    def test_read_station_locations_offline(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        df = read_station_locations(print_info=False)
        assert df.empty
