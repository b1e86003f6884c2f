from typing import Dict, Optional
import json
import os

import numpy as np
import pandas as pd

from . import cdotmetadata as metadata


def get_availability(df: pd.DataFrame, skip_missing: bool = True) -> Dict[str, Dict]:
    """
    Summarise which years and elements each station has data for.

    Takes the DataFrame produced by cdot.records_to_df for daily records.
    Days carrying the -9999 sentinel are left out unless skip_missing is False.
    """
    if skip_missing:
        df = df[df['value'] != metadata.MISSING_VALUE]

    availability = {}
    for station_id, station_data in df.groupby('station_id', sort=False):
        years = station_data['year'].to_numpy()
        unique_years, year_counts = np.unique(years, return_counts=True)

        year_months = {}
        year_days = {}
        for year in unique_years:
            year_data = station_data[years == year]
            year_months[int(year)] = int(len(np.unique(year_data['month'])))
            day_of_year = year_data['month'].to_numpy() * 100 + year_data['day'].to_numpy()
            year_days[int(year)] = int(len(np.unique(day_of_year)))

        availability[station_id] = {
            'station_id': station_id,
            'num_total_records': int(len(station_data)),
            'available_years': [int(y) for y in unique_years],
            'elements': sorted(station_data['element'].unique().tolist()),
            'num_records_per_year': {int(y): int(c) for y, c in zip(unique_years, year_counts)},
            'num_months_per_year': year_months,
            'num_days_per_year': year_days,
        }

    return availability


def save_availability_json(availability: Dict[str, Dict], download_dir: Optional[str] = None) -> Dict[str, str]:
    """Write one <station_id>-availability.json file per station."""
    if download_dir is None:
        download_dir = os.getcwd()
    os.makedirs(download_dir, exist_ok=True)

    written = {}
    for station_id, availability_data in availability.items():
        availability_file = os.path.join(download_dir, f"{station_id}-availability.json")
        with open(availability_file, 'w') as f:
            json.dump(availability_data, f, indent=4)
        written[station_id] = availability_file

    return written
