from datetime import datetime
from typing import NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from config import DatasetConfig
from download import provision
from errors import RangeNotFoundError, TimestampParseError
from schema import NUMERIC, Schema, infer_schema

DATE_FORMAT = '%d/%m/%Y'
TIMESTAMP_FORMAT = '%d/%m/%Y %H:%M:%S'
DAY_START = '00:00:00'
DAY_END = '23:59:00'


class DateRange(NamedTuple):
    """Inclusive pair of 'dd/mm/yyyy' dates. Assumes start <= end."""
    start: str
    end: str


def _disk_date(date: str) -> str:
    # the dataset writes day and month without zero padding
    try:
        parsed = datetime.strptime(date.strip(), DATE_FORMAT)
    except ValueError as exc:
        raise RangeNotFoundError(f"{date!r} is not a dd/mm/yyyy date") from exc
    return f"{parsed.day}/{parsed.month}/{parsed.year}"


def boundary_keys(date_range: DateRange, separator: str = ';') -> Tuple[str, str]:
    return (
        f"{_disk_date(date_range.start)}{separator}{DAY_START}",
        f"{_disk_date(date_range.end)}{separator}{DAY_END}",
    )


def locate_range(dataset_path: str, date_range: DateRange,
                 separator: str = ';') -> Tuple[int, int]:
    """
    Finds the data lines holding the first and last record of the range.

    Single top-to-bottom pass over the file. Each line's Date and Time
    fields are compared to the boundary keys; when a key occurs more than
    once, the first line carrying it wins. Line numbers are 1-based and
    count data lines only (the header is line 0).
    """
    start_key, end_key = boundary_keys(date_range, separator)
    start_line: Optional[int] = None
    end_line: Optional[int] = None

    with open(dataset_path, 'r') as f:
        next(f, None)
        for line_no, line in enumerate(f, start=1):
            key = separator.join(line.rstrip('\r\n').split(separator, 2)[:2])
            if start_line is None and key == start_key:
                start_line = line_no
            if end_line is None and key == end_key:
                end_line = line_no
            if start_line is not None and end_line is not None:
                break

    if start_line is None:
        raise RangeNotFoundError(f"Start key {start_key!r} not found in {dataset_path}")
    if end_line is None:
        raise RangeNotFoundError(f"End key {end_key!r} not found in {dataset_path}")
    if end_line < start_line:
        raise RangeNotFoundError(
            f"End key {end_key!r} (line {end_line}) comes before "
            f"start key {start_key!r} (line {start_line})"
        )
    return start_line, end_line


def load_range(dataset_path: str, schema: Schema, span: Tuple[int, int],
               na_token: str = '?', separator: str = ';') -> pd.DataFrame:
    start_line, end_line = span
    dtypes = {
        name: (np.float64 if kind == NUMERIC else str)
        for name, kind in schema
    }
    return pd.read_csv(
        dataset_path,
        sep=separator,
        header=None,
        names=[name for name, _ in schema],
        dtype=dtypes,
        # header line plus the data lines before the span; blank lines
        # count as rows so the span matches locate_range
        skiprows=start_line,
        nrows=end_line - start_line + 1,
        skip_blank_lines=False,
        na_values=[na_token, ''],
        keep_default_na=False,
    )


def normalize_timestamps(df: pd.DataFrame) -> pd.DataFrame:
    """
    Merges Date and Time into a single Timestamp column.
    Timestamp takes Date's position and Time is dropped.
    """
    combined = df['Date'] + ' ' + df['Time']
    stamps = pd.to_datetime(combined, format=TIMESTAMP_FORMAT, errors='coerce')

    bad = np.flatnonzero(stamps.isna().to_numpy())
    if len(bad):
        row = int(bad[0])
        raise TimestampParseError(row, f"{df['Date'].iloc[row]} {df['Time'].iloc[row]}")

    out = df.drop(columns=['Time'])
    out['Date'] = stamps
    return out.rename(columns={'Date': 'Timestamp'})


def load_window(date_range: DateRange, dataset_path: str, sample_rows: int = 100,
                na_token: str = '?', separator: str = ';') -> pd.DataFrame:
    print(f"Loading {dataset_path} for {date_range.start} - {date_range.end}...")

    # 1. Column names and types from the head of the file
    schema = infer_schema(dataset_path, sample_rows=sample_rows,
                          na_token=na_token, separator=separator)

    # 2. Line span of the window
    span = locate_range(dataset_path, date_range, separator=separator)
    print(f"Located data lines {span[0]}-{span[1]}")

    # 3. Bounded read + timestamp merge
    power_df = load_range(dataset_path, schema, span,
                          na_token=na_token, separator=separator)
    power_df = normalize_timestamps(power_df)

    print(f"Data prepared. Shape: {power_df.shape}")
    return power_df


def prepare(date_range: DateRange, config: Optional[DatasetConfig] = None) -> pd.DataFrame:
    config = config or DatasetConfig()
    dataset_path = provision(config)
    return load_window(
        date_range,
        dataset_path,
        sample_rows=config.schema_sample_rows,
        na_token=config.na_token,
        separator=config.separator,
    )


if __name__ == "__main__":
    hpc = prepare(DateRange("1/2/2007", "2/2/2007"))
    print(hpc.head())
