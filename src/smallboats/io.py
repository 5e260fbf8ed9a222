"""
Input and output

The source is the spreadsheet of
[migrants detected crossing the English Channel in small boats](https://www.gov.uk/government/publications/migrants-detected-crossing-the-english-channel-in-small-boats)
published weekly by the Home Office.
The daily time series is on its third sheet.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import numpy as np
import pandas as pd

from smallboats.constants import DATE_COLUMN
from smallboats.exceptions import (
    InvalidRecordError,
    MissingOptionalDependencyError,
    SourceFileError,
)
from smallboats.processor import SmallBoatsProcessingResult, SmallBoatsProcessor

logger = logging.getLogger(__name__)

OUTPUT_FILENAMES: dict[str, str] = {
    "daily": "long_uk_small_boats_daily.csv",
    "weekly": "long_uk_small_boats_weekly.csv",
    "monthly": "long_uk_small_boats_monthly.csv",
    "yearly": "long_uk_small_boats_yearly.csv",
    "weekly_cumulative_wide": "wide_uk_small_boats_weekly_cumulative_migrants.csv",
    "monthly_cumulative_wide": "wide_uk_small_boats_monthly_cumulative_migrants.csv",
}
"""
Filename to which to write each table of the processing results
"""


def find_source_file(input_dir: Path, pattern: str = "*.ods") -> Path:
    """
    Find the source file

    Parameters
    ----------
    input_dir
        Directory in which to look

    pattern
        Glob pattern the source file must match

    Returns
    -------
    :
        Path to the source file

    Raises
    ------
    SourceFileError
        There isn't exactly one file matching `pattern` in `input_dir`
    """
    input_dir = Path(input_dir)
    found = sorted(p for p in input_dir.glob(pattern) if p.is_file())
    if len(found) != 1:
        raise SourceFileError(input_dir=input_dir, pattern=pattern, found=found)

    logger.info("Found source file %s", found[0])

    return found[0]


def clean_column_name(name: object) -> str:
    """
    Clean a column name

    The result is lower snake case, containing only letters, numbers and underscores.

    Parameters
    ----------
    name
        Name to clean

    Returns
    -------
    :
        Cleaned name

    Examples
    --------
    >>> clean_column_name("Migrants arrived")
    'migrants_arrived'
    >>> clean_column_name("boatsArrived (uncontrolled landings)")
    'boats_arrived_uncontrolled_landings'
    >>> clean_column_name("% change")
    'percent_change'
    >>> clean_column_name("2024")
    'x2024'
    """
    res = str(name).replace("%", " percent ").replace("#", " number ")
    # Split camelCase
    res = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", res)
    res = re.sub(r"[^0-9a-zA-Z]+", "_", res).strip("_").lower()

    if not res:
        return "x"

    if res[0].isdigit():
        return f"x{res}"

    return res


def clean_column_names(names: Iterable[object]) -> list[str]:
    """
    Clean column names, keeping them unique

    Repeated names get a suffix of `_2`, `_3` etc.

    Parameters
    ----------
    names
        Names to clean

    Returns
    -------
    :
        Cleaned names

    Examples
    --------
    >>> clean_column_names(["Date", "Notes", "notes"])
    ['date', 'notes', 'notes_2']
    """
    res: list[str] = []
    seen: dict[str, int] = {}
    for name in names:
        cleaned = clean_column_name(name)
        seen[cleaned] = seen.get(cleaned, 0) + 1
        if seen[cleaned] > 1:
            cleaned = f"{cleaned}_{seen[cleaned]}"

        res.append(cleaned)

    return res


def parse_day_first_dates(values: pd.Series) -> pd.Series:
    """
    Parse dates which are written day first (e.g. "31/12/2025")

    Values which are already dates are kept as they are.

    Parameters
    ----------
    values
        Values to parse

    Returns
    -------
    :
        Parsed dates

    Raises
    ------
    InvalidRecordError
        The values could not be parsed as dates
    """
    if pd.api.types.is_datetime64_any_dtype(values):
        return values

    try:
        return pd.to_datetime(values, dayfirst=True, format="mixed")
    except (ValueError, TypeError) as exc:
        msg = f"Could not parse {values.name} as day-first dates"
        raise InvalidRecordError(msg) from exc


def read_sheet(path: Path, sheet: int | str) -> pd.DataFrame:
    """
    Read a sheet of the source file

    CSV files are also supported, in which case `sheet` is ignored.

    Parameters
    ----------
    path
        Path to the source file

    sheet
        Sheet to read (zero-based index or name)

    Returns
    -------
    :
        Raw contents of the sheet
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)

    if suffix == ".ods":
        try:
            import odf  # noqa: F401
        except ImportError as exc:
            raise MissingOptionalDependencyError(
                "read_sheet", requirement="odfpy"
            ) from exc

        return pd.read_excel(path, sheet_name=sheet, engine="odf")

    try:
        import openpyxl  # noqa: F401
    except ImportError as exc:
        raise MissingOptionalDependencyError(
            "read_sheet", requirement="openpyxl"
        ) from exc

    return pd.read_excel(path, sheet_name=sheet, engine="openpyxl")


def load_daily_source(
    path: Path, sheet: int | str = 2, date_column: str = "date"
) -> pd.DataFrame:
    """
    Load the daily records from the source file

    Parameters
    ----------
    path
        Path to the source file

    sheet
        Sheet which holds the daily records (zero-based index or name)

    date_column
        Column which holds the dates, after cleaning the column names

    Returns
    -------
    :
        Daily records with cleaned column names,
        the dates parsed into the `full_date` column,
        sorted by date.
        Completely empty rows are dropped.
    """
    path = Path(path)
    raw = read_sheet(path, sheet=sheet).dropna(how="all")
    raw.columns = clean_column_names(raw.columns)
    if date_column not in raw.columns:
        msg = (
            f"No {date_column!r} column in {path}. "
            f"Available columns: {list(raw.columns)}"
        )
        raise InvalidRecordError(msg)

    res = raw.assign(**{date_column: parse_day_first_dates(raw[date_column])})
    res = res.rename(columns={date_column: DATE_COLUMN})
    res = res.sort_values(DATE_COLUMN, kind="stable").reset_index(drop=True)

    logger.info("Loaded %d daily records from %s", res.shape[0], path)

    return res


def format_undefined_values(indf: pd.DataFrame) -> pd.DataFrame:
    """
    Format undefined floating point values so they can be told apart from missing values

    Only plain (numpy) float columns can hold undefined values,
    nullable columns use `pd.NA` for missing values.
    `NaN` is formatted as "NaN", infinity as "Inf" and negative infinity as "-Inf".

    Parameters
    ----------
    indf
        Data to format

    Returns
    -------
    :
        Copy of `indf` with undefined values in plain float columns
        replaced by their string representation
    """
    res = indf.copy()
    for column in res.columns:
        if res[column].dtype != np.float64:
            continue

        values = res[column].to_numpy()
        formatted = res[column].astype(object)
        formatted[np.isnan(values)] = "NaN"
        formatted[np.isposinf(values)] = "Inf"
        formatted[np.isneginf(values)] = "-Inf"
        res[column] = formatted

    return res


def write_table(indf: pd.DataFrame, path: Path) -> None:
    """
    Write a table to CSV

    Missing values are written as empty fields
    and dates are written as `YYYY-MM-DD`.

    Parameters
    ----------
    indf
        Table to write

    path
        Path to which to write
    """
    format_undefined_values(indf).to_csv(
        path, index=False, na_rep="", date_format="%Y-%m-%d", lineterminator="\n"
    )


def write_results(
    result: SmallBoatsProcessingResult, output_dir: Path
) -> dict[str, Path]:
    """
    Write the processing results

    Parameters
    ----------
    result
        Results to write

    output_dir
        Directory in which to write the results.
        It is created if it doesn't exist.

    Returns
    -------
    :
        Path to which each table was written
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    res = {}
    for name, filename in OUTPUT_FILENAMES.items():
        out_path = output_dir / filename
        write_table(getattr(result, name), out_path)
        logger.info("Wrote %s", out_path)
        res[name] = out_path

    return res


def process_directory(
    input_dir: Path,
    output_dir: Path,
    pattern: str = "*.ods",
    sheet: int | str = 2,
    processor: SmallBoatsProcessor | None = None,
) -> SmallBoatsProcessingResult:
    """
    Find and load the source file, process it and write the results

    Nothing is written unless all the processing succeeds.

    Parameters
    ----------
    input_dir
        Directory which holds the source file

    output_dir
        Directory in which to write the results

    pattern
        Glob pattern the source file must match

    sheet
        Sheet of the source file which holds the daily records

    processor
        Processor to use. If not supplied, we use the default processor.

    Returns
    -------
    :
        Processing results (as written to `output_dir`)
    """
    if processor is None:
        processor = SmallBoatsProcessor()

    source = find_source_file(input_dir, pattern=pattern)
    res = processor(load_daily_source(source, sheet=sheet))
    write_results(res, output_dir)

    return res
