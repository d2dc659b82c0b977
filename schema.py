import re
import warnings
from typing import List, Tuple

import pandas as pd

from errors import SchemaInferenceWarning

TEXT = 'text'
NUMERIC = 'numeric'
DATE_TIME_COLS = ('Date', 'Time')

Schema = List[Tuple[str, str]]

DECIMAL = re.compile(r'[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _is_number(value: str) -> bool:
    # plain decimals only: float() would also take nan, inf and 1_000
    return DECIMAL.fullmatch(value.strip()) is not None


def infer_schema(dataset_path: str, sample_rows: int = 100,
                 na_token: str = '?', separator: str = ';') -> Schema:
    """
    Types each column from the header plus the first `sample_rows` rows.

    A column is numeric when every sampled value is a decimal number or
    the missing-value token. Columns that are entirely missing in the
    sample fall back to text with a SchemaInferenceWarning: the rest of
    the file may well be numeric, but the sample cannot tell.
    """
    try:
        sample = pd.read_csv(
            dataset_path,
            sep=separator,
            nrows=sample_rows,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise ValueError(f"No header found in {dataset_path}") from exc

    schema: Schema = []
    for col in sample.columns:
        if col in DATE_TIME_COLS:
            schema.append((col, TEXT))
            continue

        present = [v for v in sample[col] if v != na_token]
        if not present:
            warnings.warn(
                f"Column '{col}' is missing in all {len(sample)} sampled rows; "
                f"treating it as text",
                SchemaInferenceWarning,
                stacklevel=2,
            )
            schema.append((col, TEXT))
        elif all(_is_number(v) for v in present):
            schema.append((col, NUMERIC))
        else:
            schema.append((col, TEXT))

    return schema
