import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

# --- Defaults ---
DATASET_FILE = "household_power_consumption.txt"
ARCHIVE_FILE = "exdata-data-household_power_consumption.zip"
DOWNLOAD_URL = "https://d396qusza40orc.cloudfront.net/exdata%2Fdata%2Fhousehold_power_consumption.zip"

NA_TOKEN = '?'
SEPARATOR = ';'


@dataclass(frozen=True)
class DatasetConfig:
    dataset_path: str = DATASET_FILE
    archive_path: str = ARCHIVE_FILE
    download_url: str = DOWNLOAD_URL
    na_token: str = NA_TOKEN
    separator: str = SEPARATOR
    schema_sample_rows: int = 100
    output_dir: str = "."
    timeout: float = 60


def load_config(path: str) -> DatasetConfig:
    """
    Reads a JSON object and overlays it on the defaults.
    Keys must match DatasetConfig fields.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a JSON object: {path}")
    return config_from_dict(data)


def config_from_dict(data: Dict[str, Any]) -> DatasetConfig:
    known = {f.name for f in fields(DatasetConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return replace(DatasetConfig(), **data)
