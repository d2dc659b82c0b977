import json

import pytest

from config import DATASET_FILE, DatasetConfig, load_config


def test_defaults():
    config = DatasetConfig()
    assert config.dataset_path == DATASET_FILE
    assert config.archive_path.endswith(".zip")
    assert config.download_url.startswith("https://")
    assert config.na_token == "?"
    assert config.separator == ";"


def test_load_config_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dataset_path": "fixtures/hpc.txt", "schema_sample_rows": 2}))

    config = load_config(str(path))
    assert config.dataset_path == "fixtures/hpc.txt"
    assert config.schema_sample_rows == 2
    assert config.archive_path == DatasetConfig().archive_path


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dataset": "hpc.txt"}))
    with pytest.raises(ValueError, match="dataset"):
        load_config(str(path))


def test_root_must_be_an_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))
