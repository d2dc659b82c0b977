import os
import zipfile

import requests
from tqdm import tqdm

from config import DatasetConfig
from errors import ProvisioningError

CHUNK_SIZE = 1024 * 1024


def fetch_archive(url: str, archive_path: str, timeout: float = 60) -> str:
    """
    Streams the archive at `url` to `archive_path`.
    Bytes go to a .part file first so an interrupted download never
    leaves something that looks like a complete archive.
    """
    part_path = archive_path + ".part"
    print(f"Downloading {url} ...")
    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        total = int(response.headers.get('content-length', 0)) or None
        try:
            with open(part_path, 'wb') as f, tqdm(
                total=total, unit='B', unit_scale=True, desc=os.path.basename(archive_path)
            ) as bar:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
                    bar.update(len(chunk))
        except Exception:
            if os.path.exists(part_path):
                os.remove(part_path)
            raise
    os.replace(part_path, archive_path)
    print(f"Saved archive to {archive_path}")
    return archive_path


def extract_archive(archive_path: str, dest_dir: str) -> None:
    print(f"Extracting {archive_path} into {dest_dir or '.'} ...")
    with zipfile.ZipFile(archive_path) as z:
        z.extractall(dest_dir or '.')


def ensure_local(dataset_path: str, archive_path: str, download_url: str,
                 timeout: float = 60) -> str:
    """
    Makes sure `dataset_path` exists, extracting `archive_path` and, if
    that is missing too, downloading it first. One attempt, no retries.
    """
    if os.path.exists(dataset_path):
        return dataset_path

    dest_dir = os.path.dirname(dataset_path)
    try:
        if dest_dir:
            os.makedirs(dest_dir, exist_ok=True)
        if not os.path.exists(archive_path):
            fetch_archive(download_url, archive_path, timeout=timeout)
        extract_archive(archive_path, dest_dir)
    except requests.RequestException as exc:
        raise ProvisioningError(f"Could not download {download_url}: {exc}") from exc
    except zipfile.BadZipFile as exc:
        raise ProvisioningError(f"Corrupt archive {archive_path}: {exc}") from exc
    except OSError as exc:
        raise ProvisioningError(f"Could not provision {dataset_path}: {exc}") from exc

    if not os.path.exists(dataset_path):
        raise ProvisioningError(
            f"{archive_path} was extracted but {dataset_path} is not in it"
        )
    return dataset_path


def provision(config: DatasetConfig) -> str:
    return ensure_local(config.dataset_path, config.archive_path,
                        config.download_url, timeout=config.timeout)


if __name__ == "__main__":
    path = provision(DatasetConfig())
    print(f"\nDataset available at '{path}'")
