"""
GitHub release lookup and file download helpers
"""

import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests
from tqdm import tqdm

from .constants import (
    CHUNK_SIZE,
    DOWNLOAD_DIR_PREFIX,
    DOWNLOAD_TIMEOUT,
    GITHUB_LATEST_TEMPLATE,
    GITHUB_TIMEOUT,
    USER_AGENT,
)
from .exceptions import DownloadError, VersionLookupError


def find_github_release(owner: str, repo: str) -> str:
    """Find the tag of the latest published release of owner/repo.

    GitHub answers ``/releases/latest`` with a redirect to
    ``/releases/tag/<tag>``, so the tag is read from the ``Location`` header
    instead of going through the rate-limited REST API.
    """
    url = GITHUB_LATEST_TEMPLATE.format(owner=owner, repo=repo)
    response = requests.head(
        url,
        headers={"User-Agent": USER_AGENT},
        allow_redirects=False,
        timeout=GITHUB_TIMEOUT,
    )

    if response.status_code not in (301, 302):
        raise VersionLookupError(f"server returned status: {response.status_code}")

    location = response.headers.get("Location", "")
    version = location.rstrip("/").rsplit("/", 1)[-1]
    if not version:
        raise VersionLookupError(f"unable to determine release of {owner}/{repo}")

    return version


def content_length(response: requests.Response) -> Optional[int]:
    """Return the advertised body size, or None when it is missing or unusable"""
    try:
        total = int(response.headers.get("Content-Length", 0))
    except (TypeError, ValueError):
        return None
    return total if total > 0 else None


def download_file(url: str, show_progress: bool = True) -> Path:
    """Download url into a fresh temporary directory and return the file path"""
    response = requests.get(
        url,
        headers={"User-Agent": USER_AGENT},
        stream=True,
        timeout=DOWNLOAD_TIMEOUT,
    )
    with response:
        if response.status_code != 200:
            raise DownloadError(
                f"incorrect status for downloading {url}: {response.status_code}"
            )

        file_name = Path(urlparse(url).path).name
        out_dir = Path(tempfile.mkdtemp(prefix=DOWNLOAD_DIR_PREFIX))
        out_path = out_dir / file_name

        with open(out_path, "wb") as f, tqdm(
            desc=file_name,
            total=content_length(response),
            unit="iB",
            unit_scale=True,
            unit_divisor=1024,
            disable=not show_progress,
        ) as progress_bar:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    progress_bar.update(f.write(chunk))

    return out_path
