"""Asset download and streaming zip extraction.

The archive is decoded while it is being downloaded: `requests` yields the
response body in small chunks, `stream_unzip` turns them into a lazy,
forward-only sequence of entries, and every entry is written to disk before
the next one is read. The archive is never held in memory or in a temporary file.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import TYPE_CHECKING

import requests
from stream_unzip import UnzipError, stream_unzip

from gh_release_asset.logging_setup import get_logger
from gh_release_asset.networking.exceptions import AssetDownloadError
from gh_release_asset.release.exceptions import AssetDownloadUrlMissingError, AssetExtractionError, UnsafeArchiveEntryError
from gh_release_asset.text_utils import format_byte_size, pluralize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gh_release_asset.models import GithubReleaseAsset
    from gh_release_asset.networking.http_session import HttpClient

CHUNK_SIZE = 4096

logger = get_logger(__name__)


@dataclass(kw_only=True, slots=True)
class ExtractionSummary:
    """What an extraction wrote into the target directory."""

    files: int = 0
    directories: int = 0
    bytes_written: int = 0

    def __str__(self) -> str:
        """Return a human-readable summary, e.g. `3 files, 1 directory, 12.0 KiB`."""
        return (
            f'{self.files} file{pluralize(self.files)}, '
            f'{self.directories} director{pluralize(self.directories, "y", "ies")}, '
            f'{format_byte_size(self.bytes_written)}'
        )


def _decode_entry_name(file_name: bytes) -> str:
    # Zip names are UTF-8 when the language encoding flag is set, CP437 otherwise.
    try:
        return file_name.decode('utf-8')
    except UnicodeDecodeError:
        return file_name.decode('cp437')


def _resolve_entry_path(target_root: Path, entry_name: str) -> Path:
    """Map an archive entry name onto a path inside `target_root`.

    Raises:
        UnsafeArchiveEntryError: If the entry is absolute, has a drive, or escapes `target_root`.
    """
    normalized_name = entry_name.replace('\\', '/')
    entry_path = PurePosixPath(normalized_name)

    if (
        entry_path.is_absolute()
        or '..' in entry_path.parts
        or (entry_path.parts and PureWindowsPath(entry_path.parts[0]).drive)
    ):
        raise UnsafeArchiveEntryError(entry_name, target_root)

    destination = target_root.joinpath(*entry_path.parts)
    if not destination.resolve().is_relative_to(target_root):
        raise UnsafeArchiveEntryError(entry_name, target_root)

    return destination


def _drain(chunks: Iterable[bytes]) -> None:
    deque(chunks, maxlen=0)


def _write_entry(destination: Path, chunks: Iterable[bytes]) -> int:
    bytes_written = 0
    with destination.open('wb') as output_file:
        for chunk in chunks:
            output_file.write(chunk)
            bytes_written += len(chunk)
    return bytes_written


def extract_zip_stream(zipped_chunks: Iterable[bytes], target_dir: Path) -> ExtractionSummary:
    """Extract a zip archive given as an iterable of byte chunks into `target_dir`.

    Entries are processed in archive order. Missing parent directories are
    created, so archives without explicit directory entries extract too.

    Raises:
        UnsafeArchiveEntryError: If an entry would land outside `target_dir`.
        AssetExtractionError: If the stream is not a valid zip archive, is cut short,
            or a file cannot be written.
    """
    target_root = target_dir.resolve()
    summary = ExtractionSummary()

    try:
        for file_name, _file_size, unzipped_chunks in stream_unzip(zipped_chunks, chunk_size=CHUNK_SIZE):
            entry_name = _decode_entry_name(file_name)
            destination = _resolve_entry_path(target_root, entry_name)

            if entry_name.endswith(('/', '\\')):
                _drain(unzipped_chunks)
                if destination != target_root:
                    destination.mkdir(parents=True, exist_ok=True)
                    summary.directories += 1
                logger.debug('Created directory `%s`', entry_name)
                continue

            if destination == target_root:
                raise UnsafeArchiveEntryError(entry_name, target_root)

            destination.parent.mkdir(parents=True, exist_ok=True)
            summary.bytes_written += _write_entry(destination, unzipped_chunks)
            summary.files += 1
            logger.debug('Extracted `%s`', entry_name)
    except UnzipError as e:
        raise AssetExtractionError(f'invalid zip archive ({type(e).__name__})') from e
    # `RequestException` derives from `OSError`, so it must be handled first.
    except requests.exceptions.RequestException as e:
        raise AssetExtractionError(f'download interrupted ({type(e).__name__})') from e
    except OSError as e:
        raise AssetExtractionError(f'{e.strerror or e} ({e.filename})' if e.filename else str(e)) from e

    return summary


def download_and_extract_asset(http_client: HttpClient, asset: GithubReleaseAsset, target_dir: Path) -> ExtractionSummary:
    """Download `asset` and stream-extract its zip contents into `target_dir`.

    Raises:
        AssetDownloadUrlMissingError: If the asset has no download URL.
        AssetDownloadError: If the request fails or the server answers with a non-success status.
        AssetExtractionError: If reading the archive or writing its files fails.
    """
    logger.info('Downloading asset `%s`...', asset.name)

    download_url = asset.browser_download_url
    if not download_url:
        raise AssetDownloadUrlMissingError(asset.name or '')

    try:
        response = http_client.get(download_url, stream=True)
    except requests.exceptions.RequestException as e:
        raise AssetDownloadError(download_url, type(e).__name__) from e

    with response:
        if not 200 <= response.status_code < 300:  # noqa: PLR2004
            raise AssetDownloadError(download_url, f'HTTP {response.status_code} {response.reason}', http_code=response.status_code)

        logger.info('Asset downloaded, extracting...')
        summary = extract_zip_stream(response.iter_content(chunk_size=CHUNK_SIZE), target_dir)

    logger.info('Asset extracted to `%s` (%s).', target_dir.absolute(), summary)
    return summary
