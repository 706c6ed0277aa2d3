"""Release asset pipeline: clean, fetch release, locate asset, download and extract."""

from gh_release_asset.release.cleaner import clean_target_dir
from gh_release_asset.release.extractor import ExtractionSummary, download_and_extract_asset
from gh_release_asset.release.fetcher import build_latest_release_url, fetch_latest_release
from gh_release_asset.release.locator import find_asset
from gh_release_asset.release.pipeline import download_release_asset

__all__ = [
    'ExtractionSummary',
    'build_latest_release_url',
    'clean_target_dir',
    'download_and_extract_asset',
    'download_release_asset',
    'fetch_latest_release',
    'find_asset',
]
