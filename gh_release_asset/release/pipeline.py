"""Release asset pipeline: clean → fetch release → locate asset → download + extract."""
from __future__ import annotations

from contextlib import ExitStack
from typing import TYPE_CHECKING

from gh_release_asset.logging_setup import get_logger
from gh_release_asset.networking.http_session import HttpClient, create_session
from gh_release_asset.release.cleaner import clean_target_dir
from gh_release_asset.release.extractor import download_and_extract_asset
from gh_release_asset.release.fetcher import fetch_latest_release
from gh_release_asset.release.locator import find_asset

if TYPE_CHECKING:
    from gh_release_asset.release.extractor import ExtractionSummary
    from gh_release_asset.settings import DownloadAssetSettings

logger = get_logger(__name__)


def download_release_asset(settings: DownloadAssetSettings, *, http_client: HttpClient | None = None) -> ExtractionSummary:
    """Replace the contents of `settings.target_dir` with the latest release asset.

    Every stage runs only if the previous one succeeded; the first error aborts the run.
    When no `http_client` is given, one is created for this run and its session closed afterwards.
    """
    with ExitStack() as stack:
        if http_client is None:
            session = stack.enter_context(create_session())
            http_client = HttpClient(session=session, timeout=settings.timeout)

        clean_target_dir(settings.target_dir)

        release = fetch_latest_release(http_client, owner=settings.owner, repo=settings.repo, api_url=settings.api_url)
        asset = find_asset(release, settings.asset_name)
        summary = download_and_extract_asset(http_client, asset, settings.target_dir)

    logger.info('Asset `%s` downloaded and extracted to `%s`.', settings.asset_name, settings.target_dir.absolute())
    return summary
