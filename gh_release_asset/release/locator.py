"""Asset lookup inside a release."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gh_release_asset.constants.standalone import ZIP_CONTENT_TYPE
from gh_release_asset.logging_setup import get_logger
from gh_release_asset.release.exceptions import (
    AssetDownloadUrlMissingError,
    AssetNotFoundError,
    NoAssetsInReleaseError,
    UnsupportedAssetTypeError,
)

if TYPE_CHECKING:
    from gh_release_asset.models import GithubReleaseAsset, GithubReleaseResponse

logger = get_logger(__name__)


def find_asset(release: GithubReleaseResponse, asset_name: str) -> GithubReleaseAsset:
    """Return the first asset named exactly `asset_name` (case-sensitive).

    Raises:
        NoAssetsInReleaseError: If the release has no assets.
        AssetNotFoundError: If no asset has that name.
        UnsupportedAssetTypeError: If the matching asset is not a zip archive.
        AssetDownloadUrlMissingError: If the matching asset has no download URL.
    """
    if not release.assets:
        raise NoAssetsInReleaseError

    asset = next((asset for asset in release.assets if asset.name == asset_name), None)
    if asset is None:
        raise AssetNotFoundError(asset_name, [asset.name for asset in release.assets if asset.name is not None])

    if asset.content_type != ZIP_CONTENT_TYPE:
        raise UnsupportedAssetTypeError(asset_name, asset.content_type)

    if not asset.browser_download_url:
        raise AssetDownloadUrlMissingError(asset_name)

    logger.debug('Found asset `%s` at %s', asset.name, asset.browser_download_url)
    return asset
