"""Release-related custom exceptions.

This module contains custom exception classes for locating the asset in a release
and extracting the downloaded archive.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from gh_release_asset.constants.standalone import ZIP_CONTENT_TYPE
from gh_release_asset.exceptions import AssetDownloaderError

if TYPE_CHECKING:
    from pathlib import Path


class AssetLookupError(AssetDownloaderError):
    """Base exception for assets that cannot be found in a release."""


class NoAssetsInReleaseError(AssetLookupError):
    """Raised when the release has no assets at all."""

    def __init__(self) -> None:
        super().__init__('No assets found in GitHub release.')


class AssetNotFoundError(AssetLookupError):
    """Raised when no asset of the release matches the requested name."""

    def __init__(self, asset_name: str, available: list[str]) -> None:
        self.asset_name = asset_name
        self.available = available
        super().__init__(f'Asset `{asset_name}` not found in GitHub release (available: {", ".join(available)}).')


class UnsupportedAssetTypeError(AssetDownloaderError):
    """Raised when the matched asset is not a zip archive."""

    def __init__(self, asset_name: str, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(
            f'Only zip archives are supported: asset `{asset_name}` has content type '
            f'`{content_type}`, expected `{ZIP_CONTENT_TYPE}`.',
        )


class AssetExtractionError(AssetDownloaderError):
    """Raised when reading the archive stream or writing the extracted files fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f'Could not extract asset: {reason}')


class UnsafeArchiveEntryError(AssetExtractionError):
    """Raised when an archive entry would be written outside the target directory."""

    def __init__(self, entry_name: str, target_dir: Path) -> None:
        self.entry_name = entry_name
        super().__init__(f'archive entry `{entry_name}` points outside of `{target_dir.absolute()}`')


class AssetDownloadUrlMissingError(AssetLookupError):
    """Raised when the matched asset has no download URL."""

    def __init__(self, asset_name: str) -> None:
        self.asset_name = asset_name
        super().__init__(f'Asset `{asset_name}` has no download URL in GitHub release.')
