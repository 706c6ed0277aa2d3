"""Networking-related custom exceptions.

This module contains custom exception classes for the two HTTP calls of a run:
fetching the latest release metadata and downloading the selected asset.
"""
from gh_release_asset.exceptions import AssetDownloaderError


class ReleaseDownloadError(AssetDownloaderError):
    """Raised when the release metadata request fails at the transport level."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the failed URL.

        Args:
            url: The release API URL that was requested.
            reason: Short description of the underlying failure.
        """
        self.url = url
        super().__init__(f'Could not download GitHub release: {reason} ({url})')


class ReleaseParseError(AssetDownloaderError):
    """Raised when the release metadata response cannot be parsed into a release."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the parsing failure details.

        Args:
            url: The release API URL that was requested.
            reason: Short description of why parsing failed.
        """
        self.url = url
        super().__init__(f'Could not parse GitHub release: {reason} ({url})')


class ReleaseHTTPStatusError(ReleaseParseError):
    """Raised when the release API answers with a non-success HTTP status.

    Subclasses `ReleaseParseError` so that callers handling unparseable
    release metadata keep handling error pages (404, 403 rate limits, ...) too.
    """

    def __init__(self, url: str, http_code: int, http_reason: str | None) -> None:
        """Initialize the exception with the HTTP status.

        Args:
            url: The release API URL that was requested.
            http_code: The HTTP status code returned.
            http_reason: The HTTP reason phrase, if any.
        """
        self.http_code = http_code
        reason = f'HTTP {http_code} {http_reason}' if http_reason else f'HTTP {http_code}'
        super().__init__(url, f'{reason} returned instead of a release')


class AssetDownloadError(AssetDownloaderError):
    """Raised when the asset download request fails."""

    def __init__(self, url: str, reason: str, http_code: int | None = None) -> None:
        """Initialize the exception with the failed download URL.

        Args:
            url: The asset download URL.
            reason: Short description of the underlying failure.
            http_code: The HTTP status code, when a response was received.
        """
        self.url = url
        self.http_code = http_code
        super().__init__(f'Could not download asset: {reason} ({url})')
