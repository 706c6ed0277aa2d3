"""Latest release metadata fetching."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING
from urllib.parse import quote

import requests
from pydantic import ValidationError

from gh_release_asset.constants.standalone import GITHUB_API_URL
from gh_release_asset.logging_setup import get_logger
from gh_release_asset.models import GithubReleaseResponse
from gh_release_asset.networking.exceptions import ReleaseDownloadError, ReleaseHTTPStatusError, ReleaseParseError

if TYPE_CHECKING:
    from gh_release_asset.networking.http_session import HttpClient

GITHUB_LATEST_RELEASE_URL_TEMPLATE = '{api_url}/repos/{owner}/{repo}/releases/latest'

logger = get_logger(__name__)


def build_latest_release_url(*, owner: str, repo: str, api_url: str = GITHUB_API_URL) -> str:
    """Return the "latest release" endpoint URL for `owner/repo`."""
    return GITHUB_LATEST_RELEASE_URL_TEMPLATE.format(
        api_url=api_url.rstrip('/'),
        owner=quote(owner, safe=''),
        repo=quote(repo, safe=''),
    )


def fetch_latest_release(http_client: HttpClient, *, owner: str, repo: str, api_url: str = GITHUB_API_URL) -> GithubReleaseResponse:
    """Fetch and validate the latest release of `owner/repo`.

    Raises:
        ReleaseDownloadError: On connection errors, timeouts or interrupted transfers.
        ReleaseHTTPStatusError: If the API answers with a non-success status.
        ReleaseParseError: If the body is not UTF-8 JSON describing a release.
    """
    logger.info('Fetching GitHub release for `%s/%s`...', owner, repo)

    release_url = build_latest_release_url(owner=owner, repo=repo, api_url=api_url)
    try:
        with http_client.get(release_url) as response:
            body = response.content
            http_code = response.status_code
            http_reason = response.reason
    except requests.exceptions.RequestException as e:
        raise ReleaseDownloadError(release_url, type(e).__name__) from e

    logger.debug('Release API answered HTTP %s with %d bytes', http_code, len(body))

    if not 200 <= http_code < 300:  # noqa: PLR2004
        raise ReleaseHTTPStatusError(release_url, http_code, http_reason)

    try:
        release_data = json.loads(body.decode('utf-8'))
    except UnicodeDecodeError as e:
        raise ReleaseParseError(release_url, 'response body is not valid UTF-8') from e
    except json.JSONDecodeError as e:
        raise ReleaseParseError(release_url, f'invalid JSON ({e.msg} at line {e.lineno}, column {e.colno})') from e

    if not isinstance(release_data, dict):
        raise ReleaseParseError(release_url, f'expected a JSON object, got {type(release_data).__name__}')

    try:
        release = GithubReleaseResponse.model_validate(release_data)
    except ValidationError as e:
        raise ReleaseParseError(release_url, f'unexpected release format ({e.error_count()} validation errors)') from e

    logger.info('GitHub release `%s` fetched.', release.tag_name or release.name or 'unknown')
    return release
