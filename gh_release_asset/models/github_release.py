"""Pydantic models for GitHub Release API responses.

This module provides validation for the "latest release" API response.
Only the fields used to pick and download an asset are declared; any
other field returned by GitHub is ignored.
"""

from pydantic import BaseModel


class GithubReleaseAsset(BaseModel):
    """Model for a single asset in a GitHub release.

    Every field is optional: only the asset that gets selected has to be complete,
    so a partial entry elsewhere in the list does not reject the whole release.
    """

    name: str | None = None
    content_type: str | None = None
    browser_download_url: str | None = None


class GithubReleaseResponse(BaseModel):
    """Model for the complete GitHub release API response.

    `assets` is `None` when GitHub omits the field (or sends `null`), which is
    reported separately from an asset that is simply missing from the list.
    """

    tag_name: str | None = None
    name: str | None = None
    assets: list[GithubReleaseAsset] | None = None
