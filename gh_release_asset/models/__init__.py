"""Pydantic models for API response validation.

This module contains pydantic models for validating JSON responses from:
- GitHub Release API (latest release and its assets)
"""

from .github_release import GithubReleaseAsset, GithubReleaseResponse

__all__ = [
    'GithubReleaseAsset',
    'GithubReleaseResponse',
]
