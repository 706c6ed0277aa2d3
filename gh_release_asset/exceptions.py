"""General custom exceptions.

This module contains the base exception of the project and the exceptions raised
while validating settings and preparing the target directory.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class AssetDownloaderError(Exception):
    """Base exception for every error that aborts an asset download run."""


class ConfigurationError(AssetDownloaderError):
    """Raised when there's an issue with configuration or settings."""

    def __init__(self, message: str) -> None:
        """Initialize the exception with the configuration message.

        Args:
            message: The configuration error details.
        """
        super().__init__(message)


class TargetDirectoryCleanError(AssetDownloaderError):
    """Raised when the target directory contents could not be deleted."""

    def __init__(self, target_dir: Path) -> None:
        """Initialize the exception with the target directory.

        Args:
            target_dir: The directory that was being cleaned.
        """
        super().__init__(f'Could not delete target directory `{target_dir.absolute()}`.')


class TargetDirectoryNotEmptyError(AssetDownloaderError):
    """Raised when the target directory still has children after cleaning.

    This is a data consistency fault (a deletion silently failed, or something
    wrote into the directory concurrently) rather than a plain filesystem error.
    """

    def __init__(self, target_dir: Path, remaining: list[str]) -> None:
        """Initialize the exception with the leftover entries.

        Args:
            target_dir: The directory that was cleaned.
            remaining: Names of the entries still present.
        """
        self.remaining = remaining
        super().__init__(
            f'Target directory `{target_dir.absolute()}` still contains files even after cleaning: {", ".join(sorted(remaining))}',
        )
