"""Target directory cleaning."""
from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from gh_release_asset.exceptions import TargetDirectoryCleanError, TargetDirectoryNotEmptyError
from gh_release_asset.logging_setup import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def clean_target_dir(target_dir: Path) -> None:
    """Delete everything inside `target_dir`, keeping the directory itself.

    Directories are removed bottom-up (deepest paths first). Symlinks are
    unlinked, never followed.

    Raises:
        TargetDirectoryCleanError: If a filesystem error occurs while deleting.
        TargetDirectoryNotEmptyError: If children remain after the deletion pass.
    """
    logger.info('Cleaning target directory `%s`...', target_dir.absolute())

    try:
        for child in target_dir.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
            logger.debug('Deleted `%s`', child)

        remaining = [child.name for child in target_dir.iterdir()]
    except OSError as e:
        raise TargetDirectoryCleanError(target_dir) from e

    if remaining:
        raise TargetDirectoryNotEmptyError(target_dir, remaining)

    logger.info('Target directory cleaned.')
