"""Command line entry point."""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from gh_release_asset import __version__
from gh_release_asset.constants.standalone import GITHUB_API_URL, TITLE
from gh_release_asset.error_messages import format_run_failed_message
from gh_release_asset.exceptions import AssetDownloaderError
from gh_release_asset.logging_setup import console, get_logger, setup_logging
from gh_release_asset.release import download_release_asset
from gh_release_asset.settings import DownloadAssetSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

ENV_VARS = {
    'owner': 'GH_RELEASE_ASSET_OWNER',
    'repo': 'GH_RELEASE_ASSET_REPO',
    'asset_name': 'GH_RELEASE_ASSET_NAME',
    'target_dir': 'GH_RELEASE_ASSET_TARGET_DIR',
    'api_url': 'GH_RELEASE_ASSET_API_URL',
    'timeout': 'GH_RELEASE_ASSET_TIMEOUT',
}

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

logger = get_logger(__name__)


def _env_default(setting: str) -> str | None:
    value = os.environ.get(ENV_VARS[setting])
    if value is None or not value.strip():
        return None
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; required options become optional when set in the environment."""
    parser = argparse.ArgumentParser(
        prog=TITLE,
        description=(
            'Download an asset of the latest GitHub release of a repository and extract its zip '
            'contents into a directory. The directory is emptied first.'
        ),
    )

    required = parser.add_argument_group('release asset')
    for setting, flag, metavar, help_text in (
        ('owner', '--owner', 'OWNER', 'GitHub account or organization name'),
        ('repo', '--repo', 'REPO', 'GitHub repository name'),
        ('asset_name', '--asset-name', 'NAME', 'exact file name of the release asset to fetch'),
        ('target_dir', '--target-dir', 'DIR', 'existing directory to clean and extract into'),
    ):
        default = _env_default(setting)
        required.add_argument(
            flag,
            dest=setting,
            metavar=metavar,
            default=default,
            required=default is None,
            help=f'{help_text} (env: {ENV_VARS[setting]})',
        )

    parser.add_argument(
        '--api-url',
        default=_env_default('api_url') or GITHUB_API_URL,
        help=f'base URL of a GitHub-compatible API (default: {GITHUB_API_URL}; env: {ENV_VARS["api_url"]})',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=_env_default('timeout'),
        metavar='SECONDS',
        help=f'network timeout for each request, unlimited if omitted (env: {ENV_VARS["timeout"]})',
    )
    parser.add_argument('--log-file', type=Path, metavar='PATH', help='also write warnings and errors to this rotating log file')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='log every extracted entry')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='only log warnings and errors')

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def settings_from_args(args: argparse.Namespace) -> DownloadAssetSettings:
    """Build validated settings from parsed arguments.

    Raises:
        ConfigurationError: If a value is invalid or the target directory is unusable.
    """
    return DownloadAssetSettings(
        owner=args.owner,
        repo=args.repo,
        asset_name=args.asset_name,
        target_dir=args.target_dir,
        api_url=args.api_url,
        timeout=args.timeout,
    )


def _console_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def main(argv: Sequence[str] | None = None) -> int:
    """Run the download pipeline and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(console_level=_console_level(args), log_file=args.log_file)

    try:
        settings = settings_from_args(args)
        download_release_asset(settings)
    except AssetDownloaderError as e:
        logger.error('%s', e)  # noqa: TRY400
        console.print(
            format_run_failed_message(
                exception=e,
                owner=args.owner,
                repo=args.repo,
                asset_name=args.asset_name,
                target_dir=args.target_dir,
            ),
            style='red',
            markup=False,
            highlight=False,
        )
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning('Interrupted, the target directory may be partially extracted.')
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS
