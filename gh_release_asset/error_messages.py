"""Error message formatting functions.

This module contains functions for formatting the failure report printed when a run aborts.
The error message itself is logged separately, so the report only adds context.
"""
from gh_release_asset.text_utils import format_triple_quoted_text


def format_cause(exception: BaseException) -> str:
    """Format the chained cause of an exception (`None` when it has no cause)."""
    cause = exception.__cause__
    if cause is None:
        return 'None'
    return f'{type(cause).__name__}: {cause}'


def format_run_failed_message(
    *,
    exception: BaseException,
    owner: str | None,
    repo: str | None,
    asset_name: str | None,
    target_dir: str | None,
) -> str:
    """Format the report shown after a download run was aborted."""
    return format_triple_quoted_text(f"""
        Run aborted.

            DEBUG:
                Exception: {type(exception).__name__}
                Caused by: {format_cause(exception)}

        Requested asset `{asset_name}` from the latest release of `{owner}/{repo}`.
        The target directory `{target_dir}` may have been cleaned or partially extracted.
    """)
