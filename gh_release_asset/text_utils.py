"""Lightweight text helpers used when building log lines and error reports.

Keep this module dependency-free and safe to import from anywhere.
"""

import textwrap


def pluralize(count: int, singular: str = '', plural: str = 's') -> str:
    """Return `singular` when `count` is exactly 1, else `plural` (suffixes, e.g. `'y'`/`'ies'`)."""
    return singular if count == 1 else plural


def format_triple_quoted_text(text: str, /) -> str:
    """Dedent a triple-quoted template and strip its surrounding blank lines."""
    return textwrap.dedent(text).strip()


def format_byte_size(size: int) -> str:
    """Format a byte count using binary units (e.g. `1.5 KiB`)."""
    if size < 1024:  # noqa: PLR2004
        return f'{size} B'

    value = size / 1024
    for unit in ('KiB', 'MiB'):
        if value < 1024:  # noqa: PLR2004
            return f'{value:.1f} {unit}'
        value /= 1024
    return f'{value:.1f} GiB'
