"""Run settings: which release asset to fetch and where to extract it."""
import math
from dataclasses import dataclass
from pathlib import Path

from gh_release_asset.constants.standalone import GITHUB_API_URL
from gh_release_asset.exceptions import ConfigurationError


@dataclass(frozen=True, kw_only=True, slots=True)
class DownloadAssetSettings:
    """Immutable settings for a single run.

    Validated on construction, so an instance always points at an existing directory.
    `target_dir` may be given as a string; it is stored as a `Path`.
    """

    owner: str
    repo: str
    asset_name: str
    target_dir: Path
    api_url: str = GITHUB_API_URL
    timeout: float | None = None

    def __post_init__(self) -> None:
        for field_name in ('owner', 'repo', 'asset_name', 'api_url'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f'Setting <{field_name}> must be a non-empty string, got {value!r}.')

        # `Path('')` is the current directory, which would then be wiped.
        if isinstance(self.target_dir, str):
            if not self.target_dir.strip():
                raise ConfigurationError(f'Setting <target_dir> must be a non-empty path, got {self.target_dir!r}.')
            object.__setattr__(self, 'target_dir', Path(self.target_dir))

        if self.timeout is not None and (not math.isfinite(self.timeout) or self.timeout <= 0):
            raise ConfigurationError(f'Setting <timeout> must be a positive number of seconds, got {self.timeout!r}.')

        if not self.target_dir.exists():
            raise ConfigurationError(f'Target directory `{self.target_dir.absolute()}` does not exist.')
        if not self.target_dir.is_dir():
            raise ConfigurationError(f'Target directory `{self.target_dir.absolute()}` is not a directory.')
