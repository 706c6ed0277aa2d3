"""HTTP client shared by the release fetcher and the asset downloader."""
from dataclasses import dataclass

import requests

from gh_release_asset import __version__
from gh_release_asset.constants.standalone import TITLE

HEADERS = {
    'User-Agent': f'{TITLE}/{__version__}',
    'Accept': 'application/vnd.github+json',
}


def create_session() -> requests.Session:
    """Create a session with the project headers and no authentication."""
    session = requests.Session()
    session.headers.update(HEADERS)
    return session


@dataclass(frozen=True, kw_only=True, slots=True)
class HttpClient:
    """Session plus request policy, constructed once per run.

    Redirects are always followed (the `requests` default for GET).
    A `timeout` of `None` lets a request block for as long as the transport allows.
    """

    session: requests.Session
    timeout: float | None = None

    def get(self, url: str, *, stream: bool = False) -> requests.Response:
        """Issue a GET request following redirects."""
        return self.session.get(url, stream=stream, timeout=self.timeout, allow_redirects=True)
