import io
import json
import zipfile
from http import HTTPStatus

import pytest
import requests

from gh_release_asset.networking.http_session import HttpClient

RELEASE_URL = 'https://api.github.com/repos/octo/widgets/releases/latest'
DOWNLOAD_URL = 'https://github.com/octo/widgets/releases/download/v1.2.0/bundle.zip'


def make_response(content=b'', *, status_code=200, url='https://example.invalid/', raw=None):
    """Build a real `requests.Response` whose body is read from `raw` (or `content`)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = HTTPStatus(status_code).phrase
    response.url = url
    response.raw = raw if raw is not None else io.BytesIO(content)
    return response


class FakeSession:
    """Stands in for `requests.Session`, answering GETs from a URL -> response/exception map."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.requests = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requests.append({'url': url, **kwargs})
        outcome = self.responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def requested_urls(self):
        return [request['url'] for request in self.requests]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def http_client(fake_session):
    return HttpClient(session=fake_session, timeout=5.0)


@pytest.fixture
def target_dir(tmp_path):
    directory = tmp_path / 'target'
    directory.mkdir()
    return directory


@pytest.fixture
def make_zip():
    """Return a factory building zip bytes from `(name, data)` pairs; `data=None` adds a directory entry."""

    def factory(entries, compression=zipfile.ZIP_DEFLATED):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', compression=compression) as archive:
            for name, data in entries:
                if data is None:
                    archive.writestr(zipfile.ZipInfo(name), b'')
                else:
                    archive.writestr(name, data)
        return buffer.getvalue()

    return factory


@pytest.fixture
def release_json():
    """Return a factory serializing a release payload with the given assets."""

    def factory(assets, **extra):
        payload = {
            'url': RELEASE_URL,
            'tag_name': 'v1.2.0',
            'name': 'Widgets 1.2.0',
            'draft': False,
            'author': {'login': 'octo', 'id': 1},
            **extra,
        }
        if assets is not None:
            payload['assets'] = assets
        return json.dumps(payload).encode('utf-8')

    return factory


def zip_asset(name='bundle.zip', *, content_type='application/zip', url=DOWNLOAD_URL):
    return {
        'name': name,
        'content_type': content_type,
        'browser_download_url': url,
        'size': 1234,
        'download_count': 7,
    }


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def asset_payload():
    return zip_asset


@pytest.fixture
def release_url():
    return RELEASE_URL


@pytest.fixture
def download_url():
    return DOWNLOAD_URL
