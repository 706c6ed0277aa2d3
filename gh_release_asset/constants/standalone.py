"""Module for defining constants that don't require imports or functions, using only pure Python."""

TITLE = 'gh-release-asset'
GITHUB_API_URL = 'https://api.github.com'
ZIP_CONTENT_TYPE = 'application/zip'
