"""Network access: HTTP client and GitHub release metadata."""

from .github import latest_release_tag, newest_release_tag, releases_url
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient

__all__ = [
    # github
    "latest_release_tag",
    "newest_release_tag",
    "releases_url",
    # http
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]
