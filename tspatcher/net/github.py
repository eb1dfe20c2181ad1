"""GitHub Releases lookups.

Pure functions over an HttpClient, so tests can feed canned responses.
Tags are returned exactly as published (`v5.6.2`): they go straight to
`git clone --branch`, so no prefix is stripped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tspatcher.core.config import DEFAULT_API_URL
from tspatcher.core.result import Err, Ok, Result
from tspatcher.core.structured import as_obj_list, as_str_dict, get_str
from tspatcher.net.http import HttpError

if TYPE_CHECKING:
    from tspatcher.net.http import HttpClient

__all__ = [
    "latest_release_tag",
    "newest_release_tag",
    "releases_url",
]


def releases_url(repo: str, *, latest: bool = False, api_url: str = DEFAULT_API_URL) -> str:
    """Releases endpoint for an "owner/name" repository."""
    base = f"{api_url}/repos/{repo}/releases"
    return f"{base}/latest" if latest else base


def _tag_of(url: str, release: object) -> Result[str, HttpError]:
    data = as_str_dict(release)
    if data is None:
        return Err(HttpError(url=url, status=0, message="Expected release JSON object"))
    tag = get_str(data, "tag_name")
    if tag is None:
        return Err(HttpError(url=url, status=0, message="Missing tag_name in response"))
    return Ok(tag)


def latest_release_tag(
    http: HttpClient,
    repo: str,
    *,
    api_url: str = DEFAULT_API_URL,
) -> Result[str, HttpError]:
    """Tag of the latest stable release.

    GitHub's `/releases/latest` already excludes prereleases and drafts.

    Example:
        >>> latest_release_tag(RealHttpClient(), "microsoft/TypeScript")
        Ok('v5.6.3')
    """
    url = releases_url(repo, latest=True, api_url=api_url)
    result = http.get_json(url)
    if isinstance(result, Err):
        return result
    return _tag_of(url, result.value)


def newest_release_tag(
    http: HttpClient,
    repo: str,
    *,
    api_url: str = DEFAULT_API_URL,
) -> Result[str, HttpError]:
    """Tag of the newest release, prerelease or not.

    The release list is ordered newest first, so this is its first entry.
    """
    url = releases_url(repo, api_url=api_url)
    result = http.get_json(url)
    if isinstance(result, Err):
        return result

    releases = as_obj_list(result.value)
    if releases is None:
        return Err(HttpError(url=url, status=0, message="Expected JSON array"))
    if not releases:
        return Err(HttpError(url=url, status=0, message="No releases found"))
    return _tag_of(url, releases[0])
