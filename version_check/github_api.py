"""Thin GitHub REST API client for tag and release history.

Uses requests.Session with GITHUB_TOKEN for authentication.
List methods follow pagination to the end before returning; HTTP errors
propagate as requests.HTTPError.
"""

import logging
import os
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
PER_PAGE = 100


class RateLimitError(Exception):
    """Raised when GitHub API rate limit is exhausted."""


class GitHubAPI:
    """Thin REST client for the repository history the version check needs."""

    def __init__(self, token: Optional[str] = None, api_url: Optional[str] = None):
        self.session = requests.Session()
        self.token = token or os.environ.get("GITHUB_TOKEN", "")
        if self.token:
            self.session.headers["Authorization"] = f"token {self.token}"
            logger.debug("Using token: ...%s", self.token[-4:])
        self.session.headers["Accept"] = "application/vnd.github+json"
        self.session.headers["X-GitHub-Api-Version"] = "2022-11-28"
        self.api_url = (
            api_url or os.environ.get("GITHUB_API_URL") or DEFAULT_API_URL
        ).rstrip("/")
        self.api_calls = 0

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Make an API request with rate limit monitoring."""
        resp = self.session.request(method, url, **kwargs)
        self.api_calls += 1

        # Monitor rate limit
        remaining = resp.headers.get("X-RateLimit-Remaining")
        if remaining is not None:
            remaining = int(remaining)
            if remaining == 0:
                raise RateLimitError(
                    f"GitHub API rate limit exhausted after {self.api_calls} calls"
                )
            if remaining < 50:
                logger.warning("GitHub API rate limit low: %d remaining", remaining)

        return resp

    def _get(self, path: str, **kwargs) -> requests.Response:
        """GET request to GitHub API."""
        url = f"{self.api_url}{path}"
        return self._request("GET", url, **kwargs)

    def _paginate(self, path: str) -> List[Dict]:
        """Collect every item of a paginated list endpoint."""
        items = []
        page = 1
        while True:
            resp = self._get(path, params={"per_page": PER_PAGE, "page": page})
            resp.raise_for_status()
            data = resp.json()
            if not data:
                break
            items.extend(data)
            if len(data) < PER_PAGE:
                break
            page += 1
        return items

    def list_tag_names(self, owner: str, repo: str) -> List[str]:
        """List every tag name in the repository."""
        logger.debug("Listing tags for %s/%s", owner, repo)
        tags = self._paginate(f"/repos/{owner}/{repo}/tags")
        return [t["name"] for t in tags]

    def list_release_names(self, owner: str, repo: str) -> List[Optional[str]]:
        """List every release name in the repository.

        Releases created without a title have a null name; those come
        back as None.
        """
        logger.debug("Listing releases for %s/%s", owner, repo)
        releases = self._paginate(f"/repos/{owner}/{repo}/releases")
        return [r.get("name") for r in releases]
