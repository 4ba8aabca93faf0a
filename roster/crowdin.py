"""
Harvest translators from a Crowdin project.

Pages through the project members endpoint of the Crowdin API v2, in
fixed-size increments, until a page comes back short. Blocked members are
never credited.
"""

from __future__ import annotations

from collections.abc import Iterator
from urllib.parse import urlencode
from urllib.request import Request

from .exceptions import HTTPStatusError
from .http import USER_AGENT, decode_json, fetch_text
from .models import CrowdinMembersPage, parse_response

# Crowdin API endpoint
CROWDIN_API_URL = "https://crowdin.com/api/v2"
DEFAULT_PAGE_SIZE = 100


class CrowdinFetcher:
    """Fetch project members from the Crowdin API."""

    def __init__(
        self,
        project_id: str,
        token: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float | None = None,
        verbose: bool = False,
    ):
        """Initialize Crowdin fetcher.

        Args:
            project_id: Numeric Crowdin project identifier
            token: Personal access token with project read access
            page_size: Members requested per page
            timeout: Seconds per request (None waits forever)
            verbose: Print per-page progress
        """
        self.project_id = project_id
        self.token = token
        self.page_size = page_size
        self.timeout = timeout
        self.verbose = verbose

    def members_url(self, page: int) -> str:
        params = urlencode({"limit": self.page_size, "offset": page * self.page_size})
        return f"{CROWDIN_API_URL}/projects/{self.project_id}/members?{params}"

    def fetch_page(self, page: int) -> CrowdinMembersPage:
        """Fetch a single page of members.

        Raises:
            HTTPStatusError: If Crowdin does not answer 200
            UnexpectedResponseError: If the body is not a members page
        """
        url = self.members_url(page)
        request = Request(
            url,
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {self.token}",
                "User-Agent": USER_AGENT,
            },
        )
        status, body = fetch_text(request, timeout=self.timeout)
        if status != 200:
            raise HTTPStatusError(status, body, url=url)

        return parse_response(CrowdinMembersPage, decode_json(body, "Crowdin"), "Crowdin")

    def iter_pages(self) -> Iterator[CrowdinMembersPage]:
        """Yield member pages until one holds fewer than ``page_size`` members."""
        page = 0
        while True:
            result = self.fetch_page(page)
            if self.verbose:
                print(f"  Page {page}: {len(result)} members")
            yield result

            if len(result) < self.page_size:
                return
            page += 1

    def fetch(self) -> dict[str, str]:
        """Fetch translators as a display name -> profile url mapping."""
        translators: dict[str, str] = {}
        blocked = 0

        for page in self.iter_pages():
            for member in page.members:
                if member.is_blocked:
                    blocked += 1
                    continue
                translators[member.display_name] = member.profile_url

        if self.verbose and blocked:
            print(f"  Skipped {blocked} blocked members")

        return translators


def fetch_translators(
    project_id: str,
    token: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    verbose: bool = False,
) -> dict[str, str]:
    """Convenience function to fetch Crowdin translators."""
    return CrowdinFetcher(project_id, token, page_size=page_size, verbose=verbose).fetch()
