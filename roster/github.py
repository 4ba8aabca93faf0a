"""
Harvest sponsors from GitHub Sponsors.

Queries the GitHub GraphQL API for the sponsors of the account owning the
token: one counting query for ``totalCount``, then cursor-paginated page
queries until the running index reaches that total.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from urllib.request import Request

from .exceptions import HTTPStatusError
from .http import USER_AGENT, decode_json, fetch_text
from .models import SponsorConnection, SponsorsResponse, parse_response

# GitHub GraphQL endpoint
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_PAGE_SIZE = 100

COUNT_QUERY = """query {
  viewer {
    sponsors(after: null, first: 0) {
      totalCount
    }
  }
}"""

PAGE_QUERY = """query($after: String, $first: Int!) {
  viewer {
    sponsors(after: $after, first: $first) {
      nodes {
        __typename
        ... on User {
          resourcePath
          login
          name
        }
        ... on Organization {
          resourcePath
          login
          name
        }
      }
      pageInfo {
        endCursor
        startCursor
      }
    }
  }
}"""


class GitHubSponsorsFetcher:
    """Fetch the viewer's sponsors from the GitHub GraphQL API."""

    def __init__(
        self,
        token: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float | None = None,
        verbose: bool = False,
    ):
        """Initialize sponsors fetcher.

        Args:
            token: Personal access token of the sponsored account
            page_size: Sponsors requested per page (GitHub caps this at 100)
            timeout: Seconds per request (None waits forever)
            verbose: Print per-page progress
        """
        self.token = token
        self.page_size = page_size
        self.timeout = timeout
        self.verbose = verbose

    def query(self, query: str, variables: dict | None = None) -> SponsorConnection:
        """POST a GraphQL query and return the validated sponsors connection.

        Raises:
            TransportError: If the request fails before a response arrives
            HTTPStatusError: If GitHub does not answer 200
            UnexpectedResponseError: If the body is not a sponsors response
        """
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        request = Request(
            GITHUB_GRAPHQL_URL,
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Authorization": f"bearer {self.token}",
                "User-Agent": USER_AGENT,
            },
        )
        status, body = fetch_text(request, timeout=self.timeout)
        if status != 200:
            raise HTTPStatusError(status, body, url=GITHUB_GRAPHQL_URL)

        response = parse_response(SponsorsResponse, decode_json(body, "GitHub"), "GitHub")
        return response.sponsors

    def count(self) -> int:
        """Get the total number of sponsors."""
        connection = self.query(COUNT_QUERY)
        return connection.total_count or 0

    def iter_pages(self, total: int) -> Iterator[SponsorConnection]:
        """Yield sponsor pages until ``total`` sponsors have been requested.

        The bound is the count snapshot taken before paging. A page without
        nodes also ends the sequence, in case sponsors left in the meantime.
        """
        cursor: str | None = None
        index = 0
        while index < total:
            page = self.query(PAGE_QUERY, {"after": cursor, "first": self.page_size})
            if self.verbose:
                print(f"  Sponsors {index}-{index + len(page.nodes)} of {total}")
            yield page

            if not page.nodes:
                return
            index += self.page_size
            cursor = page.page_info.end_cursor

    def fetch(self) -> dict[str, str]:
        """Fetch sponsors as a display name -> profile url mapping."""
        total = self.count()
        if self.verbose:
            print(f"  Found {total} sponsors")

        sponsors: dict[str, str] = {}
        for page in self.iter_pages(total):
            for node in page.nodes:
                sponsors[node.display_name] = node.profile_url
        return sponsors


def fetch_sponsors(
    token: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    verbose: bool = False,
) -> dict[str, str]:
    """Convenience function to fetch GitHub sponsors."""
    return GitHubSponsorsFetcher(token, page_size=page_size, verbose=verbose).fetch()
