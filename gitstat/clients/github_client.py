import logging
from collections.abc import Mapping
from typing import Any

import httpx

from gitstat.core.security import bearer_headers


logger = logging.getLogger(__name__)


class GraphQLResponseError(ValueError):
    """Raised when the GraphQL envelope carries a non-empty `errors` list."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(", ".join(messages))
        self.messages = messages


CONTRIBUTIONS_QUERY = """
    query($username: String!) {
        user(login: $username) {
            login
            name
            contributionsCollection {
                contributionCalendar {
                    totalContributions
                    weeks {
                        contributionDays {
                            date
                            contributionCount
                            color
                        }
                    }
                }
            }
        }
    }
"""


def fetch_user(username: str, api_base_url: str, user_agent: str) -> httpx.Response:
    """Look up a public GitHub user through the REST API.

    The response is returned as-is so the caller decides what a non-success
    status means.
    """

    url = f"{api_base_url.rstrip('/')}/users/{username}"
    logger.debug("GET %s", url)

    response = httpx.get(
        url,
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        },
    )
    logger.debug("GET %s -> %s", url, response.status_code)
    return response


def fetch_contribution_calendar(
    username: str,
    token: str,
    graphql_url: str,
    user_agent: str,
) -> Mapping[str, Any]:
    """Fetch the last-year contribution calendar payload from GitHub GraphQL API.

    Returns the `contributionCalendar` mapping unwrapped from the envelope.

    Raises:
        httpx.HTTPError: On transport failure or a non-success status.
        LookupError: If the envelope names no such user.
        GraphQLResponseError: If the envelope reports errors.
        ValueError: If the envelope is malformed.
    """

    logger.debug("POST %s for %s", graphql_url, username)
    response = httpx.post(
        graphql_url,
        json={"query": CONTRIBUTIONS_QUERY, "variables": {"username": username}},
        headers=bearer_headers(token, user_agent),
    )
    logger.debug("POST %s -> %s", graphql_url, response.status_code)
    response.raise_for_status()

    payload: Any = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub GraphQL response is invalid")

    errors = payload.get("errors")
    if errors:
        messages = [
            str(error.get("message", error)) if isinstance(error, Mapping) else str(error)
            for error in errors
        ]
        raise GraphQLResponseError(messages)

    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("No data returned by API")

    user = data.get("user")
    if not isinstance(user, Mapping):
        raise LookupError(username)

    collection = user.get("contributionsCollection")
    if not isinstance(collection, Mapping):
        raise ValueError("GitHub contributionsCollection is missing")

    calendar = collection.get("contributionCalendar")
    if not isinstance(calendar, Mapping):
        raise ValueError("GitHub contributionCalendar is missing")

    return calendar
