import logging

import httpx
from pydantic import ValidationError

from gitstat.api.schemas.dashboard import ContributionCalendar
from gitstat.api.schemas.dashboard import ContributionStats
from gitstat.api.schemas.dashboard import Profile
from gitstat.clients.github_client import GraphQLResponseError
from gitstat.clients.github_client import fetch_contribution_calendar
from gitstat.clients.github_client import fetch_user
from gitstat.settings import Settings


logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Raised when a GitHub request fails or returns an unusable payload."""


class UserNotFoundError(GitHubAPIError):
    """Raised when GitHub has no user with the requested login."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User '{username}' not found")
        self.username = username


class GraphQLError(GitHubAPIError):
    """Raised when the GraphQL API reports its own errors."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(f"GraphQL errors: {', '.join(messages)}")
        self.messages = messages


def contribution_level(count: int) -> int:
    """Map daily contribution count to a heatmap level in range 0..4."""

    if count <= 0:
        return 0
    if count <= 2:
        return 1
    if count <= 5:
        return 2
    if count <= 10:
        return 3
    return 4


def compute_statistics(calendar: ContributionCalendar) -> ContributionStats:
    """Count active days, the busiest day and the average per active day."""

    counts = [day.contribution_count for day in calendar.days()]
    active_days = sum(1 for count in counts if count > 0)
    average = calendar.total_contributions / active_days if active_days else 0.0

    return ContributionStats(
        active_days=active_days,
        max_per_day=max(counts, default=0),
        average_per_active_day=average,
    )


def fetch_profile(username: str, app_settings: Settings) -> Profile:
    """Fetch the public profile of `username` with a single unauthenticated GET."""

    try:
        response = fetch_user(
            username=username,
            api_base_url=app_settings.github_api_base_url,
            user_agent=app_settings.user_agent,
        )
    except httpx.HTTPError as exc:
        raise GitHubAPIError(f"Request failed: {exc}") from exc

    if not response.is_success:
        raise UserNotFoundError(username)

    try:
        return Profile.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise GitHubAPIError("GitHub user response is invalid") from exc


def fetch_contributions(
    username: str,
    token: str,
    app_settings: Settings,
) -> ContributionCalendar:
    """Fetch the last-year contribution calendar of `username`."""

    try:
        payload = fetch_contribution_calendar(
            username=username,
            token=token,
            graphql_url=app_settings.github_graphql_url,
            user_agent=app_settings.user_agent,
        )
    except httpx.HTTPStatusError as exc:
        response = exc.response
        raise GitHubAPIError(
            f"HTTP error: {response.status_code} {response.reason_phrase}".rstrip()
        ) from exc
    except httpx.HTTPError as exc:
        raise GitHubAPIError(f"Request failed: {exc}") from exc
    except GraphQLResponseError as exc:
        raise GraphQLError(exc.messages) from exc
    except LookupError as exc:
        raise UserNotFoundError(username) from exc
    except ValueError as exc:
        raise GitHubAPIError(str(exc)) from exc

    try:
        calendar = ContributionCalendar.model_validate(payload)
    except ValidationError as exc:
        raise GitHubAPIError("GitHub contribution calendar is invalid") from exc

    logger.debug(
        "Fetched %d weeks, %d contributions for %s",
        len(calendar.weeks),
        calendar.total_contributions,
        username,
    )
    return calendar
