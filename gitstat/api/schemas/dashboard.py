from datetime import date

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class GitHubModel(BaseModel):
    """Frozen model that keeps known fields and ignores the rest of a payload."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Profile(GitHubModel):
    """Public profile fields from the REST user lookup."""

    login: str
    name: str | None = None
    public_repos: int = Field(default=0, ge=0)
    followers: int = Field(default=0, ge=0)
    following: int = Field(default=0, ge=0)

    @property
    def display_name(self) -> str:
        return self.name or self.login


class ContributionDay(GitHubModel):
    """Single day of the contribution calendar."""

    date: date
    contribution_count: int = Field(alias="contributionCount", ge=0)
    color: str = ""


class ContributionWeek(GitHubModel):
    """Week of days, index 0 being the first day GitHub reports for it."""

    contribution_days: list[ContributionDay] = Field(
        default_factory=list, alias="contributionDays"
    )


class ContributionCalendar(GitHubModel):
    """Last-year contribution calendar, weeks kept in API order."""

    total_contributions: int = Field(alias="totalContributions", ge=0)
    weeks: list[ContributionWeek] = Field(default_factory=list)

    def days(self) -> list[ContributionDay]:
        return [day for week in self.weeks for day in week.contribution_days]


class ContributionStats(GitHubModel):
    """Aggregates shown in the statistics section."""

    active_days: int
    max_per_day: int
    average_per_active_day: float


class TerminalGeometry(GitHubModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class DashboardLayout(GitHubModel):
    """Column decisions for one render, derived from the terminal width."""

    width: int
    calendar_columns: int
    weeks_shown: int
    calendar_padding: int
    legend_padding: int
