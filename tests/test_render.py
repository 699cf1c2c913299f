import io

from rich.console import Console

from gitstat.api.schemas.dashboard import ContributionCalendar
from gitstat.api.schemas.dashboard import Profile
from gitstat.api.schemas.dashboard import TerminalGeometry
from gitstat.render.dashboard import LEVEL_COLORS
from gitstat.render.dashboard import level_style
from gitstat.render.dashboard import render_dashboard


def make_profile(name: str | None = "The Octocat") -> Profile:
    return Profile(login="octocat", name=name, public_repos=8, followers=20, following=9)


def make_calendar(counts: list[list[int]]) -> ContributionCalendar:
    return ContributionCalendar.model_validate(
        {
            "totalContributions": sum(sum(week) for week in counts),
            "weeks": [
                {
                    "contributionDays": [
                        {"date": "2026-01-05", "contributionCount": count}
                        for count in week
                    ]
                }
                for week in counts
            ],
        }
    )


def render_plain(
    profile: Profile, calendar: ContributionCalendar, width: int
) -> list[str]:
    output = io.StringIO()
    console = Console(file=output, width=width, color_system=None, highlight=False)
    render_dashboard(profile, calendar, console, TerminalGeometry(width=width, height=24))
    return output.getvalue().splitlines()


def test_render_dashboard_draws_all_sections_in_order() -> None:
    calendar = make_calendar([[1] * 7] * 19 + [[0, 12]])

    lines = render_plain(make_profile(), calendar, width=80)

    assert lines[0] == "─" * 80
    assert lines[1].rstrip() == " " * 35 + " octocat"
    assert lines[2] == " " * 7 + (
        "Name: The Octocat  |  Repos: 8  |  Followers: 20  |  Following: 9"
    )
    assert lines[3] == "─" * 80
    assert lines[4].rstrip() == " " * 25 + " GitHub Activity (Last Year)"
    assert lines[5] == " " * 28 + "Total Contributions: 145"
    assert lines[6] == ""
    assert lines[7].rstrip() == " " * 34 + "Jan   Feb   Mar   Apr   May"
    assert lines[8] == " " * 26 + "    " + "■" * 20
    assert lines[9] == " " * 26 + "Mon " + "■" * 20
    assert lines[13].rstrip() == " " * 26 + "Fri " + "■" * 19
    assert lines[14].rstrip() == " " * 26 + "    " + "■" * 19
    assert lines[15] == ""
    assert lines[16] == " " * 22 + "   Less  ■■■■■  More"
    assert lines[17] == ""
    assert lines[18].rstrip() == " " * 34 + " Statistics"
    assert lines[19] == " " * 12 + (
        "Active Days: 134  |  Max/Day: 12  |  Avg/Active Day: 1.1"
    )
    assert lines[20] == "─" * 80
    assert len(lines) == 21


def test_render_dashboard_uses_login_when_name_missing() -> None:
    lines = render_plain(make_profile(name=None), make_calendar([[0]]), width=120)

    assert any("Name: octocat  |" in line for line in lines)


def test_render_dashboard_limits_weeks_to_column_budget() -> None:
    calendar = make_calendar([[1] * 7] * 53)

    lines = render_plain(make_profile(), calendar, width=60)

    monday_row = next(line for line in lines if "Mon " in line)
    assert monday_row.count("■") == 10


def test_render_dashboard_on_narrow_terminal_draws_empty_grid() -> None:
    lines = render_plain(make_profile(), make_calendar([[3] * 7] * 53), width=20)

    grid = [line for line in lines if line.strip() in {"", "Mon", "Wed", "Fri"}]
    assert all("■" not in line for line in grid)
    assert "Active Days: 371" in "\n".join(lines)


def test_render_dashboard_colors_cells_by_level() -> None:
    output = io.StringIO()
    console = Console(
        file=output, width=120, force_terminal=True, color_system="truecolor"
    )

    render_dashboard(
        make_profile(),
        make_calendar([[0, 1, 3, 6, 11]]),
        console,
        TerminalGeometry(width=120, height=40),
    )

    rendered = output.getvalue()
    for red, green, blue in LEVEL_COLORS:
        assert f"38;2;{red};{green};{blue}" in rendered


def test_level_style_is_rich_rgb_color() -> None:
    assert level_style(0) == "rgb(45,51,59)"
    assert level_style(4) == "rgb(116,185,255)"


def test_render_dashboard_draws_seven_rows_of_an_oversized_week() -> None:
    calendar = make_calendar([[1] * 8, [2] * 7])

    lines = render_plain(make_profile(), calendar, width=80)

    grid = lines[8:15]
    assert len(calendar.weeks[0].contribution_days) == 8
    assert all(line.rstrip().endswith("■■") for line in grid)
    assert lines[15] == ""
    assert "Active Days: 15" in lines[19]
