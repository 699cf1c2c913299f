from rich.console import Console
from rich.text import Text

from gitstat.api.schemas.dashboard import ContributionCalendar
from gitstat.api.schemas.dashboard import DashboardLayout
from gitstat.api.schemas.dashboard import Profile
from gitstat.api.schemas.dashboard import TerminalGeometry
from gitstat.render.layout import compute_layout
from gitstat.render.layout import center_padding
from gitstat.render.layout import terminal_geometry
from gitstat.services.dashboard_service import compute_statistics
from gitstat.services.dashboard_service import contribution_level


CELL = "■"
RULE = "─"
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAYS = ["Mon", "Wed", "Fri"]

# One color per contribution level, darkest first.
LEVEL_COLORS = [
    (45, 51, 59),
    (14, 68, 121),
    (33, 110, 177),
    (52, 152, 219),
    (116, 185, 255),
]

RULE_STYLE = "bright_blue"
TITLE_STYLE = "bold bright_white"
INFO_STYLE = "bright_cyan"
LABEL_STYLE = "bright_blue"


def level_style(level: int) -> str:
    red, green, blue = LEVEL_COLORS[level]
    return f"rgb({red},{green},{blue})"


def _emit(console: Console, *parts: str | tuple[str, str]) -> None:
    console.print(Text.assemble(*parts), soft_wrap=True, crop=False)


def _centered(console: Console, width: int, text: str, style: str) -> None:
    _emit(console, " " * center_padding(width, len(text)), (text, style))


def draw_header(console: Console, profile: Profile, layout: DashboardLayout) -> None:
    width = layout.width
    title = f" {profile.login} "
    padding = center_padding(width, len(title))

    _emit(console, (RULE * width, RULE_STYLE))
    _emit(
        console,
        " " * padding,
        (title, TITLE_STYLE),
        " " * max(0, width - (padding + len(title))),
    )

    info_line = (
        f"Name: {profile.display_name}  |  Repos: {profile.public_repos}  |  "
        f"Followers: {profile.followers}  |  Following: {profile.following}"
    )
    _centered(console, width, info_line, INFO_STYLE)
    _emit(console, (RULE * width, RULE_STYLE))


def draw_calendar(
    console: Console, calendar: ContributionCalendar, layout: DashboardLayout
) -> None:
    width = layout.width
    _centered(console, width, " GitHub Activity (Last Year) ", TITLE_STYLE)
    _centered(
        console, width, f"Total Contributions: {calendar.total_contributions}", LABEL_STYLE
    )
    console.print()

    margin = " " * layout.calendar_padding

    month_row: list[str | tuple[str, str]] = [margin, " " * 8]
    for index in range(layout.weeks_shown):
        if index % 4 == 0 and index // 4 < len(MONTHS):
            month_row.append((MONTHS[index // 4], LABEL_STYLE))
        else:
            month_row.append(" ")
    _emit(console, *month_row)

    # Rows run Monday-first; odd rows carry a weekday label.
    for row in range(7):
        line: list[str | tuple[str, str]] = [margin]
        if row % 2 == 1 and row // 2 < len(WEEKDAYS):
            line.append((f"{WEEKDAYS[row // 2]:>3}", LABEL_STYLE))
            line.append(" ")
        else:
            line.append("    ")

        for week in calendar.weeks[: layout.weeks_shown]:
            days = week.contribution_days
            if row < len(days):
                level = contribution_level(days[row].contribution_count)
                line.append((CELL, level_style(level)))
            else:
                line.append(" ")
        _emit(console, *line)

    console.print()
    legend: list[str | tuple[str, str]] = [" " * layout.legend_padding, "   Less  "]
    legend.extend((CELL, level_style(level)) for level in range(len(LEVEL_COLORS)))
    legend.append("  More")
    _emit(console, *legend)


def draw_statistics(
    console: Console, calendar: ContributionCalendar, layout: DashboardLayout
) -> None:
    width = layout.width
    stats = compute_statistics(calendar)

    console.print()
    _centered(console, width, " Statistics ", TITLE_STYLE)
    stats_line = (
        f"Active Days: {stats.active_days}  |  Max/Day: {stats.max_per_day}  |  "
        f"Avg/Active Day: {stats.average_per_active_day:.1f}"
    )
    _centered(console, width, stats_line, INFO_STYLE)
    _emit(console, (RULE * width, RULE_STYLE))


def render_dashboard(
    profile: Profile,
    calendar: ContributionCalendar,
    console: Console,
    geometry: TerminalGeometry | None = None,
) -> DashboardLayout:
    """Print the header, calendar and statistics sections to `console`.

    The terminal size is read once; pass `geometry` to render at a fixed size.
    """

    layout = compute_layout(calendar, geometry or terminal_geometry())
    draw_header(console, profile, layout)
    draw_calendar(console, calendar, layout)
    draw_statistics(console, calendar, layout)
    return layout
