"""Layout decisions for the terminal dashboard.

Everything here is a pure function of the terminal width and the calendar,
except `terminal_geometry`, which asks the host terminal once.
"""

import shutil

from gitstat.api.schemas.dashboard import ContributionCalendar
from gitstat.api.schemas.dashboard import DashboardLayout
from gitstat.api.schemas.dashboard import TerminalGeometry


DEFAULT_GEOMETRY = TerminalGeometry(width=80, height=24)
MAX_WEEKS = 53
RESERVED_COLUMNS = 40
LABEL_COLUMNS = 8
LEGEND_WIDTH = 35


def terminal_geometry() -> TerminalGeometry:
    """Return the host terminal size, or 80x24 if it reports none."""

    size = shutil.get_terminal_size(
        fallback=(DEFAULT_GEOMETRY.width, DEFAULT_GEOMETRY.height)
    )
    return TerminalGeometry(width=max(0, size.columns), height=max(0, size.lines))


def center_padding(width: int, length: int) -> int:
    """Left padding that centers `length` columns in `width`; odd remainders lean right."""

    return max(0, width - length) // 2


def calendar_columns(width: int) -> int:
    """Number of week columns the heat-map may use at this terminal width."""

    return min(MAX_WEEKS, max(0, width - RESERVED_COLUMNS) // 2)


def weeks_to_show(week_count: int, columns: int) -> int:
    return min(week_count, columns)


def compute_layout(
    calendar: ContributionCalendar, geometry: TerminalGeometry
) -> DashboardLayout:
    columns = calendar_columns(geometry.width)
    return DashboardLayout(
        width=geometry.width,
        calendar_columns=columns,
        weeks_shown=weeks_to_show(len(calendar.weeks), columns),
        calendar_padding=center_padding(geometry.width, columns + LABEL_COLUMNS),
        legend_padding=center_padding(geometry.width, LEGEND_WIDTH),
    )
