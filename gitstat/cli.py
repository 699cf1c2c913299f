import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from gitstat import __version__
from gitstat.core.observability import configure_logging
from gitstat.core.observability import init_sentry
from gitstat.core.observability import report_exception
from gitstat.core.security import MissingTokenError
from gitstat.core.security import resolve_token
from gitstat.render.dashboard import render_dashboard
from gitstat.services.dashboard_service import GitHubAPIError
from gitstat.services.dashboard_service import fetch_contributions
from gitstat.services.dashboard_service import fetch_profile
from gitstat.settings import Settings


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitstat",
        description="Display GitHub activity schema for any user",
    )
    parser.add_argument("username", help="GitHub username")
    parser.add_argument(
        "--token",
        "-t",
        help="GitHub access token (or use GITHUB_TOKEN environment variable)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log requests to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI and return the process exit code."""

    args = build_parser().parse_args(argv)
    app_settings = Settings()
    configure_logging("DEBUG" if args.verbose else app_settings.log_level)
    init_sentry(app_settings)

    try:
        token = resolve_token(args.token, app_settings)
    except MissingTokenError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        profile = fetch_profile(args.username, app_settings)
    except GitHubAPIError as exc:
        logger.debug("Profile fetch failed", exc_info=exc)
        report_exception(exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        calendar = fetch_contributions(args.username, token, app_settings)
    except GitHubAPIError as exc:
        logger.debug("Contribution fetch failed", exc_info=exc)
        report_exception(exc)
        print(f"Error retrieving contributions: {exc}", file=sys.stderr)
        print(
            "Please verify your token is valid and has proper permissions",
            file=sys.stderr,
        )
        return 0

    render_dashboard(profile, calendar, console or Console(highlight=False))
    return 0
