from gitstat.settings import Settings


TOKEN_HELP = (
    "Error: GitHub token required!\n"
    "You can:\n"
    "   1. Pass token with --token YOUR_TOKEN\n"
    "   2. Set GITHUB_TOKEN environment variable\n"
    "   3. Create a token at: https://github.com/settings/tokens\n"
    "      (Required permissions: 'read:user' only)"
)


class MissingTokenError(Exception):
    """Raised when no GitHub token is given on the command line or in settings."""

    def __init__(self) -> None:
        super().__init__(TOKEN_HELP)


def resolve_token(cli_token: str | None, app_settings: Settings) -> str:
    """Pick the token from the `--token` flag, then from `GITHUB_TOKEN`.

    Raises:
        MissingTokenError: If neither source is set.
    """

    for candidate in (cli_token, app_settings.github_token):
        if candidate is not None:
            return candidate

    raise MissingTokenError()


def bearer_headers(token: str, user_agent: str) -> dict[str, str]:
    """Build headers for an authenticated GitHub request."""

    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "User-Agent": user_agent,
    }
