import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real tokens and Sentry settings out of the tests."""

    monkeypatch.chdir(tmp_path)
    for name in (
        "GITHUB_TOKEN",
        "GITHUB_API_BASE_URL",
        "GITHUB_GRAPHQL_URL",
        "USER_AGENT",
        "LOG_LEVEL",
        "SENTRY_DSN",
    ):
        monkeypatch.delenv(name, raising=False)
