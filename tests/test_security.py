import pytest

from gitstat.core.security import MissingTokenError
from gitstat.core.security import bearer_headers
from gitstat.core.security import resolve_token
from gitstat.settings import Settings


def test_resolve_token_prefers_cli_flag() -> None:
    assert resolve_token("flag", Settings(github_token="env")) == "flag"


def test_resolve_token_falls_back_to_settings() -> None:
    assert resolve_token(None, Settings(github_token="env")) == "env"


@pytest.mark.parametrize("token", [" tok ", "", "   "])
def test_resolve_token_passes_flag_through_verbatim(token: str) -> None:
    assert resolve_token(token, Settings(github_token="env")) == token


def test_resolve_token_passes_settings_token_through_verbatim() -> None:
    assert resolve_token(None, Settings(github_token=" env ")) == " env "


def test_resolve_token_raises_when_no_source_has_token() -> None:
    with pytest.raises(MissingTokenError, match="GitHub token required"):
        resolve_token(None, Settings(github_token=None))


def test_settings_reads_github_token_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_example")

    settings = Settings()

    assert settings.github_token == "ghp_example"
    assert settings.user_agent == "gitstat-cli"


def test_bearer_headers_include_client_identifier() -> None:
    assert bearer_headers("secret", "gitstat-cli") == {
        "Authorization": "Bearer secret",
        "Content-Type": "application/json",
        "User-Agent": "gitstat-cli",
    }


def test_settings_ignores_dotenv_file_in_working_directory(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("GITHUB_TOKEN=from-dotenv-file\n")
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.github_token is None
