import pytest

from lint_refs.config import Config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the runner's own GitHub Actions environment out of the tests."""
    for name in Config.model_fields:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return Config(
        GITHUB_EVENT_NAME="push",
        GITHUB_EVENT_PATH="",
        GITHUB_REF="refs/heads/feature",
        GITHUB_REF_NAME="feature",
        GITHUB_REF_TYPE="branch",
        GITHUB_SHA="1111111111111111111111111111111111111111",
        GITHUB_REPOSITORY="test-org/test-repo",
        GITHUB_ENV="",
        GITHUB_OUTPUT="",
        OVERRIDE_LOGGING="DEBUG",
    )


@pytest.fixture
def sinks(tmp_path):
    env = tmp_path / "github_env"
    output = tmp_path / "github_output"
    env.touch()
    output.touch()
    return env, output
