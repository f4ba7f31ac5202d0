import pytest
import tempfile
from pathlib import Path
from git import Repo
from click.testing import CliRunner

from bartle.models import RuleConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep BARTLE_* variables from the developer's shell out of the tests."""
    for name in ("BARTLE_STYLE", "BARTLE_LOG_FILE", "BARTLE_MAX_LINE_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir


@pytest.fixture
def hook_file(temp_git_repo):
    """Path of the commit-msg hook inside the temporary repository."""
    path = Path(temp_git_repo) / ".git" / "hooks" / "commit-msg"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def default_rules():
    return RuleConfig()


@pytest.fixture
def jira_rules():
    return RuleConfig(style="jira", scope_required=False)
