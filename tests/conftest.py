"""Shared test fixtures and configuration."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from gist.errors import ExternalToolError
from gist.models import Profile


@dataclass(frozen=True)
class TestConfig:
    """Test configuration matching the real Config interface."""

    config_path: Path = Path("/tmp/test_gist/config.yaml")
    git_path: str = "git"
    git_timeout: int | None = None
    verbose: bool = False


@dataclass
class FakeGit:
    """In-memory IdentityBackend recording every write."""

    inside: bool = True
    root: str = "/work/repo"
    local: tuple[str, str] = ("", "")
    global_: tuple[str, str] = ("", "")
    fail_fields: set[str] = field(default_factory=set)
    writes: list[tuple[str, str, str]] = field(default_factory=list)

    def is_inside_working_tree(self) -> tuple[bool, str]:
        return self.inside, self.root if self.inside else ""

    def get_identity(self, scope: str) -> tuple[str, str]:
        return self.local if scope == "local" else self.global_

    def set_identity_field(self, scope: str, field: str, value: str) -> None:
        if field in self.fail_fields:
            raise ExternalToolError(f"failed to set {field}: simulated")
        self.writes.append((scope, field, value))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> TestConfig:
    """Create a test configuration with a temporary store path."""
    return TestConfig(config_path=temp_dir / "gist" / "config.yaml")


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def sample_profiles() -> list[Profile]:
    """Two profiles, the second with a signing key."""
    return [
        Profile(name="work", display_name="Jane Doe", email="jane@co"),
        Profile(name="personal", display_name="jane-p", email="jane@ex", signing_key="ABC123"),
    ]


@pytest.fixture
def store_file(test_config: TestConfig) -> Path:
    """Write a store with the sample profiles and return its path."""
    path = test_config.config_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "profiles:\n"
        "  - name: work\n"
        "    username: \"Jane Doe\"\n"
        "    email: \"jane@co\"\n"
        "  - name: personal\n"
        "    username: \"jane-p\"\n"
        "    email: \"jane@ex\"\n"
        "    signingkey: \"ABC123\"\n",
        encoding="utf-8",
    )
    return path
