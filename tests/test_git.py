"""Tests for gist/git.py"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from gist.errors import ExternalToolError
from gist.git import GitClient


def completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestRunCommand:
    """Tests for GitClient._run_command."""

    def test_uses_configured_git_path_and_timeout(self):
        client = GitClient("/opt/git/bin/git", timeout=5)
        with patch("gist.git.subprocess.run", return_value=completed(stdout="out\n")) as mock_run:
            assert client._run_command(["status"]) == (0, "out", "")
        cmd = mock_run.call_args[0][0]
        assert cmd == ["/opt/git/bin/git", "status"]
        assert mock_run.call_args[1]["timeout"] == 5

    def test_no_timeout_by_default(self):
        with patch("gist.git.subprocess.run", return_value=completed()) as mock_run:
            GitClient()._run_command(["status"])
        assert mock_run.call_args[1]["timeout"] is None

    def test_missing_executable(self):
        with patch("gist.git.subprocess.run", side_effect=FileNotFoundError("no git")):
            code, stdout, stderr = GitClient("nogit")._run_command(["status"])
        assert code == -1
        assert "no git" in stderr

    def test_timeout(self):
        with patch("gist.git.subprocess.run", side_effect=subprocess.TimeoutExpired("git", 1)):
            code, _, stderr = GitClient(timeout=1)._run_command(["status"])
        assert code == -1
        assert "timed out" in stderr

    def test_verbose_echoes_command(self, capsys):
        with patch("gist.git.subprocess.run", return_value=completed()):
            GitClient(verbose=True)._run_command(["config", "user.name"])
        assert "+ git config user.name" in capsys.readouterr().err

    def test_quiet_by_default(self, capsys):
        with patch("gist.git.subprocess.run", return_value=completed()):
            GitClient()._run_command(["config", "user.name"])
        assert capsys.readouterr().err == ""


class TestWorkingTree:
    """Tests for is_inside_working_tree."""

    def test_inside(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(0, "/work/repo", "")) as mock_run:
            assert client.is_inside_working_tree() == (True, "/work/repo")
        mock_run.assert_called_once_with(["rev-parse", "--show-toplevel"])

    def test_outside(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(128, "", "fatal: not a git repository")):
            assert client.is_inside_working_tree() == (False, "")


class TestGetIdentity:
    """Tests for get_identity."""

    def test_local_reads_without_scope_flag(self):
        client = GitClient()
        outputs = {"user.name": (0, "Jane Doe", ""), "user.email": (0, "jane@co", "")}
        with patch.object(client, "_run_command", side_effect=lambda args: outputs[args[-1]]) as mock_run:
            assert client.get_identity("local") == ("Jane Doe", "jane@co")
        assert mock_run.call_args_list[0][0][0] == ["config", "user.name"]

    def test_global_uses_global_flag(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(0, "x", "")) as mock_run:
            client.get_identity("global")
        assert mock_run.call_args_list[0][0][0] == ["config", "--global", "user.name"]
        assert mock_run.call_args_list[1][0][0] == ["config", "--global", "user.email"]

    def test_failures_read_as_empty(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(1, "", "")):
            assert client.get_identity("local") == ("", "")


class TestSetIdentityField:
    """Tests for set_identity_field."""

    @pytest.mark.parametrize(
        "field,key",
        [("display_name", "user.name"), ("email", "user.email"), ("signing_key", "user.signingkey")],
    )
    def test_maps_fields_to_git_keys(self, field, key):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(0, "", "")) as mock_run:
            client.set_identity_field("local", field, "value")
        mock_run.assert_called_once_with(["config", key, "value"])

    def test_failure_raises_with_stderr(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(255, "", "error: could not lock config file")):
            with pytest.raises(ExternalToolError, match="could not lock config file"):
                client.set_identity_field("local", "email", "a@b")

    def test_failure_without_stderr_reports_status(self):
        client = GitClient()
        with patch.object(client, "_run_command", return_value=(3, "", "")):
            with pytest.raises(ExternalToolError, match="exit status 3"):
                client.set_identity_field("local", "email", "a@b")
