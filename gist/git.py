"""Git identity configuration access.

Wraps the ``git`` executable behind the small IdentityBackend protocol so the
resolution and activation code can be exercised with a fake in tests.
"""

import subprocess
import sys
from typing import Literal, Protocol

from gist.errors import ExternalToolError

Scope = Literal["local", "global"]
IdentityField = Literal["display_name", "email", "signing_key"]

# Profile field -> git config key
GIT_KEYS: dict[str, str] = {
    "display_name": "user.name",
    "email": "user.email",
    "signing_key": "user.signingkey",
}


class IdentityBackend(Protocol):
    """Capabilities gist needs from the version-control tool."""

    def is_inside_working_tree(self) -> tuple[bool, str]:
        """Return (inside, repository root). Root is empty when outside."""
        ...

    def get_identity(self, scope: Scope) -> tuple[str, str]:
        """Return (user.name, user.email) for scope; unset or unreadable values are empty."""
        ...

    def set_identity_field(self, scope: Scope, field: IdentityField, value: str) -> None:
        """Write one identity field.

        Raises:
            ExternalToolError: If git reports a failure.
        """
        ...


def _scope_args(scope: Scope) -> list[str]:
    # Plain `git config` inside a working tree reads the effective repository
    # view and writes the repository's own config file.
    return ["--global"] if scope == "global" else []


class GitClient:
    """IdentityBackend backed by the git command line."""

    def __init__(self, git_path: str = "git", verbose: bool = False, timeout: int | None = None):
        self.git_path = git_path
        self.verbose = verbose
        self.timeout = timeout

    def _run_command(self, args: list[str]) -> tuple[int, str, str]:
        """Run git with args.

        Returns:
            Tuple of (return_code, stdout, stderr), both streams stripped.
            Spawn failures and timeouts are reported as return code -1.
        """
        cmd = [self.git_path, *args]
        if self.verbose:
            print("+ " + " ".join(cmd), file=sys.stderr)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
            return result.returncode, result.stdout.strip(), result.stderr.strip()
        except subprocess.TimeoutExpired:
            return -1, "", f"{self.git_path} timed out after {self.timeout}s"
        except OSError as e:
            return -1, "", str(e)

    def is_inside_working_tree(self) -> tuple[bool, str]:
        code, stdout, _ = self._run_command(["rev-parse", "--show-toplevel"])
        if code != 0:
            return False, ""
        return True, stdout

    def _get_value(self, scope: Scope, key: str) -> str:
        code, stdout, _ = self._run_command(["config", *_scope_args(scope), key])
        # Exit status 1 just means the key is unset
        if code != 0:
            return ""
        return stdout

    def get_identity(self, scope: Scope) -> tuple[str, str]:
        return (
            self._get_value(scope, GIT_KEYS["display_name"]),
            self._get_value(scope, GIT_KEYS["email"]),
        )

    def set_identity_field(self, scope: Scope, field: IdentityField, value: str) -> None:
        key = GIT_KEYS[field]
        code, _, stderr = self._run_command(["config", *_scope_args(scope), key, value])
        if code != 0:
            detail = stderr or f"exit status {code}"
            raise ExternalToolError(f"failed to set {key}: {detail}")
