"""Apply a profile to the current repository's git identity."""

from dataclasses import dataclass, field

from gist.errors import ExternalToolError, NotARepository
from gist.git import IdentityBackend
from gist.models import Profile


@dataclass
class ActivationResult:
    """Result of a successful activation."""

    profile: Profile
    repo_root: str
    warnings: list[str] = field(default_factory=list)


def activate(profile: Profile, backend: IdentityBackend) -> ActivationResult:
    """Write profile's name, email and signing key into the local git config.

    Name and email are required to succeed. A failed signing-key write is
    recorded as a warning and does not fail the activation.

    Raises:
        NotARepository: If the working directory is not inside a git work tree.
        ExternalToolError: If user.name or user.email cannot be set.
    """
    inside, repo_root = backend.is_inside_working_tree()
    if not inside:
        raise NotARepository()

    backend.set_identity_field("local", "display_name", profile.display_name)
    backend.set_identity_field("local", "email", profile.email)

    result = ActivationResult(profile=profile, repo_root=repo_root)
    if profile.has_signing_key:
        try:
            backend.set_identity_field("local", "signing_key", profile.signing_key)
        except ExternalToolError as e:
            result.warnings.append(str(e))
    return result
