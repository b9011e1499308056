"""Work out which stored profile matches the identity git currently uses."""

from collections.abc import Iterable
from dataclasses import dataclass

from gist.git import IdentityBackend, Scope
from gist.models import Profile


@dataclass(frozen=True)
class Resolution:
    """Outcome of comparing git's identity against the store."""

    scope: Scope
    display_name: str
    email: str
    profile: Profile | None

    @property
    def scope_label(self) -> str:
        return "repo" if self.scope == "local" else "global"


def resolve(profiles: Iterable[Profile], display_name: str, email: str) -> Profile | None:
    """Return the first profile whose display name and email both match exactly.

    No normalization or case folding is applied. When either external value
    is empty (unset, or git could not be read) nothing matches.
    """
    if not display_name or not email:
        return None
    for profile in profiles:
        if profile.display_name == display_name and profile.email == email:
            return profile
    return None


def resolve_active(profiles: Iterable[Profile], backend: IdentityBackend) -> Resolution:
    """Resolve against the repository identity inside a working tree, else the global one."""
    inside, _ = backend.is_inside_working_tree()
    scope: Scope = "local" if inside else "global"
    display_name, email = backend.get_identity(scope)
    return Resolution(
        scope=scope,
        display_name=display_name,
        email=email,
        profile=resolve(profiles, display_name, email),
    )
