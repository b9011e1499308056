"""Reader and writer for the profile store's YAML-like text format.

Only the flat shape gist itself writes is understood::

    profiles:
      - name: work
        username: "Jane Doe"
        email: "jane@co"
        signingkey: "ABC123"

Decoding is line oriented and permissive: comments, blank lines, the
``profiles:`` header, lines without a colon and unknown keys are skipped.
"""

from gist.models import Profile

HEADER = "profiles:"

_QUOTES = ("\"", "'")


def _strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding quotes, if present."""
    # Mismatched or lone quotes are part of the value: only a balanced pair is
    # removed, so "abc stays "abc and O'Brien' survives encode/decode.
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``key: value`` line, optionally prefixed with a list dash.

    Returns:
        Tuple of (key, value), or None when the line has no colon.
    """
    line = line.strip()
    if line.startswith("-"):
        line = line[1:].strip()
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip(), _strip_quotes(value.strip())


def decode(text: str) -> list[Profile]:
    """Parse store text into profiles, in file order.

    A ``name`` key starts a new record; ``username``, ``email`` and
    ``signingkey`` fill in the most recently started one. Field lines seen
    before any ``name`` line are dropped.
    """
    profiles: list[Profile] = []
    current: int | None = None

    for raw in text.splitlines():
        trimmed = raw.strip()
        if not trimmed or trimmed.startswith("#") or trimmed.startswith(HEADER):
            continue

        parsed = parse_key_value(trimmed)
        if parsed is None:
            continue
        key, value = parsed

        if key == "name":
            profiles.append(Profile(name=value))
            current = len(profiles) - 1
            continue
        if current is None:
            continue

        if key == "username":
            profiles[current].display_name = value
        elif key == "email":
            profiles[current].email = value
        elif key == "signingkey":
            profiles[current].signing_key = value or None

    return profiles


def encode(profiles: list[Profile]) -> str:
    """Serialize profiles to store text. Output always decodes back to the same list."""
    lines = [HEADER]
    for profile in profiles:
        lines.append(f"  - name: {profile.name}")
        lines.append(f"    username: \"{profile.display_name}\"")
        lines.append(f"    email: \"{profile.email}\"")
        if profile.signing_key:
            lines.append(f"    signingkey: \"{profile.signing_key}\"")
    return "\n".join(lines) + "\n"
