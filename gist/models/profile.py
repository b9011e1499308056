"""Profile data model."""

from dataclasses import dataclass


@dataclass
class Profile:
    """One git identity persona.

    Records decoded from a hand-edited store may be partial, so only
    ``name`` is required at construction time.
    """

    name: str
    display_name: str = ""
    email: str = ""
    signing_key: str | None = None

    @property
    def has_signing_key(self) -> bool:
        return bool(self.signing_key)

    def missing_fields(self) -> list[str]:
        """Return the required fields that are blank."""
        required = {
            "name": self.name,
            "username": self.display_name,
            "email": self.email,
        }
        return [field for field, value in required.items() if not value]

    @classmethod
    def create(
        cls,
        name: str,
        display_name: str,
        email: str,
        signing_key: str | None = None,
    ) -> "Profile":
        """Factory for a profile built from user input.

        Surrounding whitespace is trimmed and a blank signing key becomes None.

        Raises:
            ValueError: If name, display name or email is blank.
        """
        profile = cls(
            name=name.strip(),
            display_name=display_name.strip(),
            email=email.strip(),
            signing_key=(signing_key or "").strip() or None,
        )
        if profile.missing_fields():
            raise ValueError("profile name, username and email are required")
        return profile
