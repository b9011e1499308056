"""File-backed store of git identity profiles.

The store is loaded fresh for each command, mutated in memory, and written
back whole right after a successful change. Nothing locks the file: two
concurrent runs that both save will keep only the last writer's changes.
"""

from dataclasses import replace
from pathlib import Path

from gist import codec
from gist.errors import MalformedEntry, ProfileNotFound, StoreIOError, StoreMissingError
from gist.models import Profile
from gist.utils import atomic_write_text

EXAMPLE_PROFILE = Profile(name="example", display_name="Your Name", email="you@example.com")


class ProfileStore:
    """Ordered collection of profiles backed by one text file.

    Names are not forced to be unique. Lookups and removals always act on
    the first profile with a matching name.
    """

    def __init__(self, profiles: list[Profile] | None = None):
        self.profiles: list[Profile] = list(profiles or [])

    def __len__(self) -> int:
        return len(self.profiles)

    def __iter__(self):
        return iter(self.profiles)

    @classmethod
    def load(cls, path: Path) -> "ProfileStore":
        """Read and decode the store at path.

        Raises:
            StoreMissingError: If the file does not exist.
            StoreIOError: If the file exists but cannot be read.
            MalformedEntry: If the file is not valid UTF-8 text.
        """
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise StoreMissingError(f"{path}: no such file") from e
        except OSError as e:
            raise StoreIOError(f"cannot read {path}: {e}") from e

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedEntry(f"{path} is not valid UTF-8: {e}") from e

        return cls(codec.decode(text))

    def save(self, path: Path) -> None:
        """Encode and write the whole store to path, creating parent directories.

        Raises:
            StoreIOError: If the directory or file cannot be written.
        """
        try:
            atomic_write_text(codec.encode(self.profiles), path)
        except OSError as e:
            raise StoreIOError(f"cannot write {path}: {e}") from e

    def find(self, name: str) -> Profile | None:
        """Return the first profile named exactly ``name``, or None."""
        for profile in self.profiles:
            if profile.name == name:
                return profile
        return None

    def append(self, profile: Profile) -> None:
        """Add a profile at the end. Duplicate names are accepted."""
        self.profiles.append(profile)

    def remove(self, name: str) -> Profile:
        """Remove and return the first profile named exactly ``name``.

        Raises:
            ProfileNotFound: If no profile matches; the store is unchanged.
        """
        for index, profile in enumerate(self.profiles):
            if profile.name == name:
                return self.profiles.pop(index)
        raise ProfileNotFound(name)


def initialize_default(path: Path) -> bool:
    """Create a store with one example profile unless a file already exists.

    Existing files are left untouched whatever their content.

    Returns:
        True if a new store was written, False if one already existed.

    Raises:
        StoreIOError: If the path cannot be checked or the store cannot be written.
    """
    try:
        exists = path.exists()
    except OSError as e:
        raise StoreIOError(f"cannot check {path}: {e}") from e
    if exists:
        return False
    store = ProfileStore([replace(EXAMPLE_PROFILE)])
    store.save(path)
    return True
