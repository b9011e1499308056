"""Error kinds raised by the profile store, codec and git collaborator."""


class GistError(Exception):
    """Base class for all gist errors."""


class StoreIOError(GistError):
    """The profile store could not be read or written."""


class StoreMissingError(StoreIOError):
    """The profile store file does not exist."""


class MalformedEntry(GistError):
    """The profile store contents could not be decoded."""


class ProfileNotFound(GistError):
    """No profile with the requested name exists."""

    def __init__(self, name: str):
        super().__init__(f"profile {name} not found")
        self.name = name


class NotARepository(GistError):
    """Activation was attempted outside a git working tree."""

    def __init__(self, message: str = "not inside a git repository"):
        super().__init__(message)


class ExternalToolError(GistError):
    """Writing an identity field through git failed."""
