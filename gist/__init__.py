"""Git identity switcher: named user.name/user.email/signing-key profiles."""

__version__ = "v0.1.0"
