"""Command line interface for switching git identity profiles.

Run with: python -m gist --help
"""

import argparse
import sys
from collections.abc import Callable

from gist import __version__
from gist.activation import activate
from gist.config import Config, get_config
from gist.errors import GistError, StoreMissingError
from gist.git import GitClient, IdentityBackend
from gist.models import Profile
from gist.resolution import resolve_active
from gist.store import ProfileStore, initialize_default


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def prompt_profile(read: Callable[[str], str] | None = None) -> Profile:
    """Interactively ask for the four profile fields.

    End of input is tolerated only for the optional signing key.

    Raises:
        EOFError: If input ends before the email is entered.
        ValueError: If name, username or email is blank.
    """
    if read is None:
        read = input
    name = read("Enter profile name: ")
    username = read("Enter username (git user.name): ")
    email = read("Enter email (git user.email): ")
    try:
        signing_key = read("Enter signing key (optional): ")
    except EOFError:
        signing_key = ""
    return Profile.create(name, username, email, signing_key)


def cmd_init(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        initialize_default(config.config_path)
    except GistError as e:
        return _error(f"Error initializing config: {e}")
    print(f"Config initialized at {config.config_path}")
    return 0


def cmd_list(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        store = ProfileStore.load(config.config_path)
    except GistError as e:
        return _error(f"Failed to load config: {e}")
    print("available profiles:")
    for profile in store:
        print(f"  • {profile.name}\t({profile.email})")
    return 0


def cmd_info(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        store = ProfileStore.load(config.config_path)
    except GistError as e:
        return _error(f"Failed to load config: {e}")

    resolution = resolve_active(store, backend)
    print(f"current profile ({resolution.scope_label}):")
    matched = resolution.profile
    if matched is None:
        print("  (none)")
        return 0
    print(f"  name: {matched.name}")
    print(f"  user: {matched.display_name} <{matched.email}>")
    if matched.has_signing_key:
        print(f"  signingkey: {matched.signing_key}")
    return 0


def cmd_set(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        store = ProfileStore.load(config.config_path)
    except GistError as e:
        return _error(f"Failed to load config: {e}")

    profile = store.find(args.profile)
    if profile is None:
        return _error(f"Error: profile {args.profile} not found")

    try:
        result = activate(profile, backend)
    except GistError as e:
        return _error(f"Error: {e}")

    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    print(f"✔️  Set profile \"{profile.name}\" for repository {result.repo_root}")
    return 0


def cmd_add(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        store = ProfileStore.load(config.config_path)
    except StoreMissingError:
        store = ProfileStore()
    except GistError as e:
        return _error(f"Failed to load config: {e}")

    try:
        profile = prompt_profile()
    except (EOFError, ValueError) as e:
        return _error(f"Error: {str(e) or 'unexpected end of input'}")

    store.append(profile)
    try:
        store.save(config.config_path)
    except GistError as e:
        return _error(f"Failed to save config: {e}")
    print(f"Profile {profile.name} added.")
    return 0


def cmd_remove(args: argparse.Namespace, config: Config, backend: IdentityBackend) -> int:
    try:
        store = ProfileStore.load(config.config_path)
    except GistError as e:
        return _error(f"Failed to load config: {e}")

    try:
        store.remove(args.profile)
    except GistError as e:
        return _error(f"Error: {e}")

    try:
        store.save(config.config_path)
    except GistError as e:
        return _error(f"Failed to save config: {e}")
    print(f"Profile {args.profile} removed.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gist",
        description="Switch between named git identity profiles",
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser("init", help="Create default config if missing").set_defaults(func=cmd_init)
    subparsers.add_parser("list", help="Show all configured profiles").set_defaults(func=cmd_list)
    subparsers.add_parser("info", help="Show current active profile").set_defaults(func=cmd_info)

    set_parser = subparsers.add_parser("set", help="Activate a profile for the current repository")
    set_parser.add_argument("profile", help="Profile name")
    set_parser.set_defaults(func=cmd_set)

    subparsers.add_parser("add", help="Interactively add a new profile").set_defaults(func=cmd_add)

    remove_parser = subparsers.add_parser("remove", help="Delete a profile from config")
    remove_parser.add_argument("profile", help="Profile name")
    remove_parser.set_defaults(func=cmd_remove)

    return parser


def main(argv: list[str] | None = None, backend: IdentityBackend | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = get_config()
    if backend is None:
        backend = GitClient(config.git_path, verbose=config.verbose, timeout=config.git_timeout)
    return args.func(args, config, backend)


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
