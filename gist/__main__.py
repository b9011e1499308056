"""Allow running as ``python -m gist``."""

from gist.cli.main import main_entry

if __name__ == "__main__":
    main_entry()
