"""Main entry point for scriptshot CLI when run as a module."""

from scriptshot.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
