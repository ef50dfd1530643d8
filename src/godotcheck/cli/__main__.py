"""Main entry point for godotcheck CLI when run as a module."""

from godotcheck.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
