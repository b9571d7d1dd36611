"""Entry point for the appbuilder CLI.

Usage:
    python -m appbuilder --type=release

Or via installed entry point:
    appbuilder --type=release
"""

from appbuilder.interfaces.cli import app


def main() -> None:
    """Run the appbuilder CLI application."""
    app()


if __name__ == "__main__":
    main()
