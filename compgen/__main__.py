"""
Component Scaffold - CLI Entry Point

    python -m compgen <name> <directory>

or when installed as a package:

    compgen <name> <directory>
"""

from compgen.cli.main_commands import app


def main() -> None:
    """Main entry point for the compgen CLI tool."""
    app()


if __name__ == "__main__":
    main()
