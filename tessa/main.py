"""Entry point for the Tessa path diagnostics CLI.

This module exposes a Typer-powered command-line interface that prints the
state directory, config file, credential store and gateway settings Tessa
resolves from the environment and any legacy installs on disk.
"""

from tessa.cli.app import app


if __name__ == "__main__":
    app()
