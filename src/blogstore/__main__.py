"""Allow running blogstore with ``python -m blogstore``."""

from blogstore.interfaces.cli.app import run_cli

if __name__ == "__main__":
    run_cli()
