"""Allow ``python -m division_builder``."""

from .cli import cli

if __name__ == "__main__":
    cli()
