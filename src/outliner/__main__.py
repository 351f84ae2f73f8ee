"""Allow running outliner with python -m outliner."""

from outliner.cli import cli

if __name__ == "__main__":
    cli()
