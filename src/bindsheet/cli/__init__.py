from bindsheet.cli.main import cli

__all__ = ["cli"]
