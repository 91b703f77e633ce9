"""Command-line interface for linkboard."""

from linkboard.cli.app import main
from linkboard.cli.parser import build_parser

__all__ = ["build_parser", "main"]
