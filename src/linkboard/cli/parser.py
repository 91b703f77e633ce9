"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("linkboard")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linkboard")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Reconcile the remote records with a desired-state file")
    sync_parser.add_argument("--config", default="./linkboard.json", help="Path to linkboard.json")
    sync_parser.add_argument("--state", required=True, help="Path to the desired-state JSON payload")
    mode = sync_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    sync_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    show_parser = subparsers.add_parser("show", help="Print the remote state as JSON")
    show_parser.add_argument("--config", default="./linkboard.json", help="Path to linkboard.json")
    show_parser.add_argument("--profile-page-id", default=None, help="Profile page id (overrides config)")
    show_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
