"""Module entrypoint for ``python -m linkboard``."""

from linkboard.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
