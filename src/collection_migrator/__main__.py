"""Module entry point for `python -m collection_migrator`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
