"""Module entry point for `python -m avsc_schema_store`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
