"""Module entry point for `python -m cloud_api_manager`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
