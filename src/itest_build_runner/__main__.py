"""Module entry point for `python -m itest_build_runner`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
