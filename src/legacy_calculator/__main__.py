"""Entry point for `python -m legacy_calculator`."""

from legacy_calculator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
