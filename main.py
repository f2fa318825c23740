"""Run the documentation checker from a source checkout."""

from doccheck.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
