"""Entry point for ``python -m turncue``."""

from turncue.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
