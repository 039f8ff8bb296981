"""Entry point for ``python -m notelinks``."""

from notelinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
