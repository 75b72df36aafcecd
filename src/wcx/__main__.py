"""Allow ``python -m wcx``."""

from wcx.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
