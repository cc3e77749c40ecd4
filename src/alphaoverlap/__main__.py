"""Module entrypoint for `python -m alphaoverlap`."""

from __future__ import annotations

from alphaoverlap.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
