from __future__ import annotations

from .cli.analyze_csv import main

if __name__ == "__main__":
    raise SystemExit(main())
