from __future__ import annotations

from sizearg.cli import main

raise SystemExit(main())
