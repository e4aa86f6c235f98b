from __future__ import annotations

from pathlib import Path


class ValueReader:
    def read(self, values_file: Path) -> list[str]:
        if not values_file.is_file():
            raise SystemExit(f"Missing values file: {values_file}")

        values: list[str] = []
        for raw_line in values_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            values.append(line)
        return values
