"""Backup do banco de horas em CSV.

Writes three files (punch records, hour-bank balances, employees) into
`BACKUP_DIR` (default: ./backups).
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "hour_bank"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from hour_bank.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    out_dir = Path(getattr(settings, "BACKUP_DIR", "backups"))
    if not out_dir.is_absolute():
        out_dir = REPO_ROOT / out_dir

    for path in container.backup_service.write_backup(out_dir):
        print(f"OK: Backup created: {path}")


if __name__ == "__main__":
    main()
