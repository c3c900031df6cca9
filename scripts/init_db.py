from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.school_attendance.school_attendance.database.bootstrap import ensure_indexes, list_collections
from src.school_attendance.school_attendance.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection.get_instance(DBConfig(uri=db_config["uri"], database=db_config["database"]))
    db = conn.database()
    ensure_indexes(db)
    collections = list_collections(db)
    print(f"OK: Indexes ready -> {db_config.get('database')} (collections={len(collections)})")
    conn.close()


if __name__ == "__main__":
    main()
