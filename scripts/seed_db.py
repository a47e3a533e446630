from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.securehub.securehub.container import build_store
from src.securehub.securehub.database.bootstrap import ensure_admin_account


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    password = str(getattr(settings, "ADMIN_BOOTSTRAP_PASSWORD", ""))
    if not password:
        raise SystemExit("Set ADMIN_BOOTSTRAP_PASSWORD before seeding.")

    store, _ = build_store(
        backend=settings.STORE_BACKEND,
        rest_config=getattr(settings, "REST_STORE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    ensure_admin_account(store, password=password)
    print(f"OK: Reserved admin account ready ({settings.STORE_BACKEND} store)")


if __name__ == "__main__":
    main()
