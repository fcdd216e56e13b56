from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load .env early (no error if missing)
load_dotenv()

PACKAGE_DIR = Path(__file__).parent
DEFAULT_TRAIN_DATA = PACKAGE_DIR / "data" / "train_data.txt"
DEFAULT_AUDIT_DIR = PACKAGE_DIR.parent / "audit"


@dataclass(frozen=True)
class RailyardConfig:
    train_data_path: str = os.getenv("RAILYARD_TRAIN_DATA", str(DEFAULT_TRAIN_DATA))
    # Optional JSON file with stations/routes/edges; built-in tables when unset
    network_path: str | None = os.getenv("RAILYARD_NETWORK_FILE")
    platforms: int = int(os.getenv("RAILYARD_PLATFORMS", "3"))
    total_tracks: int = int(os.getenv("RAILYARD_TOTAL_TRACKS", "5"))
    deadlock_delay: int = int(os.getenv("RAILYARD_DEADLOCK_DELAY", "5"))
    audit_dir: str = os.getenv("RAILYARD_AUDIT_DIR", str(DEFAULT_AUDIT_DIR))
