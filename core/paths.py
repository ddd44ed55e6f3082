# core/paths.py

import os
from pathlib import Path

# Base directory for all persistent data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Structured logging NDJSON file (rotated into an archive/ dir beside it)
STRUCT_LOG_DIR     = BASE_DATA_DIR / "logs"
STRUCT_LOG_FILE    = STRUCT_LOG_DIR / "acquisitions.ndjson"

# Optional JSON config and .env
DEFAULT_CONFIG_PATH = Path("config/casual.json")
DEFAULT_ENV_PATH    = Path(".env")
