# utils/structured_logger.py

import json
from pathlib import Path
from datetime import datetime, timezone
import shutil

from core.paths import STRUCT_LOG_FILE

MAX_BYTES = 5 * 1024 * 1024  # 5 MB before rotation; adjust as needed


def _archive_dir(log_file: Path) -> Path:
    return log_file.parent / "archive"


def _rotate_if_needed(log_file: Path, max_bytes: int):
    try:
        if log_file.exists() and log_file.stat().st_size >= max_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
            archive = _archive_dir(log_file)
            archive.mkdir(parents=True, exist_ok=True)
            archived = archive / f"{log_file.stem}_{timestamp}{log_file.suffix}"
            shutil.move(str(log_file), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def log_event(
    acquisition_id: str,
    step: str,
    input_data=None,
    output_data=None,
    outcome: str = "ok",
    extra: dict | None = None,
    log_file: Path = STRUCT_LOG_FILE,
    max_bytes: int = MAX_BYTES,
):
    """
    Appends a structured event as a single line JSON (NDJSON).
    """
    log_file = Path(log_file)
    entry = {
        "acquisition_id": acquisition_id,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    _rotate_if_needed(log_file, max_bytes)
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(line + "\n")


def read_events(acquisition_id: str = None, limit: int = 100, log_file: Path = STRUCT_LOG_FILE):
    """
    Reads the last `limit` events, optionally filtered by acquisition_id.
    """
    log_file = Path(log_file)
    if not log_file.exists():
        return []

    results = []
    with open(log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if acquisition_id is None or obj.get("acquisition_id") == acquisition_id:
                results.append(obj)
    return results[-limit:]
