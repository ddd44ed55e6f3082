# casual/session.py

from datetime import datetime, timezone
import uuid


def _now():
    return datetime.now(timezone.utc)


class AcquisitionSession:
    """
    Tracks a single terminal call (get/check). A new session is created for
    every call, nothing is carried over between calls.
    """
    def __init__(self, acquisition_id: str | None = None):
        self.acquisition_id = acquisition_id or str(uuid.uuid4())
        self.created_at = _now()
        self.updated_at = _now()
        self.attempts = 0
        self.history = []  # chronological list of loop steps

    def start_attempt(self):
        self.attempts += 1
        self.touch()

    def add_history(self, step: str, input_data=None, output_data=None, extra: dict | None = None):
        entry = {
            "step": step,
            "attempt": self.attempts,
            "input": input_data,
            "output": output_data,
            "extra": extra or {},
            "timestamp": _now().isoformat(),
        }
        self.history.append(entry)
        self.touch()

    def steps(self) -> list[str]:
        return [entry["step"] for entry in self.history]

    def touch(self):
        self.updated_at = _now()

    def to_dict(self):
        return {
            "acquisition_id": self.acquisition_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "attempts": self.attempts,
            "history": self.history,
        }
