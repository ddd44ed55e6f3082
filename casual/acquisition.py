# casual/acquisition.py

from dataclasses import dataclass
from typing import Any, Callable, Optional

from casual.errors import ConsoleIOError, ParseError
from casual.io_adapter import IOAdapter
from casual.parsing import parse_value
from casual.session import AcquisitionSession
from core.config_loader import get_config
from core.config_schema import CasualConfig
from io_adapters.console_adapter import ConsoleAdapter
from utils.structured_logger import log_event

REDACTED = "***"


@dataclass(frozen=True)
class AcquisitionPlan:
    """Snapshot of an Input taken when it is consumed."""
    prompt: str
    parser: Callable[[str], Any]
    has_default: bool = False
    default: Any = None
    validator: Optional[Callable[[Any], bool]] = None


def _redact(value):
    return None if value is None else REDACTED


def _record(session: AcquisitionSession, config: CasualConfig, step: str,
            input_data=None, output_data=None, outcome: str = "ok", extra: dict | None = None):
    session.add_history(step, input_data=input_data, output_data=output_data, extra=extra)
    if config.logging.enabled:
        if not config.logging.log_input:
            input_data = _redact(input_data)
            output_data = _redact(output_data)
        log_event(
            session.acquisition_id,
            step,
            input_data=input_data,
            output_data=output_data,
            outcome=outcome,
            extra={"attempt": session.attempts, **(extra or {})},
            log_file=config.logging.log_file,
            max_bytes=config.logging.max_bytes,
        )


def acquire(plan: AcquisitionPlan, io_adapter: IOAdapter | None = None,
            config: CasualConfig | None = None, session: AcquisitionSession | None = None):
    """
    Prompts until a value is produced. Empty input returns the default (if
    any) without validation; parse and validation failures print an error
    line and prompt again. There is no retry limit. Only ConsoleIOError
    escapes.
    """
    io_adapter = io_adapter or ConsoleAdapter()
    config = config or get_config()
    session = session or AcquisitionSession()

    while True:
        session.start_attempt()
        try:
            raw = io_adapter.collect(plan.prompt)
        except ConsoleIOError as e:
            _record(session, config, "io_error", outcome="fatal", extra={"error": str(e)})
            raise

        text = raw.strip()
        if not text:
            if plan.has_default:
                _record(session, config, "default_used", output_data=plan.default)
                return plan.default
            _record(session, config, "empty_input", outcome="retry")
            continue

        try:
            value = parse_value(plan.parser, text)
        except ParseError as e:
            io_adapter.prompt(f"{config.error_prefix}{e}")
            _record(session, config, "parse_error", input_data=text, outcome="retry", extra={"error": str(e)})
            continue

        if plan.validator is not None and not plan.validator(value):
            io_adapter.prompt(f"{config.error_prefix}{config.invalid_input_message}")
            _record(session, config, "validation_failed", input_data=text, outcome="retry")
            continue

        _record(session, config, "accepted", input_data=text, output_data=value)
        return value
