# casual/confirmation.py

from casual.input_builder import Input
from casual.io_adapter import IOAdapter
from core.config_loader import get_config
from core.config_schema import CasualConfig


def _normalize(answer: str) -> str:
    return answer.strip().lower()


def confirm(text: str, io_adapter: IOAdapter | None = None, config: CasualConfig | None = None) -> bool:
    """
    Prompts the user for confirmation (yes/no).

        if not casual.confirm("Are you sure you want to continue?"):
            raise SystemExit("Aborted!")

    Anything other than y/yes/n/no (any case) is rejected and asked again;
    an empty answer means no.
    """
    config = config or get_config()
    accepted = set(config.confirm.accepted)
    affirmative = set(config.confirm.affirmative)

    return (
        Input(str)
        .prompt(text)
        .suffix(config.confirm.suffix)
        .default(config.confirm.default)
        .matches(lambda answer: _normalize(answer) in accepted)
        .check(lambda answer: _normalize(answer) in affirmative, io_adapter=io_adapter, config=config)
    )
