# core/config_schema.py

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List
from pathlib import Path

from core.paths import STRUCT_LOG_FILE
from utils.structured_logger import MAX_BYTES


class ConfirmConfig(BaseModel):
    suffix: str = " [y/N] "
    default: str = "n"
    accepted: List[str] = ["n", "no", "y", "yes"]
    affirmative: List[str] = ["y", "yes"]

    @field_validator("default", "accepted", "affirmative")
    def lowercase_answers(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return [a.strip().lower() for a in v]

    @field_validator("accepted")
    def must_accept_something(cls, v):
        if not v:
            raise ValueError("At least one accepted answer must be defined")
        return v

    @model_validator(mode="after")
    def answers_are_accepted(self):
        unknown = [a for a in self.affirmative if a not in self.accepted]
        if unknown:
            raise ValueError(f"affirmative answers not in accepted answers: {unknown}")
        if self.default not in self.accepted:
            raise ValueError(f"default answer '{self.default}' is not an accepted answer")
        return self


class LoggingConfig(BaseModel):
    enabled: bool = False
    # raw answers may be secrets typed at a prompt
    log_input: bool = False
    log_file: Path = STRUCT_LOG_FILE
    max_bytes: int = Field(MAX_BYTES, gt=0)


class CasualConfig(BaseModel):
    error_prefix: str = "Error: "
    invalid_input_message: str = "invalid input"
    confirm: ConfirmConfig = ConfirmConfig()
    logging: LoggingConfig = LoggingConfig()
