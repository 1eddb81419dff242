import logging
import os
import typing as tp

from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        # getLevelName maps registered names (including WARN and NOTSET) to ints
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    @classmethod
    def load(cls, level: tp.Optional[str] = None) -> "Settings":
        level = (
            level or os.getenv("FPUTIL_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
        )
        log_format = os.getenv("FPUTIL_LOG_FORMAT") or DEFAULT_LOG_FORMAT

        return cls(LOG_LEVEL=level, LOG_FORMAT=log_format)
