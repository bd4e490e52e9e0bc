# gpgkey_core/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import os

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParserConfig:
    dayfirst: bool = False      # "01/02/2020" -> 1 Feb instead of 2 Jan
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


def load_parser_config(config: dict | None = None) -> ParserConfig:
    """
    Resolve parser settings: explicit dict first, then environment, then defaults.

        dayfirst   GPGKEY_DAYFIRST
        log_level  GPGKEY_LOG_LEVEL
        log_file   GPGKEY_LOG_FILE
    """
    config = config or {}

    dayfirst = config.get("dayfirst")
    if dayfirst is None:
        dayfirst = os.getenv("GPGKEY_DAYFIRST", "0")

    return ParserConfig(
        dayfirst=_flag(dayfirst),
        log_level=config.get("log_level") or os.getenv("GPGKEY_LOG_LEVEL", "INFO"),
        log_file=config.get("log_file") or os.getenv("GPGKEY_LOG_FILE") or None,
    )
