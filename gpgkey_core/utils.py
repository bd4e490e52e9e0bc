"""
gpgkey_core.utils
-----------------
Small helpers for the field extractors: lenient date parsing of the tool's
locale-dependent output, key-id extraction and ISO rendering.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

# Two defaults that differ in year, month and day. A token that leaves any
# of them out parses differently against each and is rejected.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(token: Optional[str], dayfirst: bool = False) -> Optional[datetime]:
    if not token:
        return None
    try:
        first, second = (date_parser.parse(token, default=d, dayfirst=dayfirst) for d in _DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return first


def strip_annotation(token: str) -> str:
    # "2025-01-01E" -> "2025-01-01"
    end = len(token)
    while end > 0 and not token[end - 1].isdigit():
        end -= 1
    return token[:end]


def key_id(token: str) -> str:
    # "2048R/ABCD1234" -> "ABCD1234"
    return token.rsplit("/", 1)[-1] or token


def iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt is not None else None
