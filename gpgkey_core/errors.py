# gpgkey_core/errors.py
from __future__ import annotations
from typing import Optional


class KeyParseError(Exception):
    pass


class MalformedInputError(KeyParseError):
    """
    Raised when a key block has no usable summary line or no fingerprint.

    `stage` names the step that failed ("lines" or "pub").
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage
