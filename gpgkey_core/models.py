# gpgkey_core/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from .utils import iso


def _now_like(ref: datetime) -> datetime:
    # match naive/aware so the comparison never raises
    return datetime.now(timezone.utc) if ref.tzinfo else datetime.now()


@dataclass(frozen=True)
class SubKey:
    key_id: str
    expiration: Optional[datetime] = None


@dataclass(frozen=True)
class KeyRecord:
    """
    Read-only view of one key as reported by the key listing tool.

    Dates are None when the listing did not carry them or they could not
    be parsed. `raw` is the exact text the record was parsed from.
    """
    fingerprint: str
    raw: str
    key_creation: Optional[datetime] = None
    key_expiration: Optional[datetime] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    subkey: Optional[SubKey] = None

    @property
    def sub_key(self) -> Optional[str]:
        return self.subkey.key_id if self.subkey else None

    @property
    def sub_key_expiration(self) -> Optional[datetime]:
        return self.subkey.expiration if self.subkey else None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.key_expiration is None:
            return False
        return self.key_expiration <= (now or _now_like(self.key_expiration))

    def expires_within(self, window: timedelta, now: Optional[datetime] = None) -> bool:
        if self.key_expiration is None:
            return False
        return self.key_expiration <= (now or _now_like(self.key_expiration)) + window

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fingerprint": self.fingerprint,
            "key_creation": iso(self.key_creation),
            "key_expiration": iso(self.key_expiration),
            "user_id": self.user_id,
            "user_name": self.user_name,
            "sub_key": self.sub_key,
            "sub_key_expiration": iso(self.sub_key_expiration),
            "raw": self.raw,
        }

    def format(self) -> str:
        """Multi-line diagnostic rendering. Not meant to be parsed back."""
        rows = [
            ("Key", self.fingerprint),
            ("KeyCreation", self.key_creation),
            ("KeyExpiration", self.key_expiration),
            ("UserId", self.user_id),
            ("UserName", self.user_name),
            ("SubKey", self.sub_key),
            ("SubKeyExpiration", self.sub_key_expiration),
            ("Raw", self.raw),
        ]
        return "".join(f"{label}: {'' if value is None else value}\n" for label, value in rows)

    def __str__(self) -> str:
        return self.format()
