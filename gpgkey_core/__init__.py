"""
gpgkey_core
===========
Structured, read-only records parsed from key listing console output.

Provides:
- KeyRecord / SubKey value types
- parse_key() for one key block, parse_listing() for full listings
- MalformedInputError when a block has no summary line or fingerprint
"""

from .errors import KeyParseError, MalformedInputError
from .models import KeyRecord, SubKey
from .parser import parse_key, parse_listing, split_listing

__all__ = [
    "KeyParseError",
    "MalformedInputError",
    "KeyRecord",
    "SubKey",
    "parse_key",
    "parse_listing",
    "split_listing",
]
