"""
gpgkey_core.parser
------------------
Turns the console listing printed by the key listing tool into KeyRecord values.

A single key block looks like:

    pub   2048R/ABCD1234 2020-01-01 [expires: 2025-01-01]
    uid                  Jane Doe <jane@example.com>
    sub   2048R/EF567890 2025-01-01

- parse_key(): one block -> KeyRecord, MalformedInputError when the summary
  line or its fingerprint is missing
- parse_listing(): full multi-key output -> list of KeyRecord
- split_listing(): full output -> verbatim per-key text blocks

Date and identity fields degrade to None instead of failing the parse; the
tool's output differs across versions and locales.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from datetime import datetime

from .config import ParserConfig
from .errors import MalformedInputError
from .logger import get_logger
from .models import KeyRecord, SubKey
from .tokens import LabeledTokens, split_lines, split_spaces, strip_brackets
from .utils import key_id, parse_date, strip_annotation

log = get_logger("gpgkey.parser")

EXPIRY_LABELS = ("expires:", "expired:")
BLOCK_TAGS = ("pub", "sec")
SUBKEY_TAGS = ("sub", "ssb")


# --------- summary ("pub") line ----------
def _key_dates(tokens: LabeledTokens, dayfirst: bool) -> Tuple[Optional[datetime], Optional[datetime]]:
    labeled = tokens.after(*EXPIRY_LABELS)
    if labeled is not None:
        return (parse_date(tokens.at(2), dayfirst),
                parse_date(strip_annotation(labeled), dayfirst))

    if len(tokens) >= 6:
        return (parse_date(tokens.at(2), dayfirst),
                parse_date(strip_annotation(tokens.at(5)), dayfirst))

    # single date on the line: the tool does not say which one it is
    return None, parse_date(tokens.at(2), dayfirst)


# --------- identity ("uid") line ----------
def parse_identity(line: str) -> Tuple[Optional[str], Optional[str]]:
    """Return (user_name, user_id) from an identity line."""
    user_name = None
    user_id = None

    lt = line.find("<")
    marker = line.find("uid")
    if marker != -1 and (lt == -1 or marker < lt):
        start = marker + len("uid")
        user_name = (line[start:lt] if lt != -1 else line[start:]).strip() or None

    if lt != -1:
        gt = line.find(">", lt + 1)
        if gt != -1:
            user_id = line[lt + 1:gt] or None

    return user_name, user_id


# --------- sub-key ("sub") line ----------
def _sub_key(lines: List[str], dayfirst: bool) -> Optional[SubKey]:
    # first sub/ssb line after the summary; extra uid lines are skipped
    tokens = next((t for t in map(LabeledTokens.from_line, lines) if t.at(0) in SUBKEY_TAGS), None)
    if tokens is None or len(tokens) < 2:
        return None
    return SubKey(key_id=key_id(tokens.at(1)),
                  expiration=parse_date(tokens.at(2), dayfirst))


def parse_key(raw: str, config: Optional[ParserConfig] = None) -> KeyRecord:
    """
    Parse one key block.

    Raises:
        MalformedInputError: no non-empty lines, or the summary line has no
            fingerprint token.
    """
    if not isinstance(raw, str):
        raise TypeError(f"expected str, got {type(raw).__name__}")
    cfg = config or ParserConfig()

    lines = split_lines(strip_brackets(raw))
    if not lines:
        raise MalformedInputError("lines: input has no non-empty lines", stage="lines")

    pub = LabeledTokens.from_line(lines[0])
    if len(pub) < 2:
        raise MalformedInputError(
            f"pub: expected key type and fingerprint, got {len(pub)} token(s): {lines[0]!r}",
            stage="pub",
        )

    creation, expiration = _key_dates(pub, cfg.dayfirst)

    user_name = user_id = None
    if len(lines) > 1:
        user_name, user_id = parse_identity(lines[1])

    subkey = _sub_key(lines[1:], cfg.dayfirst)

    rec = KeyRecord(
        fingerprint=key_id(pub.at(1)),
        raw=raw,
        key_creation=creation,
        key_expiration=expiration,
        user_id=user_id,
        user_name=user_name,
        subkey=subkey,
    )
    if rec.key_creation is None and rec.key_expiration is None:
        log.debug(f"[PARSE] {rec.fingerprint}: no usable dates on {lines[0]!r}")
    if len(lines) > 1 and rec.user_id is None:
        log.debug(f"[PARSE] {rec.fingerprint}: no user id on {lines[1]!r}")
    return rec


# --------- multi-key listing ----------
def _is_block_start(line: str) -> bool:
    tokens = split_spaces(strip_brackets(line).strip())
    return bool(tokens) and tokens[0] in BLOCK_TAGS


def split_listing(text: str) -> List[str]:
    """
    Split full listing output into per-key blocks.

    Keyring header lines before the first key are dropped. Each block is a
    verbatim slice of `text` with trailing blank lines removed.
    """
    blocks: List[List[str]] = []
    for line in text.splitlines(keepends=True):
        if _is_block_start(line):
            blocks.append([line])
        elif blocks:
            blocks[-1].append(line)

    out = []
    for block in blocks:
        while block and not block[-1].strip():
            block.pop()
        out.append("".join(block))
    return out


def parse_listing(text: str, config: Optional[ParserConfig] = None, strict: bool = False) -> List[KeyRecord]:
    cfg = config or ParserConfig()
    records = []
    for block in split_listing(text):
        try:
            records.append(parse_key(block, cfg))
        except MalformedInputError as e:
            if strict:
                raise
            log.warning(f"[PARSE] skipping block ({e.stage}): {e}")
    log.debug(f"[PARSE] listing -> {len(records)} key(s)")
    return records
