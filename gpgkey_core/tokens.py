"""
gpgkey_core.tokens
------------------
Line splitting and tokenization for key listing text.

- Bracket characters are annotations, never field boundaries: they are
  removed before anything is split.
- Lines break on CR, LF or CRLF; blank lines are dropped.
- Tokens are runs of non-space characters on a single line.
"""

from __future__ import annotations
import re
from typing import Iterable, List, Optional, Sequence

_LINE_BREAK = re.compile(r"[\r\n]+")


def strip_brackets(text: str) -> str:
    return text.replace("[", "").replace("]", "")


def split_lines(text: str) -> List[str]:
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def split_spaces(line: str) -> List[str]:
    return [tok for tok in line.split(" ") if tok]


class LabeledTokens:
    """
    Bounds-checked view over a tokenized line.

    Missing positions and missing labels come back as None instead of
    raising IndexError.
    """

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def index_of(self, labels: Iterable[str]) -> Optional[int]:
        wanted = {label.lower() for label in labels}
        for i, tok in enumerate(self.tokens):
            if tok.lower() in wanted:
                return i
        return None

    def after(self, *labels: str) -> Optional[str]:
        i = self.index_of(labels)
        if i is None:
            return None
        return self.at(i + 1)

    @classmethod
    def from_line(cls, line: str) -> "LabeledTokens":
        return cls(split_spaces(line))
