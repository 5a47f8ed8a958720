"""Line classifier for whitespace-collapsed trial balance rows.

Once a PDF table is flattened to text the column boundaries are gone and a
row such as::

    102 01 2023 KASA HESABI 3.168,81 0,00 3.168,81 0,00

is only a token sequence. The first token shaped like a locale formatted
amount (the *numeric anchor*) splits the row into a descriptive head and a
financial tail. The head is then tagged with a :class:`HeadShape` that
decides how many leading tokens belong to the account code; the tail is
assigned positionally to the debit, credit, balance debit and balance credit
columns.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Pattern, Sequence, Tuple

from .constants import AMOUNT_PATTERN, MIN_LINE_TOKENS, YEAR_MAX, YEAR_MIN
from .models import LedgerEntry

logger = logging.getLogger(__name__)

__all__ = [
  "HeadShape",
  "LineClassifier",
  "classify_head",
  "split_head",
  "split_amounts",
  "is_all_digits",
  "is_amount",
]

_AMOUNT_RE = re.compile(AMOUNT_PATTERN)


class HeadShape(Enum):
  EMPTY = "empty"
  SINGLE = "single"
  COMPOUND_WITH_YEAR = "compound_with_year"
  COMPOUND_TRIPLE = "compound_triple"
  COMPOUND_DOUBLE = "compound_double"
  SINGLE_WITH_DESCRIPTION = "single_with_description"


def is_all_digits(token: str) -> bool:
  return bool(token) and token.isdecimal()


def is_amount(token: str) -> bool:
  """Return True for tokens like ``3.168,81`` or ``81,5``."""
  return bool(_AMOUNT_RE.fullmatch(token))


def _looks_like_year(token: str) -> bool:
  # Years are read from ASCII digits only
  return len(token) == 4 and token.isascii() and is_all_digits(token) and YEAR_MIN <= int(token) <= YEAR_MAX


def classify_head(head: Sequence[str]) -> HeadShape:
  """Tag the tokens before the numeric anchor.

  A numeric second token makes the code compound. A third numeric token is
  taken into the code too, unless it reads as a year, in which case it opens
  the description (e.g. a dated narrative).
  """
  if not head:
    return HeadShape.EMPTY
  if len(head) == 1:
    return HeadShape.SINGLE
  if not is_all_digits(head[1]):
    return HeadShape.SINGLE_WITH_DESCRIPTION
  if len(head) >= 3 and _looks_like_year(head[2]):
    return HeadShape.COMPOUND_WITH_YEAR
  if len(head) >= 3 and is_all_digits(head[2]):
    return HeadShape.COMPOUND_TRIPLE
  return HeadShape.COMPOUND_DOUBLE


def split_head(shape: HeadShape, head: Sequence[str]) -> Tuple[str, str]:
  """Map a tagged head to ``(account_code, description)``."""
  if shape is HeadShape.EMPTY:
    return "", ""
  if shape is HeadShape.SINGLE:
    return head[0], ""
  if shape is HeadShape.SINGLE_WITH_DESCRIPTION:
    return head[0], " ".join(head[1:])
  if shape is HeadShape.COMPOUND_TRIPLE:
    return " ".join(head[:3]), " ".join(head[3:])
  # COMPOUND_WITH_YEAR and COMPOUND_DOUBLE both keep two code segments
  return " ".join(head[:2]), " ".join(head[2:])


def split_amounts(tail: Sequence[str]) -> Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]:
  """Assign amount tokens to (debit, credit, balance_debit, balance_credit).

  Missing trailing columns stay ``None``; anything past the fourth token is
  folded into the balance credit column.
  """
  debit = tail[0] if len(tail) > 0 else None
  credit = tail[1] if len(tail) > 1 else None
  balance_debit = tail[2] if len(tail) > 2 else None
  balance_credit = " ".join(tail[3:]) if len(tail) > 3 else None
  return debit, credit, balance_debit, balance_credit


class LineClassifier:
  """Turns the token list of one table line into a :class:`LedgerEntry`."""

  def __init__(self, amount_pattern: Optional[Pattern[str]] = None, min_tokens: int = MIN_LINE_TOKENS):
    self.amount_pattern = amount_pattern if amount_pattern is not None else _AMOUNT_RE
    self.min_tokens = min_tokens

  def find_numeric_start(self, tokens: Sequence[str]) -> Optional[int]:
    for idx, token in enumerate(tokens):
      if self.amount_pattern.fullmatch(token):
        return idx
    return None

  def classify_line(self, tokens: Sequence[str]) -> Optional[LedgerEntry]:
    """Classify one tokenised line; ``None`` when it is not a data row."""
    tokens = [t for t in tokens if t]
    if len(tokens) < self.min_tokens:
      logger.debug(f"Too few tokens ({len(tokens)}), skipping: {tokens}")
      return None

    numeric_start = self.find_numeric_start(tokens)
    if numeric_start is None:
      logger.debug(f"No amount token found, skipping: {tokens}")
      return None

    head = tokens[:numeric_start]
    shape = classify_head(head)
    account_code, description = split_head(shape, head)
    debit, credit, balance_debit, balance_credit = split_amounts(tokens[numeric_start:])

    logger.debug(f"Classified head {head} as {shape.value}")
    return LedgerEntry(
      account_code=account_code,
      description=description,
      debit=debit,
      credit=credit,
      balance_debit=balance_debit,
      balance_credit=balance_credit,
    )
