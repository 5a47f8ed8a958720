"""Result containers for a parsed trial balance."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

import pandas as pd

from .constants import LEDGER_COLUMNS, LEDGER_LABELS


@dataclass(frozen=True)
class LedgerEntry:
  """One account row of the ledger table.

  Amount columns are kept exactly as printed. ``None`` marks a column that
  was missing on the row, which is not the same as an empty string.
  """

  account_code: str
  description: str = ""
  debit: Optional[str] = None
  credit: Optional[str] = None
  balance_debit: Optional[str] = None
  balance_credit: Optional[str] = None

  def to_dict(self) -> Dict[str, Optional[str]]:
    return asdict(self)

  def __str__(self) -> str:
    values = self.to_dict()
    return "\n".join(
      f"{LEDGER_LABELS[name]}: {values[name] if values[name] is not None else ''}"
      for name in LEDGER_COLUMNS
    )


@dataclass
class ParsedData:
  """Document level fields plus the ledger rows, in document order."""

  date_range: Optional[str] = None
  customer_name: Optional[str] = None
  page_number: Optional[str] = None
  ledger_entries: List[LedgerEntry] = field(default_factory=list)

  @property
  def page_count(self) -> Optional[str]:
    """The ``M`` of an ``N/M`` page number."""
    if not self.page_number or "/" not in self.page_number:
      return None
    return self.page_number.split("/", 1)[1].strip()

  def to_dict(self) -> Dict[str, object]:
    return {
      "date_range": self.date_range,
      "customer_name": self.customer_name,
      "page_number": self.page_number,
      "page_count": self.page_count,
      "ledger_entries": [entry.to_dict() for entry in self.ledger_entries],
    }

  def to_dataframe(self) -> pd.DataFrame:
    rows = [entry.to_dict() for entry in self.ledger_entries]
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)
