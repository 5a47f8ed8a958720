"""Parses the extracted text of a trial balance report.

The document fields and the ledger table are read independently from the
same line sequence. The table starts after the first line holding all three
column header markers; every later line that survives the furniture filter
is handed to the :class:`~trialbalanceconverter.classifier.LineClassifier`.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .classifier import LineClassifier
from .constants import (
  ACCOUNT_CODE_MARKER,
  DEBIT_MARKER,
  DESCRIPTION_MARKER,
  GRAND_TOTAL_PREFIX,
  PAGE_CAPTION,
  REPORT_CAPTION,
)
from .fields import find_customer_name, find_date_range, find_page_number
from .models import LedgerEntry, ParsedData

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"[\r\n]+")


@dataclass(frozen=True)
class Markers:
  """Literal labels of the report layout (case and diacritic sensitive)."""

  account_code: str = ACCOUNT_CODE_MARKER
  description: str = DESCRIPTION_MARKER
  debit: str = DEBIT_MARKER
  report_caption: str = REPORT_CAPTION
  page_caption: str = PAGE_CAPTION
  grand_total: str = GRAND_TOTAL_PREFIX

  def is_header(self, line: str) -> bool:
    return self.account_code in line and self.description in line and self.debit in line

  def is_furniture(self, line: str) -> bool:
    """Repeated captions and the grand total row are not data rows."""
    return (
      self.report_caption in line
      or self.page_caption in line
      or line.startswith(self.grand_total)
    )


def split_lines(content: str) -> List[str]:
  return [line for line in LINE_BREAK_RE.split(content) if line]


class TrialBalanceParser:
  def __init__(self, markers: Optional[Markers] = None, classifier: Optional[LineClassifier] = None):
    self.markers = markers or Markers()
    self.classifier = classifier or LineClassifier()

  def parse(self, content: str) -> ParsedData:
    """Parse the full document text. Never raises; misses are left empty."""
    lines = split_lines(content)
    data = ParsedData()

    data.date_range = find_date_range(content)
    data.customer_name = find_customer_name(lines, data.date_range)
    data.page_number = find_page_number(lines, self.markers.page_caption)

    data.ledger_entries = self.parse_entries(lines)
    logger.info(f"Parsed {len(data.ledger_entries)} ledger entries from {len(lines)} lines")
    return data

  def find_header_index(self, lines: Sequence[str]) -> Optional[int]:
    for i, line in enumerate(lines):
      if self.markers.is_header(line):
        logger.info(f"Found header line at {i}: {line.strip()}")
        return i
    return None

  def parse_entries(self, lines: Sequence[str]) -> List[LedgerEntry]:
    header_idx = self.find_header_index(lines)
    if header_idx is None:
      logger.info("No ledger table header found")
      return []

    entries = []
    for line in lines[header_idx + 1:]:
      line = line.strip()
      if not line:
        continue
      if self.markers.is_furniture(line):
        logger.debug(f"Skipping table furniture: {line}")
        continue

      entry = self.classifier.classify_line(line.split())
      if entry is not None:
        entries.append(entry)
    return entries


def parse(content: str) -> ParsedData:
  """Parse with the default markers."""
  return TrialBalanceParser().parse(content)
