"""Document level fields: reporting period, customer name and page number."""
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from .constants import DATE_RANGE_PATTERN, PAGE_CAPTION, PAGE_NUMBER_PATTERN

logger = logging.getLogger(__name__)

DATE_RANGE_RE = re.compile(DATE_RANGE_PATTERN)
PAGE_NUMBER_RE = re.compile(PAGE_NUMBER_PATTERN)


def find_date_range(content: str) -> Optional[str]:
  match = DATE_RANGE_RE.search(content)
  return match.group().strip() if match else None


def find_customer_name(lines: Sequence[str], date_range: Optional[str]) -> Optional[str]:
  """The first non-blank line after the line that carries the date range."""
  if date_range is None:
    return None
  date_line_idx = next((i for i, line in enumerate(lines) if date_range in line), None)
  if date_line_idx is None:
    return None
  for line in lines[date_line_idx + 1:]:
    if line.strip():
      return line.strip()
  return None


def find_page_number(lines: Sequence[str], page_caption: str = PAGE_CAPTION) -> Optional[str]:
  """Return ``N/M`` from the first page caption line, e.g. ``Sayfa No : 3 / 10``."""
  page_line = next((line for line in lines if page_caption in line), None)
  if not page_line:
    return None
  match = PAGE_NUMBER_RE.search(page_line)
  if not match:
    logger.debug(f"Page caption without page counter: {page_line.strip()}")
    return None
  return re.sub(r"\s+", "", match.group())
