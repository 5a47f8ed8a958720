"""Converts trial balance PDFs into ledger tables."""
from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional, Tuple

import pandas as pd

from .constants import LEDGER_COLUMNS
from .exceptions import ExtractionError
from .extractor import extract_text
from .models import ParsedData
from .parser import TrialBalanceParser

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = ["source_file", "date_range", "customer_name"] + LEDGER_COLUMNS


def combine_results(results: List[Tuple[str, ParsedData]]) -> pd.DataFrame:
  """Stack the entries of several documents, tagged with their source file."""
  frames = []
  for path, data in results:
    df = data.to_dataframe()
    if df.empty:
      continue
    df.insert(0, 'customer_name', data.customer_name)
    df.insert(0, 'date_range', data.date_range)
    df.insert(0, 'source_file', os.path.basename(path))
    frames.append(df)

  if not frames:
    return pd.DataFrame(columns=OUTPUT_COLUMNS)
  return pd.concat(frames, ignore_index=True)[OUTPUT_COLUMNS]


class TrialBalanceConverter:
  def __init__(self, parser: Optional[TrialBalanceParser] = None):
    self.parser = parser or TrialBalanceParser()

  def convert_single(self, pdf_path: str) -> ParsedData:
    """Extract and parse one PDF. Raises ExtractionError if it cannot be read."""
    content = extract_text(pdf_path)
    return self.parser.parse(content)

  def convert_multiple(self, pdf_paths: List[str], progress_callback: Optional[Callable] = None) -> pd.DataFrame:
    """Process multiple PDF files and combine their ledger entries.

    A file that cannot be read is logged and skipped.
    """
    results = []
    total_files = len(pdf_paths)

    for i, path in enumerate(pdf_paths):
      if progress_callback:
        progress_callback(i * 100 // total_files, f'Processing {os.path.basename(path)}...')

      try:
        data = self.convert_single(path)
      except ExtractionError as e:
        logger.error(f"Error processing {path}: {e}")
        continue

      logger.info(f"{path}: {len(data.ledger_entries)} ledger entries")
      results.append((path, data))

    if progress_callback:
      progress_callback(100, 'Processing complete!')

    return combine_results(results)

  def convert(self, pdf_paths: List[str], csv_path: str) -> pd.DataFrame:
    """Process multiple PDF files and write the combined entries to a CSV."""
    results = self.convert_multiple(pdf_paths)
    results.to_csv(csv_path, index=False)
    return results
