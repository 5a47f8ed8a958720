"""Page text extraction with pdfplumber."""
from __future__ import annotations

import logging

import pdfplumber

from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


def extract_text(pdf_path: str) -> str:
  """Return the text of every page in reading order, one line break per page end."""
  pages = []
  try:
    with pdfplumber.open(pdf_path) as pdf:
      for page_num, page in enumerate(pdf.pages):
        text = page.extract_text() or ""
        logger.debug(f"Page {page_num + 1}: extracted {len(text)} characters")
        pages.append(text + "\n")
  except Exception as e:
    raise ExtractionError(f"Could not extract text from {pdf_path}: {e}") from e

  logger.info(f"Extracted {len(pages)} pages from {pdf_path}")
  return "".join(pages)
