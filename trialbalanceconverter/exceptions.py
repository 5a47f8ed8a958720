"""Custom exceptions for the trial balance converter."""
from __future__ import annotations


class TrialBalanceError(RuntimeError):
  """Base error for the trial balance converter."""


class ExtractionError(TrialBalanceError):
  """Raised when the text of a PDF cannot be extracted."""
