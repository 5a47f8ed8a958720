"""
Trial Balance Converter Package

Turns the extracted text of trial balance ("mizan") PDF reports into
structured ledger entries.
"""

from .classifier import LineClassifier
from .converter import TrialBalanceConverter
from .models import LedgerEntry, ParsedData
from .parser import Markers, TrialBalanceParser, parse

__version__ = "1.0.0"

__all__ = [
    "LedgerEntry",
    "LineClassifier",
    "Markers",
    "ParsedData",
    "TrialBalanceConverter",
    "TrialBalanceParser",
    "parse",
]
