"""Fixed labels and patterns of the trial balance ("mizan") report layout."""

# Column header markers; a line holding all three is the table header row
ACCOUNT_CODE_MARKER = "HESAP KODU"
DESCRIPTION_MARKER = "AÇIKLAMA"
DEBIT_MARKER = "BORÇ"

# Table furniture repeated on every page
REPORT_CAPTION = "Tarihleri Arası Mizan"
PAGE_CAPTION = "Sayfa No"
GRAND_TOTAL_PREFIX = "GENEL TOPLAM"

# Locale formatted amount: "3.168,81", "81,5", "12.345.678,90"
AMOUNT_PATTERN = r"^\d{1,3}(?:\.\d{3})*,\d+$"
DATE_RANGE_PATTERN = r"\d{2}\.\d{2}\.\d{4}\s*-\s*\d{2}\.\d{2}\.\d{4}"
PAGE_NUMBER_PATTERN = r"\d+\s*/\s*\d+"

MIN_LINE_TOKENS = 5
YEAR_MIN = 1900
YEAR_MAX = 2100

LEDGER_COLUMNS = [
  "account_code",
  "description",
  "debit",
  "credit",
  "balance_debit",
  "balance_credit",
]

# Display labels used when an entry is rendered as a text block
LEDGER_LABELS = {
  "account_code": "HESAP KODU",
  "description": "AÇIKLAMA",
  "debit": "BORÇ",
  "credit": "ALACAK",
  "balance_debit": "BAK. BORÇ",
  "balance_credit": "BAK. ALACAK",
}
