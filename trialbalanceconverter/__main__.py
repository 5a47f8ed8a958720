import argparse
import json
import logging
import sys

from .converter import TrialBalanceConverter, combine_results
from .exceptions import ExtractionError


def print_report(data):
  print("DateRange: " + (data.date_range or ""))
  print("CustomerName: " + (data.customer_name or ""))
  print("PageCount: " + (data.page_count or ""))
  print("\nParsed Ledger Entries:")
  for entry in data.ledger_entries:
    print(entry)
    print("---------------")


def main(argv=None):
  parser = argparse.ArgumentParser(description='Extract ledger entries from trial balance PDFs')
  parser.add_argument('pdfs', nargs='+', help='Input PDF files')
  parser.add_argument('--output', help='Write the combined entries to this CSV file')
  parser.add_argument('--json', action='store_true', help='Print the parsed data as JSON')
  parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
  args = parser.parse_args(argv)

  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                      format="%(levelname)s | %(name)s | %(message)s")

  converter = TrialBalanceConverter()
  results = []
  failed = False
  for path in args.pdfs:
    try:
      data = converter.convert_single(path)
    except ExtractionError as e:
      print(f"Error: {e}", file=sys.stderr)
      failed = True
      continue
    results.append((path, data))

    if args.json:
      print(json.dumps(data.to_dict(), ensure_ascii=False, indent=2))
    elif not args.output:
      print_report(data)

  if args.output:
    combine_results(results).to_csv(args.output, index=False)

  return 1 if failed else 0


if __name__ == '__main__':
  sys.exit(main())
