#!/usr/bin/env python3
"""
Converts a CSV glossary into an Apple Dictionary XML source file.

The input has a header row followed by `term, description[, tag]` rows.
The result is written to output.xml in the current directory.
"""

import csv
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

from csv_to_apple_dict.document import Document, write_document
from csv_to_apple_dict.entries import build_entries

OUTPUT_FILENAME = "output.xml"


def load_rows(input_path: Path) -> list[list[str]]:
    """Read every non-blank CSV row into memory and drop the header row."""
    with input_path.open(encoding="utf-8", newline="") as handle:
        # Blank lines come back as empty rows; the header is the first non-empty one
        rows = [row for row in csv.reader(handle, strict=True) if row]
    return rows[1:]


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(f"Usage: {sys.argv[0]} <input.csv>")
        return 1

    input_path = Path(args[0])
    output_path = Path(OUTPUT_FILENAME)

    print(f"Converting {input_path}...")
    try:
        rows = load_rows(input_path)
    except OSError as e:
        print(f"Error opening file: {e}", file=sys.stderr)
        return 1
    except (csv.Error, UnicodeDecodeError) as e:
        print(f"Error reading CSV: {e}", file=sys.stderr)
        return 1

    entries = build_entries(rows)

    try:
        write_document(Document(entries), output_path)
    except ET.ParseError as e:
        print(f"Error encoding XML: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        return 1

    print(f"Successfully converted {input_path} to {output_path} ({len(entries)} entries)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
