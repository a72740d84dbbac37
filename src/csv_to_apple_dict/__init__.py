"""
csv_to_apple_dict - Convert a CSV glossary to Apple Dictionary XML.

This package provides tools for:
- Escaping text and sanitizing entry IDs (sanitize)
- Building dictionary entries from CSV rows (entries)
- Serializing entries as a dictionary XML document (document)
- Loading the CSV and running the conversion (convert)
"""

from csv_to_apple_dict.sanitize import (
    HTML_ESCAPES,
    ID_REPLACEMENTS,
    escape_html,
    sanitize_id,
)

from csv_to_apple_dict.entries import (
    Record,
    DictionaryEntry,
    IdAllocator,
    parse_record,
    format_content,
    build_entry,
    build_entries,
)

from csv_to_apple_dict.document import (
    XHTML_NAMESPACE,
    DICTIONARY_NAMESPACE,
    Document,
    append_markup,
    build_entry_element,
    build_tree,
    render_document,
    write_document,
)

from csv_to_apple_dict.convert import (
    OUTPUT_FILENAME,
    load_rows,
    main,
)

__version__ = "0.1.0"
