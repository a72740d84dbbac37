"""
Builds dictionary entries from CSV rows.

Each row with at least a term and a description becomes one entry with a
unique ID, an escaped title and index value, and an XHTML content fragment.
"""

from typing import Iterable, NamedTuple, Sequence

from csv_to_apple_dict.sanitize import escape_html, sanitize_id


class Record(NamedTuple):
    """One input row after trimming."""
    term: str
    description: str
    tag: str


class DictionaryEntry(NamedTuple):
    """A single <d:entry> in the output document."""
    id: str
    title: str
    index_values: tuple[str, ...]
    content: str


class IdAllocator:
    """
    Hands out unique entry IDs for one conversion run.

    The first use of a base ID returns it unchanged, later uses get a
    numeric suffix starting at 1 (go, go_1, go_2, ...). A suffixed ID that
    was already issued, e.g. from a literal "go_1" term, is skipped.
    """

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.issued: set[str] = set()

    def allocate(self, base_id: str) -> str:
        count = self.counts.get(base_id, 0)
        entry_id = f"{base_id}_{count}" if count else base_id
        while entry_id in self.issued:
            count += 1
            entry_id = f"{base_id}_{count}"
        self.counts[base_id] = count + 1
        self.issued.add(entry_id)
        return entry_id


def parse_record(row: Sequence[str]) -> Record | None:
    """Trim a CSV row into a Record. Returns None for rows with fewer than two fields."""
    if len(row) < 2:
        return None
    tag = row[2].strip() if len(row) > 2 else ""
    return Record(term=row[0].strip(), description=row[1].strip(), tag=tag)


def format_content(record: Record) -> str:
    """Render the entry body: heading, description block and optional tag."""
    content = f"<h1>{escape_html(record.term)}</h1>\n<div>\n{escape_html(record.description)}\n</div>"
    if record.tag:
        content += f'\n<span class="tag">{escape_html(record.tag)}</span>'
    return content


def build_entry(record: Record, ids: IdAllocator) -> DictionaryEntry:
    escaped_term = escape_html(record.term)
    return DictionaryEntry(
        id=ids.allocate(sanitize_id(record.term)),
        title=escaped_term,
        index_values=(escaped_term,),
        content=format_content(record),
    )


def build_entries(rows: Iterable[Sequence[str]]) -> list[DictionaryEntry]:
    """Convert data rows to entries, skipping rows that are too short."""
    ids = IdAllocator()
    entries = []
    for row in rows:
        record = parse_record(row)
        if record is None:
            continue
        entries.append(build_entry(record, ids))
    return entries
