"""
Serializes dictionary entries as an Apple Dictionary XML document.

Tags and attributes carry the literal "d:" prefix, with both namespaces
declared on the root element, matching the layout of dictionary source
files:

    <d:dictionary xmlns="http://www.w3.org/1999/xhtml" xmlns:d="...">
        <d:entry id="go" d:title="Go">
            <d:index d:value="Go" />
            <h1>Go</h1>
            ...
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import NamedTuple
from xml.etree.ElementTree import Element

from csv_to_apple_dict.entries import DictionaryEntry

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
DICTIONARY_NAMESPACE = "http://www.apple.com/DTDs/DictionaryService-1.0.rng"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "\t"


class Document(NamedTuple):
    """Root of the output: ordered entries plus the namespace declarations."""
    entries: list[DictionaryEntry]
    xmlns: str = XHTML_NAMESPACE
    xmlns_d: str = DICTIONARY_NAMESPACE


def append_markup(parent: Element, markup: str) -> None:
    """
    Append an already-escaped markup fragment to parent as child nodes.

    Raises ET.ParseError if the fragment is not well-formed.
    """
    # The fragment is parsed and later re-serialized, so entity spellings and
    # whitespace between elements may change; the parsed content does not.
    fragment = ET.fromstring(f"<fragment>{markup}</fragment>")
    if fragment.text:
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + fragment.text
        else:
            parent.text = (parent.text or "") + fragment.text
    parent.extend(list(fragment))


def build_entry_element(entry: DictionaryEntry) -> Element:
    elem = Element("d:entry", {"id": entry.id, "d:title": entry.title})
    for value in entry.index_values:
        ET.SubElement(elem, "d:index", {"d:value": value})
    append_markup(elem, entry.content)
    return elem


def build_tree(document: Document) -> Element:
    """Build the <d:dictionary> element tree for a document."""
    root = Element("d:dictionary", {"xmlns": document.xmlns, "xmlns:d": document.xmlns_d})
    for entry in document.entries:
        root.append(build_entry_element(entry))
    return root


def render_document(document: Document) -> str:
    """Render the document as tab-indented XML with a declaration."""
    root = build_tree(document)
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def write_document(document: Document, output_path: Path) -> Path:
    """Render the whole document, then write it to output_path."""
    markup = render_document(document)
    with output_path.open("w", encoding="utf-8") as handle:
        handle.write(markup)
    return output_path
