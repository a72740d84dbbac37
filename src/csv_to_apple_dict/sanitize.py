"""
Escaping and identifier sanitization for dictionary entries.

Entry IDs are built from the raw term by HTML-escaping it first and then
replacing reserved punctuation with word tokens. The substitution pass
runs over the escaped text, so entity characters are rewritten as well:

    >>> sanitize_id("A & B")
    'a__and_amp_semicolon__b'
"""

# Entity forms used for all user-supplied text
HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
}

_HTML_ESCAPE_TABLE = str.maketrans(HTML_ESCAPES)

# Applied in order; each substitution sees the output of the previous ones
ID_REPLACEMENTS = [
    ("&", "_and_"),
    ("/", "_slash_"),
    ("\\", "_backslash_"),
    (":", "_colon_"),
    (";", "_semicolon_"),
    ("?", "_question_"),
    ("!", "_exclamation_"),
    ("@", "_at_"),
    ("#", "_hash_"),
    ("$", "_dollar_"),
    ("%", "_percent_"),
    ("^", "_caret_"),
    ("*", "_star_"),
    ("(", "_lparen_"),
    (")", "_rparen_"),
    ("+", "_plus_"),
    ("=", "_equals_"),
    ("[", "_lbracket_"),
    ("]", "_rbracket_"),
    ("{", "_lbrace_"),
    ("}", "_rbrace_"),
    ("|", "_pipe_"),
    ("<", "_lt_"),
    (">", "_gt_"),
    (",", "_comma_"),
    (".", "_dot_"),
    ("'", "_apos_"),
    ('"', "_quote_"),
]

RESERVED_CHARACTERS = frozenset(char for char, _ in ID_REPLACEMENTS)


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for embedding in markup."""
    return text.translate(_HTML_ESCAPE_TABLE)


def sanitize_id(term: str) -> str:
    """
    Turn a term into a lowercase, markup-safe base identifier.

    The result is not unique; duplicate handling is up to the caller.
    """
    base_id = escape_html(term).lower().replace(" ", "_")
    for char, token in ID_REPLACEMENTS:
        base_id = base_id.replace(char, token)
    return base_id
