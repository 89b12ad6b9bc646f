"""Escaping of free text for embedding into voice markup."""

# Order matters: "&" must be replaced first so the other references are not
# escaped twice.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_markup(text: str) -> str:
    """Replace the five reserved XML characters with named references."""
    for char, reference in _XML_ESCAPES:
        text = text.replace(char, reference)
    return text


def unescape_markup(text: str) -> str:
    """Reverse escape_markup(). "&amp;" is restored last."""
    for char, reference in reversed(_XML_ESCAPES):
        text = text.replace(reference, char)
    return text
