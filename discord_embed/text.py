"""Plain text to the HTML dialect Discord renders in a status body."""

# Ampersand must come first so inserted entities are not escaped again.
_HTML_ESCAPES = [
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("<", "&lt;"),
    (">", "&gt;"),
]

_CONTENT_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
]


def escape_html(text):
    """Escape ``&``, ``"``, ``<`` and ``>`` as named HTML entities."""
    for old, new in _HTML_ESCAPES:
        text = text.replace(old, new)
    return text


def text_to_html(text):
    """Convert plain text to HTML safe for the status ``content`` field.

    Escapes ``&``, ``<`` and ``>`` and turns newlines into ``<br>``. Double
    quotes are left alone since the result is never an attribute value.
    """
    for old, new in _CONTENT_ESCAPES:
        text = text.replace(old, new)
    return text.replace("\n", "<br>")
