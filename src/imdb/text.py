"""Text normalization shared by the field extractors."""

import html
import re

# Tag-wrapped inline text such as "<a href=...>full summary</a>".
# Greedy: everything from the first tag to the last closing tag goes.
_INLINE_MARKUP = re.compile(r"<.+>.+</.+>")


def decode_entities(text: str) -> str:
    """Replace HTML character references with the characters they name.

    Named (``&ldquo;``), decimal (``&#233;``) and hexadecimal (``&#xE9;``)
    references are decoded. Unknown references are left as they are, so
    plain text comes back unchanged.

    Args:
        text: Text possibly containing character references.

    Returns:
        Decoded text.
    """
    if "&" not in text:
        return text
    return html.unescape(text)


def clean_text(text: str) -> str:
    """Trim and decode a text fragment taken from the page."""
    return decode_entities(text.strip()).strip()


def strip_inline_markup(line: str) -> str:
    """Drop tag-wrapped text (links, spans) from a single line of markup."""
    return _INLINE_MARKUP.sub("", line)
