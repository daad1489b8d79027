"""
Sanitizing of free text that reaches the graph (task names, search patterns, ids).
"""
import re

from .constants import MAX_NAME_LENGTH
from .errors import InputError

HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#x27;',
    '/': '&#x2F;',
}

HTML_PATTERN = re.compile(r'[&<>"\'/]')
CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return HTML_PATTERN.sub(lambda match: HTML_ESCAPES[match.group(0)], text)

def sanitize(text, max_length: int = MAX_NAME_LENGTH, allow_html: bool = False,
             trim: bool = True, allow_empty: bool = True) -> str:
    """
    Validate and sanitize user input.

    Args:
        text: Input value; None is treated as an empty string.
        max_length: Longest accepted length, checked before escaping.
        allow_html: Keep HTML special characters as they are.
        trim: Strip leading and trailing whitespace.
        allow_empty: Accept an empty result.

    Returns:
        The sanitized text.

    Raises:
        InputError: If the input is empty when not allowed or too long.
    """
    sanitized = '' if text is None else str(text)

    if trim:
        sanitized = sanitized.strip()

    if not allow_empty and sanitized == '':
        raise InputError("Empty input is not allowed")
    if len(sanitized) > max_length:
        raise InputError(f"Input exceeds maximum length of {max_length} characters")

    if not allow_html:
        sanitized = escape_html(sanitized)

    return CONTROL_CHARS.sub('', sanitized)
