# core/sanitizers.py
"""
Input sanitization for Shram Daan.

All user-generated content (project text, chat messages, profile fields)
should pass through these functions before being stored or rendered.
"""
import re
from typing import Optional

import bleach


# Allowed HTML tags for rich text (project descriptions)
ALLOWED_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'a', 'ul', 'ol', 'li',
    'h3', 'h4', 'blockquote',
]

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title'],
}

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
PARTIAL_ENTITY = re.compile(r'&[#\w]*$')


def sanitize_text(text: Optional[str], max_length: Optional[int] = None, strip: bool = True) -> str:
    """
    Sanitize plain text input.

    - Strips leading/trailing whitespace
    - Removes control characters
    - Removes any HTML markup; the result is HTML-escaped (& < >), and
      entities already present are kept as entities
    - Enforces maximum length without splitting an entity
    - Returns empty string for None input
    """
    if text is None:
        return ""

    text = bleach.clean(str(text), tags=[], strip=True)

    if strip:
        text = text.strip()

    text = CONTROL_CHARS.sub('', text)

    if max_length and len(text) > max_length:
        text = PARTIAL_ENTITY.sub('', text[:max_length])

    return text


def sanitize_html(html: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize HTML content, removing dangerous elements.
    """
    if html is None:
        return ""

    clean = bleach.clean(
        html.strip(),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True
    )

    if max_length and len(clean) > max_length:
        clean = PARTIAL_ENTITY.sub('', clean[:max_length])

    return clean


def sanitize_title(title: Optional[str]) -> str:
    """
    Project titles: max 255 characters, no HTML, single line.
    """
    text = sanitize_text(title, max_length=255)
    text = re.sub(r'[\r\n]+', ' ', text)
    text = re.sub(r'\s+', ' ', text)
    return text


def sanitize_description(description: Optional[str]) -> str:
    return sanitize_html(description, max_length=10000)


def sanitize_phone(phone: Optional[str]) -> str:
    """
    Keep digits, spaces and the usual separators only.
    """
    text = sanitize_text(phone, max_length=32)
    return re.sub(r'[^0-9+()\-\s]', '', text).strip()
