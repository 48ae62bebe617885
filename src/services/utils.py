"""Shared utility functions for services."""
import re

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_ESCAPE_RE = re.compile(r"[&<>\"']")
_IMAGE_JUNK_RE = re.compile(r'[\[\]"]')


def escape_html(text) -> str:
    """Escape ``& < > " '`` so *text* can be inserted into markup verbatim."""
    if text is None:
        return ""
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], str(text))


def clean_image_url(url: str) -> str:
    """Strip bracket and quote characters left by badly stored image lists.

    Handles values like ``'["https://i.imgur.com/x.jpeg"'``.
    """
    return _IMAGE_JUNK_RE.sub("", url or "").strip()


def first_image(images: list[str] | None, placeholder: str) -> str:
    """Return the cleaned first image URL, or *placeholder* when there is none."""
    if images:
        url = clean_image_url(images[0])
        if url:
            return url
    return placeholder


def format_number(value) -> str:
    """Render a number without currency rounding (``10.0`` -> ``10``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(value) -> str:
    return f"${format_number(value)}"
