from __future__ import annotations

import re

_WORD_BREAK_RE = re.compile(r"[\s._-]+")


def start_case(text: str) -> str:
    """Turn a dash- or underscore-separated name into a space-separated title.

    Any run of hyphens, underscores, dots or whitespace separates two words.
    The first letter of every word is upper-cased; the rest is kept as
    written so acronyms such as ``API`` survive.
    """
    words = _WORD_BREAK_RE.split(text)
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


def slugify_kebab(
    text: str,
    *,
    fallback: str = "page",
    max_length: int | None = None,
    ascii_only: bool = False,
) -> str:
    """Convert text into a lowercase dash-separated slug.

    Normalization:
    - Lowercases input.
    - Replaces any sequence of non-alphanumerics with a single dash.
    - Trims leading/trailing dashes.
    - Uses `fallback` when the slug would be empty.

    Args:
        text: Input text to normalize.
        fallback: Slug to use when the normalized result is empty.
        max_length: Optional maximum slug length.
        ascii_only: When True, only ASCII letters/digits are preserved.

    Returns:
        A URL-friendly slug string.
    """
    normalized = text.strip().lower()
    slug_chars: list[str] = []
    prev_dash = False
    for ch in normalized:
        if ch.isalnum() and (not ascii_only or ch.isascii()):
            slug_chars.append(ch)
            prev_dash = False
            continue
        if not prev_dash:
            slug_chars.append("-")
            prev_dash = True

    slug = "".join(slug_chars).strip("-")
    if not slug:
        slug = fallback

    if max_length is not None and len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")
        if not slug:
            slug = fallback

    return slug
