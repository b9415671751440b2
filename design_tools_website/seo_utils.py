"""Slug and display-text helpers shared by the CLI and the website."""

import re

DEFAULT_PREVIEW_LENGTH = 100


def generate_slug(text: str) -> str:
    """
    Generate a URL-safe slug from display text.

    Rules:
    - Lowercase
    - Remove everything except letters, digits, spaces and hyphens
    - Whitespace runs become a single hyphen
    - Collapse multiple hyphens
    - Strip leading/trailing hyphens

    Used both as the category file name stem and as the per-category tool key.
    """
    if not text:
        return ""

    text = text.lower()

    # Remove all characters except letters, numbers, spaces and hyphens
    text = re.sub(r"[^a-z0-9 -]", "", text)

    # Replace spaces with hyphens
    text = re.sub(r"\s+", "-", text)

    # Collapse multiple hyphens
    text = re.sub(r"-+", "-", text)

    return text.strip("-")


def category_title(category_slug: str) -> str:
    """Human label for a category slug, e.g. "color-tools" -> "Color Tools"."""
    return " ".join(word.capitalize() for word in category_slug.split("-") if word)


def preview_text(text: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """First `limit` characters of text, with an ellipsis when it was cut."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def category_heading(category_slug: str) -> str:
    """Page heading for a category, e.g. "color" -> "Color Tools"."""
    title = category_title(category_slug)
    if title.endswith("Tools"):
        return title
    return f"{title} Tools"
