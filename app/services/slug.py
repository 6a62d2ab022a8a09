import re

SLUG_MAX_LENGTH = 100

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
_VALID_SLUG = re.compile(r"^[a-z0-9-]+$")


def slugify(title: str) -> str:
    """Derive a URL slug from a gallery title.

    "Sarah & Michael's Wedding!" -> "sarah-michael-s-wedding"
    Returns an empty string when the title has no usable characters.
    """
    slug = _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def slug_format_error(slug: str) -> str | None:
    """Return why a slug is unusable, or None if its format is fine."""
    if not slug:
        return "Slug cannot be empty"
    if len(slug) > SLUG_MAX_LENGTH:
        return f"Slug must be {SLUG_MAX_LENGTH} characters or less"
    if not _VALID_SLUG.match(slug):
        return "Slug can only contain lowercase letters, numbers, and hyphens"
    return None
