"""Image reference validation."""

from __future__ import annotations

_ACCEPTED_PREFIXES = ("http://", "https://", "data:image/")


def is_valid_image_url(value: str | None) -> str | None:
    """Return *value* when it is an absolute HTTP(S) URL or an embedded image, else ``None``."""
    if not isinstance(value, str) or not value:
        return None
    if value.startswith(_ACCEPTED_PREFIXES):
        return value
    return None
