"""Helpers for image node payloads."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit


def normalize_image_url(url: str) -> str:
    """Unwrap Google image-search result links to the direct image URL.

    Anything that is not a ``google.com/imgres`` link with an ``imgurl``
    parameter is returned unchanged; half-typed URLs are common while the
    user is still typing.
    """

    if "google.com/imgres" not in url:
        return url

    try:
        query = urlsplit(url).query
    except ValueError:
        return url

    direct = parse_qs(query).get("imgurl")
    if direct and direct[0]:
        return direct[0]
    return url


__all__ = ["normalize_image_url"]
