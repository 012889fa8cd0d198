"""Short-name extraction for provider self-links."""

from __future__ import annotations


def short_name_from_reference(reference: str) -> str:
    """Return the terminal path segment of a self-link, or the input if it is already short.

    Example:
        >>> short_name_from_reference("https://www.googleapis.com/compute/v1/projects/p/zones/asia-east1-a")
        'asia-east1-a'
        >>> short_name_from_reference("asia-east1-a")
        'asia-east1-a'

    Never raises. Empty input and references ending in ``/`` both yield ``""``.
    """

    segments = reference.split("/")
    if len(segments) > 1:
        return segments[-1]
    return reference


def zone_from_self_link(self_link: str) -> str:
    return short_name_from_reference(self_link)


def region_from_self_link(self_link: str) -> str:
    return short_name_from_reference(self_link)
