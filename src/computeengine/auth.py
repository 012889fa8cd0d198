from __future__ import annotations

from datetime import UTC, datetime, timedelta


def token_expiry(expires_in: object, *, now: datetime | None = None) -> datetime | None:
    """Convert an OAuth2 ``expires_in`` value (seconds) to an absolute UTC expiry.

    Example:
        >>> token_expiry("not-a-number") is None
        True
    """

    if isinstance(expires_in, bool) or not isinstance(expires_in, (int, float, str)):
        return None
    try:
        return (now or datetime.now(UTC)) + timedelta(seconds=float(expires_in))
    except (ValueError, OverflowError):
        # Non-numeric, infinite, NaN or out-of-range lifetimes leave the expiry unknown.
        return None


def is_token_expired(expiry: datetime | None, *, skew_seconds: int = 60) -> bool:
    """Return True when a token with the given expiry should be treated as expired.

    A token without a known expiry is treated as valid; the API rejects it otherwise.
    """

    if expiry is None:
        return False
    return datetime.now(UTC) >= (expiry - timedelta(seconds=skew_seconds))
