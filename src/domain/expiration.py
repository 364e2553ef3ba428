from datetime import datetime, timedelta
from typing import Optional, Union


def token_expired(
    sent_at: Optional[datetime],
    expiration: Union[timedelta, int, float],
    now: datetime,
) -> bool:
    """
    Whether a token sent at ``sent_at`` is past its expiration window.

    A zero expiration disables expiry, and a token without a sent timestamp
    is never considered expired.
    """
    if not isinstance(expiration, timedelta):
        expiration = timedelta(seconds=expiration)
    if expiration.total_seconds() <= 0 or sent_at is None:
        return False
    return now - sent_at > expiration
