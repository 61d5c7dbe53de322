"""
Date/time helpers shared by the API and the client.
Handles MongoDB's requirement for timezone-naive datetimes.
"""

from datetime import datetime, timezone
from typing import Optional, Union

def get_utc_now() -> datetime:
    """
    Get current UTC time as timezone-NAIVE datetime for MongoDB compatibility.
    MongoDB stores all datetimes as UTC internally but expects naive datetimes.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)

def format_display_date(value: Union[str, datetime, None]) -> str:
    """
    Short calendar date for history lists, e.g. "3/14/2026".

    Accepts a datetime or the ISO string the API serializes it to; anything
    unparseable is returned unchanged.
    """
    if value is None:
        return ""

    dt: Optional[datetime] = value if isinstance(value, datetime) else None
    if dt is None:
        try:
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return str(value)

    return f"{dt.month}/{dt.day}/{dt.year}"
