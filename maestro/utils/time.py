from datetime import datetime, timezone


def parse_iso_utc(ts: str | None) -> datetime | None:
    """Parse a UTC timestamp as returned in last_updated to an aware datetime.

    Accepts ISO-8601 with a trailing 'Z' and the space-separated
    'YYYY-MM-DD HH:MM:SS' form. Returns None if the input is falsy.
    """
    if not ts:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
