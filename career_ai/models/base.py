from datetime import datetime, timezone


def utcnow():
    """Python-side timestamp default; keeps sub-second precision on SQLite."""
    return datetime.now(timezone.utc)
