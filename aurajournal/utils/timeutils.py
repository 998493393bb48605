from datetime import datetime, timezone


def utcnow() -> datetime:
    # Naive UTC; SQLite drops tzinfo on the way back anyway.
    return datetime.now(timezone.utc).replace(tzinfo=None)
