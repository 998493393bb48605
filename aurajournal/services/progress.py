from datetime import date, datetime, timedelta
from typing import Optional

from aurajournal.errors import UninitializedStoreError
from aurajournal.models import UserProgress
from aurajournal.services.badges import evaluate_badges, merge_badges
from aurajournal.utils.timeutils import utcnow


def new_progress() -> UserProgress:
    """Blank progress record (streak 0, no badges, aura 1)."""
    return UserProgress(
        streak=0,
        total_entries=0,
        badges=[],
        aura_level=1,
        last_entry_date=None,
    )


def is_consecutive_day(last_date: date, current_date: date) -> bool:
    return current_date - last_date == timedelta(days=1)


def record_new_entry(
    progress: Optional[UserProgress],
    today: date,
    *,
    now: Optional[datetime] = None,
) -> UserProgress:
    """
    Apply one new journal entry to the progress record (in place).

    - total_entries always +1
    - first entry of a day: streak +1 if yesterday had an entry, else reset to 1
    - repeat entry on the same day: streak untouched
    - badges: union with whatever the snapshot now qualifies for
    """
    if progress is None:
        raise UninitializedStoreError("User progress not initialized")

    is_new_day = progress.last_entry_date != today

    progress.total_entries = (progress.total_entries or 0) + 1

    if is_new_day:
        last = progress.last_entry_date
        if last is not None and is_consecutive_day(last, today):
            progress.streak = (progress.streak or 0) + 1
        else:
            progress.streak = 1
        progress.last_entry_date = today

    progress.badges = merge_badges(progress.badges, evaluate_badges(progress))
    progress.updated_at = now or utcnow()

    return progress
