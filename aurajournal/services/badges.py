from typing import Callable, List, Protocol

from aurajournal.models.enums import Badge


class ProgressSnapshot(Protocol):
    streak: int
    total_entries: int


# -------------------------------------------------
# Badge rule table
# -------------------------------------------------
# Independent predicates over one progress snapshot.
# positivity / resilience / calm_mind / introspection_expert
# have no rules until the criteria are decided.
# -------------------------------------------------
BADGE_RULES: List[tuple[Badge, Callable[[ProgressSnapshot], bool]]] = [
    (Badge.first_entry, lambda p: p.total_entries == 1),
    (Badge.streak_keeper, lambda p: p.streak >= 7),
    (Badge.week_warrior, lambda p: p.total_entries >= 7),
    (Badge.month_master, lambda p: p.total_entries >= 30),
]


def evaluate_badges(progress: ProgressSnapshot) -> List[Badge]:
    """
    Badges the snapshot qualifies for right now.

    Pure and idempotent: already-held badges simply come back again.
    Merging into the stored set is the caller's job.
    """
    return [badge for badge, rule in BADGE_RULES if rule(progress)]


def merge_badges(existing: List[str] | None, earned: List[Badge]) -> List[str]:
    """Union, keeping existing order. Never removes."""
    merged = list(existing or [])
    for badge in earned:
        if badge.value not in merged:
            merged.append(badge.value)
    return merged
