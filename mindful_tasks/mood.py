"""Resolve the user's current mood from journal entries and check-ins."""

from __future__ import annotations

from typing import Optional, Sequence

from mindful_tasks.schema import JournalEntry, MoodCheckIn


def current_mood(
    journal_entries: Sequence[JournalEntry],
    check_ins: Sequence[MoodCheckIn],
) -> Optional[str]:
    """
    Return the most recent mood signal, or None when there is none.

    A check-in wins over the latest journal mood only when it is strictly newer.
    """

    latest_entry = max(
        (entry for entry in journal_entries if entry.mood and entry.mood.strip()),
        key=lambda entry: entry.date,
        default=None,
    )
    latest_check_in = max(check_ins, key=lambda check_in: check_in.date, default=None)

    if latest_check_in is not None and (latest_entry is None or latest_check_in.date > latest_entry.date):
        return latest_check_in.mood
    if latest_entry is not None:
        return latest_entry.mood
    return None
