from datetime import datetime

from mindful_tasks.mood import current_mood
from mindful_tasks.schema import JournalEntry, MoodCheckIn


def test_no_signals():
    assert current_mood([], []) is None


def test_latest_journal_mood_used_without_check_ins():
    entries = [
        JournalEntry(datetime(2026, 10, 17, 21, 0), "sad"),
        JournalEntry(datetime(2026, 10, 18, 21, 0), "happy"),
        JournalEntry(datetime(2026, 10, 19, 21, 0), None),
        JournalEntry(datetime(2026, 10, 19, 22, 0), "  "),
    ]
    assert current_mood(entries, []) == "happy"


def test_newer_check_in_wins():
    entries = [JournalEntry(datetime(2026, 10, 18, 21, 0), "happy")]
    check_ins = [
        MoodCheckIn("neutral", datetime(2026, 10, 17, 8, 0)),
        MoodCheckIn("stressed", datetime(2026, 10, 19, 8, 0)),
    ]
    assert current_mood(entries, check_ins) == "stressed"


def test_older_check_in_loses_to_journal():
    entries = [JournalEntry(datetime(2026, 10, 19, 21, 0), "happy")]
    check_ins = [MoodCheckIn("angry", datetime(2026, 10, 19, 8, 0))]
    assert current_mood(entries, check_ins) == "happy"


def test_inputs_are_not_reordered():
    check_ins = [
        MoodCheckIn("sad", datetime(2026, 10, 17, 8, 0)),
        MoodCheckIn("happy", datetime(2026, 10, 19, 8, 0)),
        MoodCheckIn("neutral", datetime(2026, 10, 18, 8, 0)),
    ]
    snapshot = list(check_ins)
    assert current_mood([], check_ins) == "happy"
    assert check_ins == snapshot
