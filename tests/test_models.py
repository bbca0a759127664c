from datetime import datetime, timezone

import pytest

from decisiondesk.models.briefing import BusinessCategory, HistoryEntry, Tone


@pytest.mark.parametrize("label, expected", [
    ("Strategic", Tone.STRATEGIC),
    ("tough love", Tone.TOUGH_LOVE),
    ("TOUGH_LOVE", Tone.TOUGH_LOVE),
    ("Tough-Love", Tone.TOUGH_LOVE),
    ("chill", Tone.CHILL),
    ("Balanced", Tone.CHILL),
    (None, Tone.CHILL),
])
def test_tone_parse(label, expected):
    assert Tone.parse(label) is expected


@pytest.mark.parametrize("label, expected", [
    ("Coffee", BusinessCategory.COFFEE),
    ("real estate", BusinessCategory.REAL_ESTATE),
    ("RealEstate", BusinessCategory.REAL_ESTATE),
    ("Aerospace", BusinessCategory.OTHER),
    (None, BusinessCategory.OTHER),
])
def test_category_parse(label, expected):
    assert BusinessCategory.parse(label) is expected


def test_history_entry_naive_timestamp_is_utc():
    entry = HistoryEntry(timestamp="2026-10-19T08:00:00", raw_text="x")
    assert entry.recorded_at == datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
