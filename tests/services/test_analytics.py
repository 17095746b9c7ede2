from datetime import datetime, timezone

from voteportal.services.voting import (
    category_flow,
    completion_rate,
    district_breakdown,
    hourly_pattern,
    peak_hour,
    summarize,
    top_district,
)
from voteportal.services.voting.analytics import district_shares, hourly_timeline


def test_district_and_hour_counts_cover_every_record(make_record):
    records = [
        make_record("president", "candidate-a", district="north", timestamp=datetime(2025, 3, 4, 9, 5)),
        make_record("mayor", "mayor-b", district="north", timestamp=datetime(2025, 3, 4, 9, 5)),
        make_record("president", "candidate-b", district="east", timestamp=datetime(2025, 3, 4, 14, 40)),
    ]

    districts = district_breakdown(records)
    hourly = hourly_pattern(records)

    assert districts == {"north": 2, "east": 1}
    assert hourly == {9: 2, 14: 1}
    assert sum(districts.values()) == len(records)
    assert sum(hourly.values()) == len(records)


def test_district_keys_are_case_sensitive(make_record):
    records = [
        make_record("mayor", "mayor-a", district="north"),
        make_record("mayor", "mayor-a", district="North"),
    ]

    assert district_breakdown(records) == {"north": 1, "North": 1}


def test_top_district_and_peak_hour_break_ties_deterministically(make_record):
    records = [
        make_record("mayor", "mayor-a", district="west", timestamp=datetime(2025, 3, 4, 18, 0)),
        make_record("mayor", "mayor-a", district="central", timestamp=datetime(2025, 3, 4, 7, 0)),
    ]

    assert top_district(records) == ("central", 1)
    assert peak_hour(records) == (7, 1)


def test_top_district_prefers_highest_count(make_record):
    records = [
        make_record("mayor", "mayor-a", district="central"),
        make_record("mayor", "mayor-a", district="south"),
        make_record("mayor", "mayor-b", district="south"),
    ]

    assert top_district(records) == ("south", 2)


def test_empty_records_degrade_to_not_available():
    assert district_breakdown([]) == {}
    assert hourly_pattern([]) == {}
    assert top_district([]) is None
    assert peak_hour([]) is None
    assert completion_rate([]) == 0


def test_completion_rate_is_fixed_placeholder(make_record):
    records = [make_record("mayor", "mayor-a") for _ in range(7)]

    assert completion_rate(records) == 83
    assert completion_rate(records, multiplier=2) == 50


def test_hourly_timeline_keeps_latest_hours(make_record):
    records = [
        make_record("mayor", "mayor-a", timestamp=datetime(2025, 3, 4, hour, 30))
        for hour in range(10)
    ]

    timeline = hourly_timeline(records, limit=8)

    assert [row["hour"] for row in timeline] == list(range(2, 10))
    assert timeline[0]["label"] == "02:00"


def test_district_shares_use_one_decimal(make_record):
    records = [
        make_record("mayor", "mayor-a", district="north"),
        make_record("mayor", "mayor-a", district="north"),
        make_record("mayor", "mayor-a", district="west"),
    ]

    assert district_shares(records) == [
        {"district": "north", "votes": 2, "share": 66.7},
        {"district": "west", "votes": 1, "share": 33.3},
    ]


def test_category_flow_keeps_catalog_option_order(categories, make_record):
    records = [
        make_record("proposition", "prop-no"),
        make_record("proposition", "prop-no"),
    ]

    flow = category_flow(categories, records)
    proposition = next(entry for entry in flow if entry["category"].id == "proposition")

    assert proposition["total_votes"] == 2
    assert [row["option"].id for row in proposition["option_results"]] == ["prop-yes", "prop-no"]
    assert [row["percentage"] for row in proposition["option_results"]] == [0, 100.0]


def test_summarize_empty_store(categories):
    summary = summarize(categories, [])

    assert summary["total_records"] == 0
    assert summary["districts"] == {}
    assert summary["top_district"] is None
    assert summary["peak_hour"] is None
    assert summary["max_district_votes"] == 1
    assert summary["max_hourly_votes"] == 1
    assert len(summary["flow"]) == len(categories)


def test_aware_timestamps_use_local_hour(make_record):
    stamp = datetime(2025, 3, 4, 23, 30, tzinfo=timezone.utc)
    records = [make_record("mayor", "mayor-a", timestamp=stamp)]

    assert hourly_pattern(records) == {stamp.astimezone().hour: 1}
    assert peak_hour(records) == (stamp.astimezone().hour, 1)
