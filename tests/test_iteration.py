"""Tests for iterating a TimeRange directly (daily buckets)."""

from datetime import date, datetime

from timerange import TimeRange


def test_iterates_one_bucket_per_day():
    tr = TimeRange("2013-01-01", "2013-01-05")

    items = list(enumerate(tr))

    assert [key for key, _ in items] == [0, 1, 2, 3, 4]
    assert [day for _, day in items] == [
        datetime(2013, 1, 1),
        datetime(2013, 1, 2),
        datetime(2013, 1, 3),
        datetime(2013, 1, 4),
        datetime(2013, 1, 5),
    ]


def test_iteration_matches_get_days():
    tr = TimeRange("2013-01-01 13:30:49", "2013-01-31 23:59:59")
    assert list(tr) == tr.get_days()


def test_iteration_is_restartable():
    """Each pass starts from the beginning."""
    tr = TimeRange("2013-01-01", "2013-01-05")

    first = list(tr)
    second = list(tr)

    assert first == second


def test_new_pass_reflects_mutation():
    tr = TimeRange("2013-01-01", "2013-01-05")
    assert len(list(tr)) == 5

    tr.set_end("2013-01-10")

    assert len(list(tr)) == 10
    assert list(tr)[-1] == datetime(2013, 1, 10)


def test_pass_in_progress_keeps_its_bounds():
    """Mutating mid-pass only affects later passes."""
    tr = TimeRange("2013-01-01", "2013-01-05")
    days = iter(tr)

    assert next(days) == datetime(2013, 1, 1)
    tr.set_end("2013-01-02")

    assert list(days) == [
        datetime(2013, 1, 2),
        datetime(2013, 1, 3),
        datetime(2013, 1, 4),
        datetime(2013, 1, 5),
    ]
    assert len(list(tr)) == 2


def test_large_range_iteration():
    """Daily buckets over several decades, checked against each other range."""
    tr = TimeRange("1975-01-01", "2013-01-01")
    target = TimeRange("2012-01-01", "2012-01-01")

    count = 0
    overlap_found = False
    for day in tr:
        count += 1
        if target.overlaps(day):
            overlap_found = True

    assert overlap_found
    assert count == (date(2013, 1, 1) - date(1975, 1, 1)).days + 1
