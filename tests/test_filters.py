from datetime import date

from casestats.filters import filter_records
from casestats.records import parse_records
from casestats.schemas import FilterParams, Gender


def _records(lines: list[str]):
    valid, _, _ = parse_records(lines)
    return valid


def _ids(records) -> list[str]:
    return [record.id for record in records]


def test_no_filters_keeps_everything(sample_lines: list[str]) -> None:
    records = _records(sample_lines)

    assert filter_records(records, FilterParams()) == tuple(records)


def test_after_is_inclusive_and_drops_missing_dates(sample_lines: list[str]) -> None:
    selected = filter_records(_records(sample_lines), FilterParams(after=date(2020, 3, 15)))

    assert _ids(selected) == ["a3", "a4", "a5"]


def test_before_is_inclusive_and_drops_missing_dates(sample_lines: list[str]) -> None:
    selected = filter_records(_records(sample_lines), FilterParams(before=date(2020, 3, 15)))

    assert _ids(selected) == ["a1", "a2", "a3"]


def test_gender_filter_excludes_unknown_gender(sample_lines: list[str]) -> None:
    selected = filter_records(_records(sample_lines), FilterParams(gender=Gender.MALE))

    assert _ids(selected) == ["a1", "a3"]


def test_filters_are_conjunctive(sample_lines: list[str]) -> None:
    params = FilterParams(after=date(2020, 3, 1), before=date(2020, 4, 30), gender=Gender.FEMALE)

    selected = filter_records(_records(sample_lines), params)

    assert _ids(selected) == ["a2", "a4"]


def test_filtering_does_not_touch_input(sample_lines: list[str]) -> None:
    records = _records(sample_lines)
    before = list(records)

    filter_records(records, FilterParams(gender=Gender.FEMALE))

    assert records == before
