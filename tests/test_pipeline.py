from datetime import date

from casestats.histogram import DEFAULT_WIDTH
from casestats.pipeline import run_report
from casestats.schemas import Command, FilterParams, Gender


def test_infected_counts_records_passing_validation_and_filters(sample_lines: list[str]) -> None:
    result = run_report(sample_lines, command=Command.INFECTED, params=FilterParams(gender=Gender.FEMALE))

    assert result.lines == ("2",)
    assert result.parsed_records == 8
    assert result.valid_records == 6
    assert result.selected_records == 2
    assert [invalid.reason for invalid in result.invalid_records] == ["date", "age"]


def test_default_command_is_merge(sample_lines: list[str]) -> None:
    result = run_report(sample_lines)

    assert result.command is Command.MERGE
    assert len(result.lines) == 7


def test_date_filter_drops_records_without_a_date(sample_lines: list[str]) -> None:
    result = run_report(sample_lines, command=Command.DAILY, params=FilterParams(after=date(2020, 3, 1)))

    assert result.lines == ("2020-03-01: 2", "2020-03-15: 1", "2020-04-02: 1", "2021-01-10: 1")


def test_histogram_with_default_unit(sample_lines: list[str]) -> None:
    lines = sample_lines + [f"b{n},2020-06-01,,,,,,PL,\n" for n in range(250)]

    result = run_report(lines, command=Command.COUNTRIES, width=DEFAULT_WIDTH)

    assert result.lines == ("DE: ", "IT: ", "PL: ##")


def test_histogram_with_explicit_width(sample_lines: list[str]) -> None:
    result = run_report(sample_lines, command=Command.REGIONS, width=1)

    assert result.lines == ("CZ010: ", "CZ020: #", "CZ064: #", "None: ")


def test_empty_input_never_fails() -> None:
    result = run_report([], command=Command.DISTRICTS, width=DEFAULT_WIDTH)

    assert result.lines == ()
    assert result.invalid_records == ()


def test_daily_report_lists_undated_records_first() -> None:
    result = run_report(["a,2020-03-01,,,,,,,\n", "b,,,,,,,,\n"], command=Command.DAILY)

    assert result.lines == (": 1", "2020-03-01: 1")


def test_year_zero_is_a_valid_date() -> None:
    result = run_report(["a,0000-01-01,,,,,,,\n"], command=Command.INFECTED, params=FilterParams(before=date(2020, 1, 1)))

    assert result.lines == ("1",)
    assert result.invalid_records == ()
