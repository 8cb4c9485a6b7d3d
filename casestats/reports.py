"""Report strategies.

Every command maps to one ``Report``: an aggregation over the filtered records
that yields ordered ``ReportLine`` values, plus the unit a histogram bar uses
when no explicit width is given.
"""

from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from casestats.histogram import HistogramWidth, render
from casestats.schemas import HEADER, Command, Gender, Record, ReportLine


NONE_LABEL = "None"
AGE_LABEL_WIDTH = 6


@dataclass(frozen=True)
class AgeBucket:
    label: str
    low: int
    high: int | None = None

    def contains(self, age: int) -> bool:
        return age >= self.low and (self.high is None or age <= self.high)


# 76-85 has no bucket; those ages are left out of the age report.
AGE_BUCKETS: tuple[AgeBucket, ...] = (
    AgeBucket("0-5", 0, 5),
    AgeBucket("6-15", 6, 15),
    AgeBucket("16-25", 16, 25),
    AgeBucket("26-35", 26, 35),
    AgeBucket("36-45", 36, 45),
    AgeBucket("46-55", 46, 55),
    AgeBucket("56-65", 56, 65),
    AgeBucket("66-75", 66, 75),
    AgeBucket("86-95", 86, 95),
    AgeBucket("96-105", 96, 105),
    AgeBucket(">105", 106),
)

GENDER_LABELS: tuple[tuple[Gender, str], ...] = (
    (Gender.FEMALE, "Female"),
    (Gender.MALE, "Male"),
    (Gender.NONE, NONE_LABEL),
)


def count_by(records: Sequence[Record], key: Callable[[Record], str | None]) -> list[ReportLine]:
    counts = Counter(label for label in map(key, records) if label is not None)
    return [ReportLine(label, counts[label]) for label in sorted(counts)]


def age_bucket(age: int | None) -> str | None:
    if age is None:
        return NONE_LABEL
    for bucket in AGE_BUCKETS:
        if bucket.contains(age):
            return bucket.label
    return None


def count_infected(records: Sequence[Record]) -> list[ReportLine]:
    return [ReportLine(None, len(records))]


def count_genders(records: Sequence[Record]) -> list[ReportLine]:
    counts = Counter(record.gender for record in records)
    return [ReportLine(label, counts[gender]) for gender, label in GENDER_LABELS]


def count_ages(records: Sequence[Record]) -> list[ReportLine]:
    counts = Counter(age_bucket(record.age) for record in records)
    labels = [bucket.label for bucket in AGE_BUCKETS] + [NONE_LABEL]
    return [ReportLine(label, counts[label], AGE_LABEL_WIDTH) for label in labels]


def date_prefix(length: int) -> Callable[[Record], str]:
    def key(record: Record) -> str:
        return record.date[:length]

    return key


def code_or_none(field: str) -> Callable[[Record], str]:
    def key(record: Record) -> str:
        return getattr(record, field) or NONE_LABEL

    return key


def country_code(record: Record) -> str | None:
    if record.country_code in ("", "CZ"):
        return None
    return record.country_code


@dataclass(frozen=True)
class Report:
    command: Command
    aggregate: Callable[[Sequence[Record]], list[ReportLine]]
    default_unit: int | None = None

    def output(self, records: Sequence[Record], width: HistogramWidth = None) -> list[str]:
        if self.default_unit is None:
            width = None
        return render(self.aggregate(records), width, self.default_unit)


@dataclass(frozen=True)
class MergeReport(Report):
    def output(self, records: Sequence[Record], width: HistogramWidth = None) -> list[str]:
        return [HEADER] + [record.to_line() for record in records]


REPORTS: dict[Command, Report] = {
    Command.INFECTED: Report(Command.INFECTED, count_infected),
    Command.MERGE: MergeReport(Command.MERGE, lambda records: []),
    Command.GENDER: Report(Command.GENDER, count_genders, 100000),
    Command.AGE: Report(Command.AGE, count_ages, 10000),
    Command.DAILY: Report(Command.DAILY, lambda records: count_by(records, date_prefix(10)), 500),
    Command.MONTHLY: Report(Command.MONTHLY, lambda records: count_by(records, date_prefix(7)), 10000),
    Command.YEARLY: Report(Command.YEARLY, lambda records: count_by(records, date_prefix(4)), 100000),
    Command.COUNTRIES: Report(Command.COUNTRIES, lambda records: count_by(records, country_code), 100),
    Command.DISTRICTS: Report(Command.DISTRICTS, lambda records: count_by(records, code_or_none("district_code")), 1000),
    Command.REGIONS: Report(Command.REGIONS, lambda records: count_by(records, code_or_none("region_code")), 10000),
}


def get_report(command: Command) -> Report:
    return REPORTS[command]
