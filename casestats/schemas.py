from dataclasses import dataclass
from datetime import date
from enum import Enum


HEADER = "id,date,age,gender,region_code,district_code,imported_abroad_flag,country_code,reported_flag"
FIELD_COUNT = 9


class Gender(Enum):
    MALE = "M"
    FEMALE = "Z"
    NONE = ""

    @classmethod
    def from_code(cls, code: str) -> "Gender":
        try:
            return cls(code)
        except ValueError:
            return cls.NONE


class Command(Enum):
    INFECTED = "infected"
    MERGE = "merge"
    GENDER = "gender"
    AGE = "age"
    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    COUNTRIES = "countries"
    DISTRICTS = "districts"
    REGIONS = "regions"


@dataclass(frozen=True)
class Record:
    id: str
    date: str  # YYYY-MM-DD, empty when unknown
    age: int | None
    gender: Gender
    region_code: str
    district_code: str
    imported_abroad_flag: str
    country_code: str
    reported_flag: str
    line: str

    def to_line(self) -> str:
        return self.line


@dataclass(frozen=True)
class InvalidRecord:
    line_number: int
    line: str
    reason: str

    @property
    def message(self) -> str:
        return f"Invalid {self.reason}: {self.line}"


@dataclass(frozen=True)
class FilterParams:
    after: date | None = None
    before: date | None = None
    gender: Gender | None = None


@dataclass(frozen=True)
class ReportLine:
    label: str | None
    count: int
    label_width: int = 0

    def prefix(self) -> str:
        return f"{(self.label or '').ljust(self.label_width)}: "


@dataclass(frozen=True)
class ReportResult:
    command: Command
    lines: tuple[str, ...]
    invalid_records: tuple[InvalidRecord, ...]
    parsed_records: int
    valid_records: int
    selected_records: int
