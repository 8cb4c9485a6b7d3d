from collections.abc import Iterable
import re

from casestats.schemas import FIELD_COUNT, HEADER, Gender, InvalidRecord, Record


DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
AGE_PATTERN = re.compile(r"[0-9]+")
WHITESPACE = re.compile(r"\s+")

# February never gets a leap day.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def strip_line(line: str) -> str:
    return WHITESPACE.sub("", line)


def parse_line(line: str) -> tuple[str, ...] | None:
    stripped = strip_line(line)
    if not stripped or stripped == HEADER:
        return None

    fields = stripped.split(",")[:FIELD_COUNT]
    fields.extend([""] * (FIELD_COUNT - len(fields)))
    return tuple(fields)


def check_date(value: str) -> str:
    """Check a YYYY-MM-DD field, raising ValueError when it is not a real date.

    Only the month and day are range checked; any four-digit year passes.
    """
    if not value:
        return value
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"malformed date {value!r}")

    _, month, day = (int(part) for part in value.split("-"))
    if month < 1 or month > 12:
        raise ValueError(f"month out of range in {value!r}")
    if day < 1 or day > DAYS_IN_MONTH[month - 1]:
        raise ValueError(f"day out of range in {value!r}")
    return value


def parse_age(value: str) -> int | None:
    if not value:
        return None
    if not AGE_PATTERN.fullmatch(value):
        raise ValueError(f"malformed age {value!r}")

    age = int(value)
    if age < 0:
        raise ValueError(f"negative age {value!r}")
    return age


def validate_fields(fields: tuple[str, ...], *, line: str, line_number: int) -> Record | InvalidRecord:
    try:
        record_date = check_date(fields[1])
    except ValueError:
        return InvalidRecord(line_number, line, "date")

    try:
        record_age = parse_age(fields[2])
    except ValueError:
        return InvalidRecord(line_number, line, "age")

    return Record(
        id=fields[0],
        date=record_date,
        age=record_age,
        gender=Gender.from_code(fields[3]),
        region_code=fields[4],
        district_code=fields[5],
        imported_abroad_flag=fields[6],
        country_code=fields[7],
        reported_flag=fields[8],
        line=line,
    )


def parse_records(lines: Iterable[str]) -> tuple[list[Record], list[InvalidRecord], int]:
    """Parse and validate raw input lines.

    Returns the valid records in input order, the rejected lines, and the number
    of lines that were parsed as records (header and blank lines excluded).
    """
    valid: list[Record] = []
    invalid: list[InvalidRecord] = []
    parsed = 0

    for line_number, line in enumerate(lines, start=1):
        fields = parse_line(line)
        if fields is None:
            continue
        parsed += 1

        outcome = validate_fields(fields, line=strip_line(line), line_number=line_number)
        if isinstance(outcome, InvalidRecord):
            invalid.append(outcome)
            continue
        valid.append(outcome)

    return valid, invalid, parsed
