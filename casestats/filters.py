from collections.abc import Callable, Sequence

from casestats.schemas import FilterParams, Record


Predicate = Callable[[Record], bool]


def build_predicates(params: FilterParams) -> list[Predicate]:
    predicates: list[Predicate] = []

    # Records without a date cannot satisfy a date bound.
    if params.after is not None:
        after = params.after.isoformat()
        predicates.append(lambda record: bool(record.date) and record.date >= after)
    if params.before is not None:
        before = params.before.isoformat()
        predicates.append(lambda record: bool(record.date) and record.date <= before)
    if params.gender is not None:
        gender = params.gender
        predicates.append(lambda record: record.gender == gender)

    return predicates


def filter_records(records: Sequence[Record], params: FilterParams) -> tuple[Record, ...]:
    predicates = build_predicates(params)
    return tuple(record for record in records if all(check(record) for check in predicates))
