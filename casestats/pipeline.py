from collections.abc import Iterable
import logging

from casestats.filters import filter_records
from casestats.histogram import HistogramWidth
from casestats.records import parse_records
from casestats.reports import get_report
from casestats.schemas import Command, FilterParams, ReportResult


logger = logging.getLogger(__name__)


def run_report(
    lines: Iterable[str],
    *,
    command: Command = Command.MERGE,
    params: FilterParams | None = None,
    width: HistogramWidth = None,
) -> ReportResult:
    params = params or FilterParams()

    valid, invalid, parsed = parse_records(lines)
    logger.info(
        "records parsed",
        extra={"parsed_records": parsed, "valid_records": len(valid), "invalid_records": len(invalid)},
    )

    selected = filter_records(valid, params)
    logger.info(
        "records filtered",
        extra={
            "after": params.after,
            "before": params.before,
            "gender": params.gender,
            "selected_records": len(selected),
        },
    )

    report = get_report(command)
    output = report.output(selected, width)
    logger.info("report built", extra={"command": command.value, "output_lines": len(output)})

    return ReportResult(
        command=command,
        lines=tuple(output),
        invalid_records=tuple(invalid),
        parsed_records=parsed,
        valid_records=len(valid),
        selected_records=len(selected),
    )
