from collections.abc import Sequence
from enum import Enum

from casestats.schemas import ReportLine


BAR_CHAR = "#"


class DefaultWidth(Enum):
    DEFAULT = "default"


# -s given without a number: scale by the report's default unit.
DEFAULT_WIDTH = DefaultWidth.DEFAULT

HistogramWidth = int | DefaultWidth | None


def format_line(line: ReportLine) -> str:
    if line.label is None:
        return str(line.count)
    return f"{line.prefix()}{line.count}"


def bar_unit(lines: Sequence[ReportLine], width: int) -> int:
    if width < 1:
        raise ValueError(f"histogram width must be positive, got {width}")
    return max(max(line.count for line in lines) // width, 1)


def render(lines: Sequence[ReportLine], width: HistogramWidth = None, default_unit: int | None = None) -> list[str]:
    if not lines:
        return []
    if width is None:
        return [format_line(line) for line in lines]

    if width is DEFAULT_WIDTH:
        if default_unit is None:
            raise ValueError("report has no default histogram unit")
        unit = default_unit
    else:
        unit = bar_unit(lines, width)

    return [f"{line.prefix()}{BAR_CHAR * (line.count // unit)}" for line in lines]
