import argparse
from datetime import date
import logging
from pathlib import Path
import sys

from casestats.config import Settings, get_settings
from casestats.errors import CaseStatsError
from casestats.histogram import DEFAULT_WIDTH
from casestats.pipeline import run_report
from casestats.reader import read_lines
from casestats.records import DATE_PATTERN
from casestats.schemas import Command, FilterParams, Gender


logger = logging.getLogger(__name__)

COMMAND_HELP = {
    Command.INFECTED: "count of infected people",
    Command.MERGE: "merge input files into one, keeping the original order (default)",
    Command.GENDER: "count of infected people per gender",
    Command.AGE: "count of infected people per age bucket",
    Command.DAILY: "count of infected people per day",
    Command.MONTHLY: "count of infected people per month",
    Command.YEARLY: "count of infected people per year",
    Command.COUNTRIES: "count of infected people per country of infection, CZ excluded",
    Command.DISTRICTS: "count of infected people per district",
    Command.REGIONS: "count of infected people per region",
}


def iso_date(value: str) -> date:
    if not DATE_PATTERN.fullmatch(value):
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}': {exc}") from exc


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    epilog = "commands:\n" + "\n".join(
        f"  {command.value:<10} {text}" for command, text in COMMAND_HELP.items()
    )
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        usage="%(prog)s [-h] [FILTERS] [COMMAND] [LOG [LOG2 [...]]]",
        description="Aggregate statistics over infected-case records",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-a", dest="after", type=iso_date, metavar="DATETIME", help="only records on or after this date")
    parser.add_argument("-b", dest="before", type=iso_date, metavar="DATETIME", help="only records on or before this date")
    parser.add_argument("-g", dest="gender", choices=["M", "Z"], help="only records of this gender")
    parser.add_argument(
        "-s",
        dest="width",
        nargs="?",
        const=DEFAULT_WIDTH,
        metavar="WIDTH",
        help="render a histogram; WIDTH is the bar length of the largest count",
    )
    parser.add_argument("inputs", nargs="*", metavar="LOG", help="input files, .gz and .bz2 are decompressed")
    return parser


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    parser = build_parser(settings or get_settings())
    args = parser.parse_intermixed_args(argv)

    # "-s gender" leaves the command in the width slot.
    if isinstance(args.width, str) and not args.width.isdigit():
        args.inputs.insert(0, args.width)
        args.width = DEFAULT_WIDTH
    elif isinstance(args.width, str):
        args.width = int(args.width)
        if args.width < 1:
            parser.error(f"histogram width must be positive, got {args.width}")

    args.command = Command.MERGE
    commands = {command.value: command for command in Command}
    if args.inputs and args.inputs[0] in commands:
        args.command = commands[args.inputs.pop(0)]
    elif args.inputs and not Path(args.inputs[0]).exists():
        parser.error(f"unknown command or missing file '{args.inputs[0]}'")

    args.paths = [Path(value) for value in args.inputs]
    args.params = FilterParams(
        after=args.after,
        before=args.before,
        gender=Gender.from_code(args.gender) if args.gender else None,
    )
    return args


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = parse_args(argv, settings)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        lines = list(read_lines(args.paths, encoding=settings.input_encoding))
    except CaseStatsError as exc:
        logger.error("input could not be read", extra={"error": str(exc)})
        print(f"{settings.app_name}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = run_report(lines, command=args.command, params=args.params, width=args.width)

    for invalid in result.invalid_records:
        print(invalid.message, file=sys.stderr)
    for line in result.lines:
        print(line)


if __name__ == "__main__":
    main()
