"""Command-line interface that prints date tags."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence
from datetime import date, datetime, timezone

from datetag.style import DateStyle
from datetag.tag import DateTag
from datetag.utils import checked_add_offset, try_date_from_str

_VERSION = "0.3.1"

ABOUT = (
    "Display a customizable date tag "
    "(e.g. TEST_202404, 2024-04-03_rel, 2024.04.03)"
)

EXAMPLES = """Examples:
    $ datetag 20240312 --offset 22 --prefix 'TEST_' --tag-type daily
    TEST_20240403

    $ datetag 20240312 -o 22 -p 'TEST_' -td
    TEST_20240403

    $ datetag 20240312 -o 2 -r3 -td -s dot
    2024.03.12
    2024.03.14
    2024.03.16
"""

NOTES = """Notes:
    Argument '--format' takes a strftime-style format string
    (e.g. '%Y-%m-%d', '%G-W%V').
"""

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class DateTagError(Exception):
    """Raised when a date tag cannot be produced."""


def _reference_date(value: str) -> date:
    try:
        return try_date_from_str(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _offset(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}") from exc
    if not _I32_MIN <= number <= _I32_MAX:
        raise argparse.ArgumentTypeError(f"offset out of range: {value}")
    return number


def _repeat(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}") from exc
    if not 1 <= number <= 255:
        raise argparse.ArgumentTypeError(f"{value} is not in 1..=255")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``datetag`` command."""
    parser = argparse.ArgumentParser(
        prog="datetag",
        description=ABOUT,
        epilog=f"{EXAMPLES}\n{NOTES}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "date",
        nargs="?",
        type=_reference_date,
        default=None,
        help="Reference date, using today if not specified (e.g. 'yyyymmdd', "
        "'yyyymm', 'yyyy', allowed field separators: '.-/:').",
    )
    parser.add_argument(
        "-t",
        "--tag-type",
        type=DateTag,
        choices=list(DateTag),
        default=DateTag.M,
        help="Tag type [d | w | m | y | daily | weekly | monthly | yearly]",
    )
    parser.add_argument(
        "-s",
        "--style",
        type=DateStyle,
        choices=list(DateStyle),
        default=DateStyle.PLAIN,
        help="Date tag style",
    )
    parser.add_argument("-p", "--prefix", default=None, help="Tag prefix (e.g. 'LAB_202404')")
    parser.add_argument("-x", "--suffix", default=None, help="Tag suffix (e.g. '202404_rel')")
    parser.add_argument(
        "-o",
        "--offset",
        type=_offset,
        default=0,
        help="Date offset (offset unit depends on -t value)",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Use provided file modification date as reference",
    )
    parser.add_argument("-r", "--repeat", type=_repeat, default=None, help="Generate more date tags")
    parser.add_argument(
        "-n",
        "--new-line",
        action="store_true",
        help="Append an end-of-line to each generated tag",
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        default=None,
        help="Custom date reference format string, override --style value",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def _shift(value: date, offset: int, tag_type: DateTag) -> date:
    shifted = checked_add_offset(value, offset, tag_type)
    if shifted is None:
        raise DateTagError("wrong date offset")
    return shifted


def generate_tags(
    date: date,
    tag_type: DateTag,
    style: DateStyle,
    prefix: str,
    suffix: str,
    offset: int,
    repeat: int,
    fmt: str | None,
) -> Iterator[str]:
    """Yield ``repeat`` tags starting at ``date``.

    A single tag has the offset applied before it is rendered; with several
    tags the first one is the reference date and each following one is
    shifted by the offset. Raises ``DateTagError`` when a shift leaves the
    supported date range.
    """
    tag_type = DateTag(tag_type)
    pattern = fmt if fmt is not None else tag_type.get_format(style)
    current = date

    if repeat == 1:
        current = _shift(current, offset, tag_type)

    for _ in range(repeat):
        yield f"{prefix}{current.strftime(pattern)}{suffix}"
        current = _shift(current, offset, tag_type)


def _file_date(path: str) -> date:
    modified = os.stat(path).st_mtime
    return datetime.fromtimestamp(modified, tz=timezone.utc).date()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is not None and args.date is not None:
        parser.error("the argument '--file <FILE>' cannot be used with '[DATE]'")

    repeat = args.repeat if args.repeat is not None else 1
    end = "\n" if args.new_line or repeat > 1 else ""

    try:
        if args.file is not None:
            reference = _file_date(args.file)
        else:
            reference = args.date if args.date is not None else date.today()

        for tag in generate_tags(
            reference,
            args.tag_type,
            args.style,
            args.prefix or "",
            args.suffix or "",
            args.offset,
            repeat,
            args.fmt,
        ):
            sys.stdout.write(tag + end)
    except (OSError, DateTagError) as exc:
        sys.stdout.flush()
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())