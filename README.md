# datetag

A small command-line tool for printing date tags: labels built from a
reference date, optionally wrapped in a prefix and a suffix.

```
20240427
TEST_202404
2024-04-03_rel
2024.04.03
```

## Installation

```
pip install .
```

This installs the `datetag` command. No third-party packages are needed.

## Usage

```
datetag [DATE] [options]
```

`DATE` is the reference date. It may be given as `yyyymmdd`, `yyyymm` or
`yyyy`; any non-digit characters (such as `.`, `-`, `/` or `:`) are
ignored. A missing month or day defaults to 1. When neither `DATE` nor
`--file` is given, today's date is used.

| Option | Meaning |
| --- | --- |
| `-t, --tag-type` | `y`/`yearly`, `m`/`monthly` (default), `w`/`weekly` (ISO 8601 year and week), `d`/`daily` |
| `-s, --style` | `plain` (default), `dot`, `slash`, `colon`, `dash` |
| `-p, --prefix` | text placed before the date |
| `-x, --suffix` | text placed after the date |
| `-o, --offset` | offset in units of the tag type (years, weeks, months or days); may be negative |
| `-f, --file` | use the file's modification date (UTC) as reference; cannot be combined with `DATE` |
| `-r, --repeat` | number of tags to generate (1–255) |
| `-n, --new-line` | end each tag with a newline |
| `--format` | custom strftime format string; overrides `--style` |
| `-V, --version` | print the version and exit |

With a single tag, the offset is applied to the reference date before it
is printed. With `--repeat` greater than one, the first tag shows the
reference date, each following tag is moved on by the offset, and every
tag is printed on its own line.

Adding months or years keeps the day of month where possible and clamps it
to the last day of the target month (e.g. 2024-01-31 plus one month is
2024-02-29).

If the file given to `--file` cannot be read, or an offset moves the date
outside the supported range (years 1 to 9999), the command prints
`Error: ...` to standard error and exits with status 1. Invalid arguments
are reported by the argument parser with exit status 2.

## Examples

```
$ datetag 20240312 --offset 22 --prefix 'TEST_' --tag-type daily
TEST_20240403

$ datetag 20240312 -o 22 -p 'TEST_' -td
TEST_20240403

$ datetag 20240312 -o 2 -r3 -td -s dot
2024.03.12
2024.03.14
2024.03.16
```

## Using it from Python

```python
from datetag.cli import generate_tags
from datetag.style import DateStyle
from datetag.tag import DateTag
from datetag.utils import checked_add_offset, try_date_from_str

ref = try_date_from_str("2024-04-27")
print(checked_add_offset(ref, 1, DateTag.DAILY))   # 2024-04-28
print(DateTag.MONTHLY.get_format(DateStyle.DASH))  # %Y-%m

for tag in generate_tags(ref, DateTag.DAILY, DateStyle.PLAIN, "LAB_", "", 1, 3, None):
    print(tag)  # LAB_20240427, LAB_20240428, LAB_20240429
```

- `try_date_from_str` raises `ValueError` on input it cannot read;
  `checked_date_from_str` returns `None` instead.
- `checked_add_offset` returns `None` when the result falls outside the
  supported date range.
- `generate_tags` yields the tags lazily and raises
  `datetag.cli.DateTagError` when an offset leaves the supported range.
- `datetag.cli.main(argv)` runs the command and returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```