# WORKFLOW: Packing list parser for delimited shipment tables.
# Used by: Dataset holder, API analyze endpoint, tests
# Functions:
# 1. split_line() - Split one line into fields (quoted-CSV or naive split)
# 2. parse_table() - Parse raw text into header names and ordered records
# 3. parse_packing_list() - Parse raw text into an ordered list of records
# 4. render_csv() - Render headers and rows back into delimited text
#
# Parsing flow: Raw text -> Non-blank lines -> Header row -> Positional mapping -> Records
# The header row defines the schema; short rows are padded, long rows truncated.

"""
Packing list parser for delimited shipment tables.
"""

import csv
import logging
from typing import List, Sequence, Tuple

from core.config import settings
from etl.records import PackingListItem

logger = logging.getLogger(__name__)

# A single field may be as long as the largest accepted upload
csv.field_size_limit(max(csv.field_size_limit(), settings.max_upload_chars))


class ParseError(ValueError):
    """Raw text cannot be read as a header + rows table."""


def split_line(line: str, delimiter: str = ",", quoted: bool = True) -> List[str]:
    """
    Split one line into fields.

    Args:
        line: A single line of the table, without line terminator
        delimiter: Single field delimiter character
        quoted: Honour double-quoted fields (``"a,b"`` is one field) when True,
            plain ``str.split`` when False

    Returns:
        List of field strings

    Raises:
        ParseError: If the csv module rejects the line (oversized field, NUL byte)
    """
    if not quoted:
        return line.split(delimiter)

    # csv yields no fields for an empty line, a naive split yields one
    try:
        fields = next(csv.reader([line], delimiter=delimiter), [])
    except csv.Error as e:
        raise ParseError(f"Unreadable line: {e}") from e
    return fields or [""]


def parse_table(raw_text: str, delimiter: str = ",", quoted: bool = True) -> Tuple[List[str], List[PackingListItem]]:
    """
    Parse raw delimited text into packing list records.

    The first non-blank line is the header; every following non-blank line is a
    data row. Field i of a row is stored under header i. Missing trailing fields
    become empty strings and fields beyond the header are dropped.
    Lines that are empty or contain only whitespace are skipped, header included.

    Args:
        raw_text: Delimited table text
        delimiter: Single field delimiter character
        quoted: Use quoted-CSV field rules instead of a naive split

    Returns:
        Tuple of (header names without duplicates, records in source row order)

    Raises:
        ParseError: If the text has no header line, a line cannot be split or
            the delimiter is unusable
    """
    if not isinstance(raw_text, str):
        raise ParseError(f"Expected text input, got {type(raw_text).__name__}")

    if len(delimiter) != 1:
        raise ParseError(f"Delimiter must be a single character: {delimiter!r}")

    lines = [line for line in raw_text.splitlines() if line.strip()]
    if not lines:
        raise ParseError("Input has no header line")

    headers = split_line(lines[0], delimiter, quoted)
    width = len(headers)

    records = []
    for row_number, line in enumerate(lines[1:], start=2):
        values = split_line(line, delimiter, quoted)

        if len(values) > width:
            logger.warning(
                f"Row {row_number} has {len(values)} fields, header has {width}; extra fields dropped"
            )
        values = values[:width] + [""] * (width - len(values))

        records.append(PackingListItem.from_columns(dict(zip(headers, values))))

    logger.info(f"Parsed {len(records)} packing list records with {width} columns")
    return list(dict.fromkeys(headers)), records


def parse_packing_list(raw_text: str, delimiter: str = ",", quoted: bool = True) -> List[PackingListItem]:
    """Parse raw delimited text into records; see parse_table() for the rules."""
    _, records = parse_table(raw_text, delimiter, quoted)
    return records


parse = parse_packing_list


def render_csv(headers: Sequence[str], rows: Sequence[Sequence[str]], delimiter: str = ",") -> str:
    """
    Render headers and rows as delimited text, one line per row.

    Fields are joined as-is; callers quote values that contain the delimiter.
    """
    lines = [delimiter.join(headers)]
    lines.extend(delimiter.join(row) for row in rows)
    return "\n".join(lines)
