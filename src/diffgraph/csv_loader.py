"""
CSV Loader (Layer 1: Raw Input -> ResponseSet).

Reads a comma-delimited survey export into integer rows.

CSV Format:
    header line (skipped)
    one respondent per line, one answer per column

Parsing Notes:
    - Lines are split on "," only; quote characters get no special treatment
    - Tokens are stripped and parsed as base-10 integers (optional sign)
    - "drop" policy: tokens that are not integers are discarded, so a row
      holds only the values that parsed
    - "mark" policy: tokens that are not integers become None, so columns
      stay aligned across rows
    - Bytes that are not valid UTF-8 are replaced, so they end up in a
      non-integer token like any other text
    - I/O problems are logged and never raised: a missing file gives an
      empty ResponseSet, a failure mid-read gives the rows read so far
"""

import csv
import logging
import re
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from diffgraph.model import ResponseRow, ResponseSet


logger = logging.getLogger(__name__)

DELIMITER = ","

MISSING_DROP = "drop"
MISSING_MARK = "mark"
MISSING_POLICIES = (MISSING_DROP, MISSING_MARK)

_INTEGER_RE = re.compile(r'^[+-]?\d+$')


def _check_policy(missing: str) -> None:
    if missing not in MISSING_POLICIES:
        raise ValueError(f"Unknown missing policy {missing!r}, expected one of {MISSING_POLICIES}")


def _reader(lines: Iterable[str]):
    return csv.reader(lines, delimiter=DELIMITER, quoting=csv.QUOTE_NONE)


def _parse_token(token: str) -> Optional[int]:
    token = token.strip()
    if not _INTEGER_RE.match(token):
        return None
    return int(token)


def _row_from_tokens(tokens: Sequence[str], missing: str) -> ResponseRow:
    # Blank (or whitespace-only) line
    if len(tokens) <= 1 and not "".join(tokens).strip():
        return ()

    values = []
    for token in tokens:
        value = _parse_token(token)
        if value is None and missing == MISSING_DROP:
            continue
        values.append(value)

    return tuple(values)


def _header_from_tokens(tokens: Optional[Sequence[str]]) -> Tuple[str, ...]:
    if not tokens:
        return ()
    return tuple(token.strip() for token in tokens)


def parse_response_line(line: str, missing: str = MISSING_DROP) -> ResponseRow:
    """
    Parse one data line into a response row.

    Args:
        line: Raw line, with or without its line terminator
        missing: "drop" to discard non-integer tokens, "mark" to keep them as None

    Returns:
        Tuple of parsed answers

    Raises:
        ValueError: If the missing policy is unknown
    """
    _check_policy(missing)
    tokens = next(_reader([line.rstrip("\r\n")]), [])
    return _row_from_tokens(tokens, missing)


def parse_responses_string(content: str, missing: str = MISSING_DROP) -> ResponseSet:
    """
    Parse CSV content into a ResponseSet.

    The first line is treated as the header and skipped.

    Args:
        content: CSV as string
        missing: Missing token policy ("drop" or "mark")

    Returns:
        ResponseSet (empty if content has no data lines)
    """
    _check_policy(missing)

    reader = _reader(StringIO(content, newline=''))
    header = _header_from_tokens(next(reader, None))
    rows = [_row_from_tokens(tokens, missing) for tokens in reader]
    return ResponseSet(rows=tuple(rows), header=header)


def load_responses(filepath: Union[str, Path], missing: str = MISSING_DROP) -> ResponseSet:
    """
    Load a survey CSV file into a ResponseSet.

    Never raises for I/O problems. Callers must treat an empty result as
    "no data".

    Args:
        filepath: Path to CSV file
        missing: Missing token policy ("drop" or "mark")

    Returns:
        ResponseSet with every row parsed before any read error

    Raises:
        ValueError: If the missing policy is unknown
    """
    _check_policy(missing)

    path = Path(filepath)
    source = str(path)

    if not path.is_file():
        logger.error("File not found: %s", source)
        return ResponseSet(source=source)

    header: Tuple[str, ...] = ()
    rows: List[ResponseRow] = []

    try:
        with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
            reader = _reader(f)
            header = _header_from_tokens(next(reader, None))
            for tokens in reader:
                rows.append(_row_from_tokens(tokens, missing))
    except (OSError, csv.Error) as e:
        logger.error("Error reading file %s: %s", source, e)
        if rows:
            logger.warning("Keeping %d row(s) read before the error", len(rows))

    logger.debug("Loaded %d row(s) from %s", len(rows), source)
    return ResponseSet(rows=tuple(rows), header=header, source=source)


__all__ = [
    "DELIMITER",
    "MISSING_DROP",
    "MISSING_MARK",
    "MISSING_POLICIES",
    "load_responses",
    "parse_response_line",
    "parse_responses_string",
]
