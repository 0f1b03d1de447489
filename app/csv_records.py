from __future__ import annotations

import logging
import math
import re
from typing import Dict, Iterable, List, Optional, Union


logger = logging.getLogger(__name__)

FieldValue = Union[str, float]
Record = Dict[str, FieldValue]

_WHITESPACE_RE = re.compile(r"\s+")
# Leading decimal literal, e.g. "12.5", "-3", ".5", "1e3" (trailing text ignored)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def normalize_key(header: str) -> str:
    return _WHITESPACE_RE.sub("_", header.strip().lower())


def coerce_number(value: str) -> float:
    """Parse the leading number of ``value``; anything unparseable is 0."""
    match = _LEADING_NUMBER_RE.match(value.strip())
    if match is None:
        return 0.0
    num = float(match.group(0))
    if not math.isfinite(num):
        return 0.0
    return num


def split_fields(line: str) -> List[str]:
    """Split one CSV line on commas outside double quotes.

    Quote characters toggle the in-quotes state and are dropped. An
    unterminated quote runs to the end of the line.
    """
    result: List[str] = []
    current: List[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            result.append("".join(current))
            current = []
        else:
            current.append(char)
    result.append("".join(current))
    return result


def parse_records(
    raw_text: str,
    numeric_keys: Iterable[str] = (),
    required_key: Optional[str] = None,
) -> List[Record]:
    """Parse CSV text (header row first) into records keyed by normalized header.

    Fields whose key is in ``numeric_keys`` become floats (0 when not a
    number). Rows with an empty identifying field are dropped; the
    identifying key is ``required_key`` or, by default, the first column.
    """
    # Sheet exports may start with a UTF-8 byte-order mark
    text = raw_text.lstrip("\ufeff").strip()
    if not text:
        return []
    lines = text.split("\n")
    header_keys = [normalize_key(h) for h in lines[0].split(",")]
    if len(set(header_keys)) != len(header_keys):
        logger.warning("Duplicate CSV header keys %s; later columns win", header_keys)
    numeric = set(numeric_keys)
    id_key = required_key if required_key is not None else header_keys[0]

    records: List[Record] = []
    for line in lines[1:]:
        values = split_fields(line)
        item: Record = {}
        for index, key in enumerate(header_keys):
            value = values[index].strip() if index < len(values) else ""
            item[key] = coerce_number(value) if key in numeric else value
        records.append(item)

    kept = [r for r in records if r.get(id_key)]
    if len(kept) != len(records):
        logger.debug("Dropped %d CSV rows with empty %r", len(records) - len(kept), id_key)
    return kept
