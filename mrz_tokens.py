"""
Helpers for reading MRZ text: position tokens, YYMMDD dates, name zone and line joining
"""
from datetime import date
from typing import List, Optional, Tuple, Union

from config import config
from mrz_errors import ParseError


def get_token(text: str, start: int, end: Optional[int] = None) -> str:
    """
    Extract characters by 1-indexed, inclusive position

    Args:
        text: Concatenated MRZ text
        start: First position (1-indexed)
        end: Last position, inclusive. Defaults to start (single character)

    Returns:
        The substring between start and end

    Raises:
        ParseError: If the range falls outside the text
    """
    if end is None:
        end = start

    if start < 1 or end < start or end > len(text):
        raise ParseError(
            f"Position range {start}-{end} is outside MRZ text of length {len(text)}",
            details={"start": start, "end": end, "length": len(text)}
        )

    return text[start - 1:end]


def decode_mrz_date(mrz_date: str, today: Optional[date] = None) -> date:
    """
    Convert MRZ date format (YYMMDD) to a date

    The century rule is tuned for birth dates and is applied to expiry dates
    as well, so an expiry more than the window ahead decodes to 19YY.

    Args:
        mrz_date: Date in YYMMDD format
        today: Reference date for the century decision (defaults to today)

    Returns:
        Decoded date

    Raises:
        ParseError: If the field is not 6 digits or not a calendar date
    """
    if len(mrz_date) != 6 or not (mrz_date.isascii() and mrz_date.isdigit()):
        raise ParseError(
            f"Date field must be 6 digits, got {mrz_date!r}",
            details={"value": mrz_date}
        )

    today = today or date.today()

    year = int(mrz_date[0:2])
    month = int(mrz_date[2:4])
    day = int(mrz_date[4:6])

    # Try 2000s first; too far in the future means 1900s (e.g. DOB)
    full_year = 2000 + year
    if full_year > today.year + config.DATE_FUTURE_WINDOW_YEARS:
        full_year = 1900 + year

    try:
        return date(full_year, month, day)
    except ValueError as e:
        raise ParseError(
            f"Invalid date {mrz_date!r}: {e}",
            details={"value": mrz_date}
        ) from e


def split_names(name_zone: str) -> Tuple[str, str]:
    """
    Split the name zone into primary and secondary identifiers

    Format: SURNAME<<GIVEN<NAMES<<<<<<<<<<

    Returns:
        Tuple of (primary, secondary); secondary is "" when absent
    """
    parts = name_zone.rstrip(config.MRZ_FILLER).split(config.MRZ_FILLER * 2)

    names = [part.replace(config.MRZ_FILLER, ' ').strip() for part in parts[:2]]
    if len(names) < 2:
        names.append("")

    return names[0], names[1]


def join_mrz_lines(mrz: Union[str, List[str]]) -> str:
    """
    Normalize MRZ input to the concatenated form

    Accepts an already concatenated string, a newline-separated string,
    or a list of lines. Characters are never substituted.
    """
    if isinstance(mrz, str):
        lines = mrz.strip().splitlines()
    else:
        lines = list(mrz)

    return ''.join(line.strip() for line in lines)
