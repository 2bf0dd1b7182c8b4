"""
MRZ check digit calculation (ICAO 9303)
Weights 7, 3, 1 repeat across the data; the check digit is the weighted sum modulo 10
"""
from typing import Optional

from mrz_errors import InvalidCharacterError

WEIGHTS = (7, 3, 1)
FILLER = '<'


def char_value(char: str) -> Optional[int]:
    """
    Look up the numeric value of a single MRZ character

    Args:
        char: Character to convert

    Returns:
        0-9 for digits, 10-35 for A-Z, 0 for the filler '<',
        None for anything else
    """
    if not isinstance(char, str) or len(char) != 1:
        return None

    if '0' <= char <= '9':
        return ord(char) - ord('0')
    elif 'A' <= char <= 'Z':
        # A=10, B=11, ..., Z=35
        return ord(char) - ord('A') + 10
    elif char == FILLER:
        return 0

    return None


def compute_check_digit(data: str) -> int:
    """
    Calculate the check digit for the given data

    Args:
        data: Characters to checksum, taken as-is (no field awareness)

    Returns:
        Check digit 0-9

    Raises:
        InvalidCharacterError: If a character has no MRZ value
    """
    total = 0

    for i, char in enumerate(data):
        value = char_value(char)
        if value is None:
            raise InvalidCharacterError(position=i + 1, character=char)

        total += value * WEIGHTS[i % 3]

    return total % 10
