"""
TD3 MRZ layout for passport documents
Positions are 1-indexed and inclusive over the two concatenated 44-character lines
"""
from typing import NamedTuple, Tuple


class FieldSpan(NamedTuple):
    start: int
    end: int


class CheckDigitRule(NamedTuple):
    """Data spans checksummed together and the position of their printed digit"""
    field: str
    spans: Tuple[FieldSpan, ...]
    check_position: int


TD3_FIELDS = {
    "issuing_country": FieldSpan(3, 5),
    "names": FieldSpan(6, 44),              # SURNAME<<GIVEN<NAMES<<<
    "document_number": FieldSpan(45, 53),
    "nationality": FieldSpan(55, 57),
    "date_of_birth": FieldSpan(58, 63),     # YYMMDD
    "sex": FieldSpan(65, 65),
    "date_of_expiry": FieldSpan(66, 71),    # YYMMDD
    "personal_number": FieldSpan(73, 86),
}


# Evaluated in order; the first mismatch stops validation
TD3_CHECK_DIGITS = (
    CheckDigitRule("document_number", (TD3_FIELDS["document_number"],), 54),
    CheckDigitRule("date_of_birth", (TD3_FIELDS["date_of_birth"],), 64),
    CheckDigitRule("date_of_expiry", (TD3_FIELDS["date_of_expiry"],), 72),
    CheckDigitRule("personal_number", (TD3_FIELDS["personal_number"],), 87),
    CheckDigitRule(
        "overall_checksum",
        (FieldSpan(45, 54), FieldSpan(58, 64), FieldSpan(66, 72)),
        88,
    ),
)

TD3_CHECKED_POSITIONS = frozenset(
    position
    for rule in TD3_CHECK_DIGITS
    for field_span in rule.spans + (FieldSpan(rule.check_position, rule.check_position),)
    for position in range(field_span.start, field_span.end + 1)
)
