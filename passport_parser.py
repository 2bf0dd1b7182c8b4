"""
Passport MRZ parser

The machine readable zone on a passport has 2 lines of 44 characters each.
Field positions below are 1-indexed over both lines concatenated:
  01 - 02: Document code
  03 - 05: Issuing state or organisation
  06 - 44: Names
  45 - 53: Document number
  54 - 54: Check digit
  55 - 57: Nationality
  58 - 63: Date of birth
  64 - 64: Check digit
  65 - 65: Sex
  66 - 71: Date of expiry
  72 - 72: Check digit
  73 - 86: Personal number
  87 - 87: Check digit
  88 - 88: Check digit (overall)

Every check digit is verified before any field is returned.
"""
from enum import Enum

from config import config
from mrz_checksum import char_value, compute_check_digit
from mrz_errors import ChecksumError, InvalidCharacterError, ParseError
from mrz_tokens import decode_mrz_date, get_token, split_names
from td3_layout import TD3_CHECK_DIGITS, TD3_CHECKED_POSITIONS, TD3_FIELDS
from travel_document import TravelDocument, TravelDocumentType


class DocumentKind(str, Enum):
    PASSPORT = "passport"


class PassportParser:
    """Parser of TD3 passport MRZ strings"""

    document_code = "P"
    check_digit_rules = TD3_CHECK_DIGITS

    def parse(self, text: str) -> TravelDocument:
        """
        Extract all fields from a MRZ string

        Args:
            text: Both MRZ lines concatenated (88 characters)

        Returns:
            Populated TravelDocument

        Raises:
            ParseError: Wrong document code, length or alphabet
            ChecksumError: A check digit does not match its data
        """
        if not isinstance(text, str) or not text:
            raise ParseError("MRZ text is empty")

        if get_token(text, 1) != self.document_code:
            raise ParseError(f"First character is not '{self.document_code}'")

        expected_length = config.td3_text_length()
        if len(text) != expected_length:
            raise ParseError(
                f"MRZ text must be {expected_length} characters, got {len(text)}",
                details={"length": len(text), "expected_length": expected_length}
            )

        self.validate_checksum(text)
        self._validate_alphabet(text)

        primary, secondary = split_names(self._field(text, "names"))

        return TravelDocument(
            type=TravelDocumentType.PASSPORT,
            issuing_country=self._field(text, "issuing_country"),
            primary_identifier=primary,
            secondary_identifier=secondary,
            document_number=self._field(text, "document_number"),
            nationality=self._field(text, "nationality"),
            date_of_birth=decode_mrz_date(self._field(text, "date_of_birth")),
            sex=self._field(text, "sex"),
            date_of_expiry=decode_mrz_date(self._field(text, "date_of_expiry")),
            personal_number=self._field(text, "personal_number"),
        )

    def validate_checksum(self, text: str) -> None:
        """
        Check every check digit in order, stopping at the first mismatch

        Raises:
            ChecksumError: Naming the field whose check digit failed
        """
        for rule in self.check_digit_rules:
            data = ''.join(get_token(text, s.start, s.end) for s in rule.spans)
            printed = get_token(text, rule.check_position)

            try:
                computed = compute_check_digit(data)
            except InvalidCharacterError as e:
                raise InvalidCharacterError(e.position, e.character, field=rule.field) from e

            if printed != str(computed):
                raise ChecksumError(rule.field)

    @staticmethod
    def _validate_alphabet(text: str) -> None:
        for position, char in enumerate(text, start=1):
            if position in TD3_CHECKED_POSITIONS:
                continue
            if char_value(char) is None:
                raise ParseError(
                    f"Invalid character {char!r} on position {position}",
                    details={"position": position, "character": char}
                )

    @staticmethod
    def _field(text: str, name: str) -> str:
        field_span = TD3_FIELDS[name]
        return get_token(text, field_span.start, field_span.end)


_PARSERS = {
    DocumentKind.PASSPORT: PassportParser(),
}


def get_parser(kind=DocumentKind.PASSPORT) -> PassportParser:
    """Return the shared parser for a document kind"""
    try:
        return _PARSERS[DocumentKind(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported document kind: {kind!r}") from None


def parse(text: str, kind=DocumentKind.PASSPORT) -> TravelDocument:
    """Parse MRZ text with the parser registered for the given kind"""
    return get_parser(kind).parse(text)
