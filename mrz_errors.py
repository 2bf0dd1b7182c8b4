"""
MRZ error types
Structural (parse) and integrity (checksum) rejections of passport MRZ text
"""


class MRZError(Exception):
    """Base exception for MRZ decoding errors"""
    def __init__(self, message, error_code, details=None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self):
        """Convert error to JSON-serializable dict"""
        return {
            "success": False,
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details
        }


class ParseError(MRZError):
    """MRZ text is structurally wrong (document code, length, span, alphabet)"""
    def __init__(self, message, details=None):
        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            details=details
        )


class ChecksumError(MRZError):
    """A computed check digit does not match the printed one"""
    def __init__(self, field, message=None, error_code="CHECKSUM_ERROR", details=None):
        self.field = field
        details = dict(details or {})
        details["field"] = field
        super().__init__(
            message=message or f"Wrong checksum for passport {field.replace('_', ' ')}",
            error_code=error_code,
            details=details
        )


class InvalidCharacterError(ChecksumError):
    """A character inside a checksummed span is outside the MRZ alphabet"""
    def __init__(self, position, character, field=None):
        self.position = position
        self.character = character
        if field:
            message = f"Invalid character {character!r} on position {position} of passport {field.replace('_', ' ')}"
        else:
            message = f"Invalid character {character!r} on position {position}"
        super().__init__(
            field=field,
            message=message,
            error_code="INVALID_CHARACTER",
            details={"position": position, "character": character}
        )
