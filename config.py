"""
Configuration settings for Passport MRZ Parser API
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration"""

    # API Settings
    API_TITLE = "Passport MRZ Parser API"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = """
    Decodes the machine readable zone (MRZ) of a passport data page.

    Features:
    - TD3 (2 x 44 characters) field extraction
    - ICAO 9303 check digit validation, fail-fast
    - Structured travel document output
    """

    # Document Types
    SUPPORTED_DOCUMENT_TYPES = ["passport"]

    # MRZ Settings
    TD3_LINE_LENGTH = 44
    TD3_TOTAL_LINES = 2
    MRZ_FILLER = "<"

    # A YYMMDD date is read as 20YY unless that is more than this many years ahead
    DATE_FUTURE_WINDOW_YEARS = int(os.getenv("MRZ_DATE_FUTURE_WINDOW", "15"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))

    @classmethod
    def td3_text_length(cls):
        """Length of the concatenated MRZ text"""
        return cls.TD3_LINE_LENGTH * cls.TD3_TOTAL_LINES


# Create global config instance
config = Config()
