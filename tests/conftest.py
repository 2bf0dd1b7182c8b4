"""
Pytest configuration and fixtures for passport MRZ tests.
"""
import pytest
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# ICAO 9303 specimen; the overall check digit covers number, birth and expiry only
LINE1 = "P<UTOERIKSSON<<ANNA<MARIA".ljust(44, "<")
LINE2 = "L898902C36UTO7408122F1204159ZE184226B<<<<<18"
LINE2_NO_PERSONAL_NUMBER = "L898902C36UTO7408122F1204159<<<<<<<<<<<<<<08"
LINE2_FILLER_PERSONAL_CHECK = "L898902C36UTO7408122F1204159<<<<<<<<<<<<<<<8"


def mutate(text, position, char):
    """Replace the character at a 1-indexed position"""
    return text[:position - 1] + char + text[position:]


@pytest.fixture
def sample_mrz_td3():
    """Sample TD3 MRZ (passport) as two lines."""
    return [LINE1, LINE2]


@pytest.fixture
def mrz_text():
    """Sample TD3 MRZ concatenated into 88 characters."""
    return LINE1 + LINE2


@pytest.fixture
def client():
    """Create FastAPI test client."""
    from fastapi.testclient import TestClient
    from app import app
    return TestClient(app)
