"""
Travel document produced by a successful MRZ parse
"""
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class TravelDocumentType(str, Enum):
    PASSPORT = "passport"


class TravelDocument(BaseModel):
    """Passport data decoded from a fully validated MRZ"""
    model_config = ConfigDict(frozen=True)

    type: TravelDocumentType
    issuing_country: str
    primary_identifier: str
    secondary_identifier: str = ""
    document_number: str
    nationality: str
    date_of_birth: date
    sex: str
    date_of_expiry: date
    personal_number: str = ""
