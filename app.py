"""
FastAPI application for passport MRZ parsing
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, Dict, List
from config import config
from mrz_checksum import compute_check_digit
from mrz_errors import MRZError
from mrz_tokens import join_mrz_lines
from passport_parser import parse

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# Initialize FastAPI app
app = FastAPI(
    title=config.API_TITLE,
    version=config.API_VERSION,
    description=config.API_DESCRIPTION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class ParseRequest(BaseModel):
    """Request model for MRZ parsing - either the raw text or the two lines"""
    mrz_text: Optional[str] = Field(None, description="MRZ text: 88 characters, or two 44-character lines separated by a newline")
    mrz_lines: Optional[List[str]] = Field(None, description="The two MRZ lines as a list")
    documents_type: str = Field(default="passport", description="Type of document: passport")

    @field_validator('documents_type')
    @classmethod
    def validate_document_type(cls, v):
        if v not in config.SUPPORTED_DOCUMENT_TYPES:
            raise ValueError(f'documents_type must be one of {config.SUPPORTED_DOCUMENT_TYPES}')
        return v

    @model_validator(mode="after")
    def validate_mrz_source(self):
        """Validate that exactly one MRZ source is provided"""
        if (self.mrz_text is None) == (self.mrz_lines is None):
            raise ValueError('Provide exactly one of mrz_text or mrz_lines')
        return self


class CheckDigitRequest(BaseModel):
    """Request model for a single check digit calculation"""
    data: str = Field(..., description="Characters to checksum")


# Response models
class ParseResponse(BaseModel):
    """Response model for MRZ parsing"""
    success: bool
    document: Dict
    mrz_text: str = ""


class CheckDigitResponse(BaseModel):
    """Response model for check digit calculation"""
    data: str
    check_digit: int


# API endpoints
@app.get("/")
async def root():
    """Root endpoint - service info"""
    return {
        "message": config.API_TITLE,
        "version": config.API_VERSION,
        "endpoints": {
            "parse": "/parse - POST endpoint to decode a passport MRZ",
            "check-digit": "/check-digit - POST endpoint to compute an ICAO 9303 check digit",
            "health": "/health - GET endpoint to check API health",
            "docs": "/docs - Swagger UI documentation"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": config.API_TITLE,
        "version": config.API_VERSION
    }


@app.post("/parse", response_model=ParseResponse)
async def parse_document(request: ParseRequest):
    """
    Decode a passport MRZ and validate its check digits

    Examples:
        ```json
        {
            "mrz_lines": [
                "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<",
                "L898902C36UTO7408122F1204159ZE184226B<<<<<18"
            ]
        }
        ```

    Returns:
        ParseResponse with the travel document, or 422 with the error
    """
    mrz_text = join_mrz_lines(request.mrz_text if request.mrz_text is not None else request.mrz_lines)
    logger.info("Parsing %s MRZ (%d characters)", request.documents_type, len(mrz_text))

    try:
        document = parse(mrz_text, request.documents_type)
    except MRZError as e:
        logger.warning("MRZ rejected: %s (%s)", e.message, e.error_code)
        return JSONResponse(status_code=422, content=e.to_dict())
    except Exception as e:
        logger.exception("Unexpected error while parsing MRZ")
        raise HTTPException(
            status_code=500,
            detail=f"Error processing MRZ: {str(e)}"
        )

    logger.info("MRZ accepted (%s issued by %s)", document.type.value, document.issuing_country)
    return ParseResponse(
        success=True,
        document=document.model_dump(mode="json"),
        mrz_text=mrz_text
    )


@app.post("/check-digit", response_model=CheckDigitResponse)
async def check_digit(request: CheckDigitRequest):
    """Compute the check digit for arbitrary MRZ characters"""
    try:
        digit = compute_check_digit(request.data)
    except MRZError as e:
        return JSONResponse(status_code=422, content=e.to_dict())

    return CheckDigitResponse(data=request.data, check_digit=digit)


# Run the application
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
