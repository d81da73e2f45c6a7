from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from caesarapi.classical.caesar import DEFAULT_ENCODE_SHIFT

# JSON bodies are validated strictly: "3", 3.0 and true are not shifts, 42 is not text.
_STRICT = ConfigDict(strict=True)

class TextShiftRequest(BaseModel):
    model_config = _STRICT

    text: str = Field(..., min_length=1)
    shift: int = Field(..., ge=0, le=25)


class TextRequest(BaseModel):
    model_config = _STRICT

    text: str = Field(..., min_length=1)


class EncodeRequest(BaseModel):
    model_config = _STRICT

    text: str
    shift: int = Field(DEFAULT_ENCODE_SHIFT, ge=0, le=25)


class Rot13Request(BaseModel):
    model_config = _STRICT

    text: str


class EncryptResponse(BaseModel):
    encrypted: str
    shift: int


class DecryptResponse(BaseModel):
    decrypted: str
    shift: int


class EncodeResponse(BaseModel):
    encoded: str
    shift: int


class BruteForceResponse(BaseModel):
    possibilities: Dict[str, str]


class CandidateModel(BaseModel):
    shift: int
    text: str
    score: float


class AutoDecryptResponse(BaseModel):
    decrypted: str
    shift: int
    # Present only when the top scores are too close to call.
    candidates: Optional[List[CandidateModel]] = None


class EndpointInfo(BaseModel):
    method: str
    path: str
    description: str


class InfoResponse(BaseModel):
    name: str
    version: str
    description: str
    endpoints: List[EndpointInfo]


class HealthResponse(BaseModel):
    status: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    code: str
    message: str


# Client-facing wording for the common request mistakes, keyed by (field, pydantic error type).
FIELD_ERROR_MESSAGES = {
    ("text", "missing"): "Text is required",
    ("text", "string_too_short"): "Text is required",
    ("shift", "greater_than_equal"): "Shift must be between 0 and 25",
    ("shift", "less_than_equal"): "Shift must be between 0 and 25",
}
