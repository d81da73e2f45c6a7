from __future__ import annotations

from fastapi import APIRouter, Depends

import caesarapi
from caesarapi.api.auth import AuthenticatedRoute, bearer_scheme
from caesarapi.api.schemas import (
    AutoDecryptResponse,
    BruteForceResponse,
    DecryptResponse,
    EncodeRequest,
    EncodeResponse,
    EncryptResponse,
    ErrorResponse,
    HealthResponse,
    InfoResponse,
    MessageResponse,
    Rot13Request,
    TextRequest,
    TextShiftRequest,
)
from caesarapi.classical import caesar

ENDPOINTS = (
    ("GET", "/health", "Health check endpoint"),
    ("GET", "/info", "API metadata and available endpoints"),
    ("POST", "/encrypt", "Encrypt text with specified shift"),
    ("POST", "/decrypt", "Decrypt text with specified shift"),
    ("POST", "/encode", f"Quick encrypt with default shift ({caesar.DEFAULT_ENCODE_SHIFT})"),
    ("POST", "/rot13", f"Apply ROT13 encoding (shift {caesar.ROT13_SHIFT})"),
    ("POST", "/bruteforce", "Show all possible shifts (0-25)"),
    ("POST", "/auto-decrypt", "Auto-detect most likely plaintext"),
)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    401: {"model": ErrorResponse, "description": "Unauthorized"},
}

public = APIRouter(tags=["System"])
protected = APIRouter(
    tags=["Cipher"],
    route_class=AuthenticatedRoute,
    dependencies=[Depends(bearer_scheme)],
    responses=_ERROR_RESPONSES,
)


@public.get("/", response_model=MessageResponse, summary="Service banner")
def root():
    return {"message": "Caesar Cipher API"}


@public.get("/health", response_model=HealthResponse, summary="Health check")
def health():
    return {"status": "ok"}


@public.get("/info", response_model=InfoResponse, summary="API metadata and available endpoints")
def info():
    return {
        "name": caesarapi.__title__,
        "version": caesarapi.__version__,
        "description": caesarapi.__description__,
        "endpoints": [
            {"method": method, "path": path, "description": description}
            for method, path, description in ENDPOINTS
        ],
    }


@protected.post("/encrypt", response_model=EncryptResponse, summary="Encrypt text with a shift")
def encrypt(body: TextShiftRequest):
    return {"encrypted": caesar.encrypt(body.text, body.shift), "shift": body.shift}


@protected.post("/decrypt", response_model=DecryptResponse, summary="Decrypt text with a shift")
def decrypt(body: TextShiftRequest):
    return {"decrypted": caesar.decrypt(body.text, body.shift), "shift": body.shift}


@protected.post("/encode", response_model=EncodeResponse, summary="Encrypt with the default shift")
def encode(body: EncodeRequest):
    return {"encoded": caesar.encrypt(body.text, body.shift), "shift": body.shift}


@protected.post("/rot13", response_model=EncodeResponse, summary="ROT13 (shift 13)")
def rot13(body: Rot13Request):
    return {"encoded": caesar.rot13(body.text), "shift": caesar.ROT13_SHIFT}


@protected.post("/bruteforce", response_model=BruteForceResponse, summary="All 26 decryptions")
def bruteforce(body: TextRequest):
    return {"possibilities": caesar.brute_force(body.text)}


@protected.post(
    "/auto-decrypt",
    response_model=AutoDecryptResponse,
    # "candidates" is omitted, not null, when the answer is clear-cut.
    response_model_exclude_none=True,
    summary="Guess the shift by English frequency analysis",
)
def auto_decrypt(body: TextRequest):
    return caesar.auto_decrypt(body.text).to_dict()
