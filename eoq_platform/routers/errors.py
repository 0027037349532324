"""
Error Helpers - EOQ Meme Platform
eoq_platform/routers/errors.py

Structured error bodies shared by all routers, and the request validation
handler registered in main.py.

Validation failures are mapped by their exact pydantic error type:
  json_invalid              → 400 INVALID_REQUEST
  union_tag_invalid/_found  → 422 CONTEXT_KIND_INVALID
  finite_number             → 422 NON_FINITE_NUMBER
  anything else             → 422 VALIDATION_ERROR
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Tuple

from fastapi import Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


#  Validation Error Mapping


ERROR_CODES: Dict[str, Tuple[int, str]] = {
    "json_invalid": (status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST"),
    "union_tag_invalid": (status.HTTP_422_UNPROCESSABLE_ENTITY, "CONTEXT_KIND_INVALID"),
    "union_tag_not_found": (status.HTTP_422_UNPROCESSABLE_ENTITY, "CONTEXT_KIND_INVALID"),
    "finite_number": (status.HTTP_422_UNPROCESSABLE_ENTITY, "NON_FINITE_NUMBER"),
}

# (leaf field name, error type) -> message
FIELD_MESSAGES: Dict[Tuple[str, str], str] = {
    ("name", "missing"): "Meme name is required",
    ("name", "string_too_short"): "Meme name cannot be empty",
    ("name", "string_too_long"): "Meme name must not exceed 255 characters",
    ("name", "string_type"): "Meme name must be a string",
    ("text", "missing"): "Text to analyze is required",
    ("text", "string_too_short"): "Text to analyze cannot be empty",
    ("text", "string_too_long"): "Text to analyze must not exceed 20000 characters",
    ("keywords", "missing"): "At least one keyword is required",
    ("keywords", "too_short"): "At least one keyword is required",
}

TYPE_MESSAGES: Dict[str, str] = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "too_short": "Field '{field}' has too few items",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "finite_number": "Field '{field}' must be a finite number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "enum": "Field '{field}' has an unsupported value",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def _field_path(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc if part != "body")


def _context_kind_message(error: Dict[str, Any]) -> str:
    ctx = error.get("ctx") or {}
    if error["type"] == "union_tag_not_found":
        return "Context kind is required"
    return f"Unknown context kind '{ctx.get('tag')}'; expected {ctx.get('expected_tags')}"


def get_validation_message(error: Dict[str, Any]) -> str:
    """Human-readable message for one pydantic error dict."""
    error_type = error.get("type", "")
    if error_type.startswith("union_tag_"):
        return _context_kind_message(error)
    loc = error.get("loc", ())
    field = _field_path(loc)
    leaf = str(loc[-1]) if loc else ""
    if (leaf, error_type) in FIELD_MESSAGES:
        return FIELD_MESSAGES[(leaf, error_type)]
    if error_type in TYPE_MESSAGES:
        return TYPE_MESSAGES[error_type].format(field=field)
    return f"Invalid value for field '{field}'"


def _error_body(error_code: str, message: str, details: Optional[dict]) -> dict:
    return ErrorResponse(error_code=error_code, message=message, details=details).model_dump(mode="json")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body("VALIDATION_ERROR", "Request validation failed", None),
        )
    error = errors[0]
    error_type = error.get("type", "")
    status_code, error_code = ERROR_CODES.get(
        error_type, (status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR")
    )
    field = _field_path(error.get("loc", ()))
    details = {"field": field, "type": error_type} if field and error_type != "json_invalid" else None
    return JSONResponse(
        status_code=status_code,
        content=_error_body(error_code, get_validation_message(error), details),
    )


#  Schemas


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


#  Exception Helpers


def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error_code=error_code, message=message).model_dump(mode="json"),
    )

def raise_meme_not_found(meme_id: str):
    raise_error(status.HTTP_404_NOT_FOUND, "MEME_NOT_FOUND", f"Meme '{meme_id}' not found")

def raise_duplicate_meme(meme_id: str):
    raise_error(status.HTTP_409_CONFLICT, "DUPLICATE_MEME", f"Meme '{meme_id}' already exists")

def raise_bad_request(error_code: str, message: str):
    raise_error(status.HTTP_400_BAD_REQUEST, error_code, message)
