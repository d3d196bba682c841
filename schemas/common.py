from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ApiStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    CONFLICT = "conflict"
    AUTHENTICATION_ERROR = "authentication_error"
    RATE_LIMITED = "rate_limited"


class BaseRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class BaseResponse(BaseModel):
    """Envelope shared by every endpoint."""

    model_config = ConfigDict(use_enum_values=True)

    status: ApiStatus
    message: str
    error_code: Optional[str] = None
    data: Optional[Any] = None
