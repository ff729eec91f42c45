from pydantic import BaseModel
from typing import Any, Generic, TypeVar, Optional

T = TypeVar("T")

class ErrorDTO(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None

class GeneralResponse(BaseModel, Generic[T]):
    success: bool
    message: Optional[str] = None
    data: Optional[T] = None
    error: Optional[ErrorDTO] = None

    @classmethod
    def failure(cls, code: str, message: str, details: Optional[dict[str, Any]] = None) -> "GeneralResponse[T]":
        return cls(
            success=False,
            message=message,
            error=ErrorDTO(code=code, message=message, details=details),
        )
