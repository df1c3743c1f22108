from pydantic import BaseModel
from typing import Any, Dict, Optional


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    kind: Optional[str] = None
