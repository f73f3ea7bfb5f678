from __future__ import annotations
from pydantic import BaseModel
from typing import Optional, Any

class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None
    path: Optional[str] = None


ErrorResponse.model_rebuild()
