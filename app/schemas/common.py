"""Response envelopes shared by every entity endpoint."""

from pydantic import BaseModel


class SaveResponse(BaseModel):
    success: bool = True
    message: str
    id: int


class ErrorResponse(BaseModel):
    error: str
