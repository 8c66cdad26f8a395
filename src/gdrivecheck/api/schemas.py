from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class CheckRequest(BaseModel):
    """Body of POST /check-downloadable"""
    link: Optional[str] = Field("", description="Drive file or folder link")
    type: Optional[str] = Field("", description="Category: pdf, image or video")

    @field_validator('link', 'type', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        """Treat JSON null like an absent field"""
        return "" if v is None else v


class CheckResponse(BaseModel):
    result: Literal["yes", "no"]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
