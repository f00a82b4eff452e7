from typing import Optional

from pydantic import BaseModel, Field, HttpUrl

STATUS_OK = "OK"
STATUS_ERROR = "Error"


class Response(BaseModel):
    """Envelope shared by every JSON response"""
    status: str
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "Response":
        return cls(status=STATUS_OK)

    @classmethod
    def failure(cls, message: str) -> "Response":
        return cls(status=STATUS_ERROR, error=message)


class URLCreate(BaseModel):
    url: HttpUrl = Field(..., description="The URL to redirect to")
    alias: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Alias to register; generated when omitted",
    )


class URLSaved(Response):
    alias: str
    id: int
