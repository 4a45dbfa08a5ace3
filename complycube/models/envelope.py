# complycube/models/envelope.py

"""
Response envelope and client configuration models.

Every client call returns an ``ApiResponse``: the HTTP status plus either
the parsed data or a normalized error.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from config.settings import DEFAULT_BASE_URL

T = TypeVar("T")


class ApiErrorDetail(BaseModel):
    """Normalized error: API-reported, status-inferred, local or transport."""

    code: str = Field(description='Machine readable code, e.g. "COMPANY_NOT_FOUND".')
    message: str
    details: Optional[dict[str, Any]] = None


class ApiResponse(BaseModel, Generic[T]):
    """
    Envelope returned by every public client method.

    ``status`` mirrors the HTTP status when a request was sent. Local
    validation failures use 400, timeouts 408 and network failures 0.
    """

    status: int
    data: Optional[T] = None
    error: Optional[ApiErrorDetail] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


class ClientConfig(BaseModel):
    """Immutable per-client configuration fixed at construction."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="Sent verbatim as the Authorization header.")
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = Field(default=10000, ge=1)
    user_agent: str = "Design-Studio/1.0"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
