from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from fetchaller.core.config import settings


class FetchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(description="The URL to fetch (http or https)")
    max_tokens: int = Field(
        default_factory=lambda: settings.DEFAULT_MAX_TOKENS,
        gt=0,
        alias="maxTokens",
        description="Maximum tokens to return",
    )
    timeout_seconds: int = Field(
        default_factory=lambda: settings.DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        alias="timeoutSeconds",
        description="Request timeout in seconds",
    )


class ToolResponse(BaseModel):
    text: str
    is_error: bool = False
    error_kind: Optional[str] = Field(None, description="Failure kind when is_error is set")
