from fastapi import APIRouter, HTTPException, status

from fetchaller.core.config import APP_NAME
from fetchaller.fetch.base import ErrorKind
from fetchaller.schemas import FetchRequest, ToolResponse
from fetchaller.services.fetch_tool import run_fetch_tool

router = APIRouter()

_ERROR_STATUS = {
    ErrorKind.INVALID_PROTOCOL.value: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_URL.value: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TIMEOUT.value: status.HTTP_504_GATEWAY_TIMEOUT,
}


@router.post("/fetch", response_model=ToolResponse)
async def fetch_url(request: FetchRequest):
    """
    Fetch a URL and return its content as markdown or raw text.

    Same contract as the MCP ``fetch`` tool; failures become HTTP errors
    whose detail is the tool's error text.
    """
    response = await run_fetch_tool(
        request.url,
        max_tokens=request.max_tokens,
        timeout_seconds=request.timeout_seconds,
    )
    if response.is_error:
        raise HTTPException(
            status_code=_ERROR_STATUS.get(response.error_kind, status.HTTP_502_BAD_GATEWAY),
            detail=response.text,
        )
    return response


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": APP_NAME}
