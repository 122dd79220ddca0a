"""Minimal HTTP client for fetching JSON payloads into the workbench.

Network failures and malformed URLs never raise; they come back as an ApiResponse with status 0
and the error message set.
"""

import json
import logging
import time
from typing import Any

import httpx
from pydantic import BaseModel, Field

from json_workbench.utils.helpers import format_size

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
BODYLESS_METHODS = {"GET", "HEAD"}


class ApiRequest(BaseModel):
    """An HTTP request to execute."""

    method: str = Field(default="GET", description="HTTP method")
    url: str = Field(..., description="Target URL")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: str | None = Field(default=None, description="Raw request body, usually JSON text")


class ApiResponse(BaseModel):
    """Result of executing an ApiRequest."""

    status: int = Field(default=0, description="HTTP status code, 0 on network error")
    status_text: str = Field(default="", description="Reason phrase")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    data: Any = Field(default=None, description="Body parsed as JSON, or the raw text")
    duration_ms: int = Field(default=0, description="Round-trip time in milliseconds")
    size: str = Field(default="0 B", description="Human readable body size")
    success: bool = Field(default=False, description="Whether the status is 2xx")
    error: str | None = Field(default=None, description="Network error message")


def _parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def execute_request(
    request: ApiRequest,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ApiResponse:
    """Execute an HTTP request.

    A body is only sent for methods other than GET/HEAD; it defaults to
    ``Content-Type: application/json`` when no content type is given.

    Args:
        request: The request to send
        client: Optional httpx client (a short-lived one is created otherwise)
        timeout: Request timeout in seconds

    Returns:
        ApiResponse describing the outcome
    """
    method = request.method.upper()
    headers = dict(request.headers)
    content = None

    if method not in BODYLESS_METHODS and request.body:
        content = request.body
        if not any(name.lower() == "content-type" for name in headers):
            headers["Content-Type"] = "application/json"

    start = time.perf_counter()
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=timeout, follow_redirects=True)

    try:
        response = client.request(method, request.url, headers=headers, content=content)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        duration = round((time.perf_counter() - start) * 1000)
        logger.warning("%s %s failed: %s", method, request.url, e)
        return ApiResponse(
            status=0,
            status_text="Network Error",
            duration_ms=duration,
            success=False,
            error=str(e) or type(e).__name__,
        )
    finally:
        if owns_client:
            client.close()

    duration = round((time.perf_counter() - start) * 1000)
    text = response.text

    declared = response.headers.get("content-length", "0")
    size_bytes = int(declared) if declared.isdigit() else 0
    if size_bytes == 0 and text:
        size_bytes = len(response.content)

    return ApiResponse(
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers),
        data=_parse_body(text),
        duration_ms=duration,
        size=format_size(size_bytes),
        success=response.is_success,
    )
