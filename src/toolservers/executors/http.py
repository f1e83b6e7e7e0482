"""HTTP executor behind the ``curl`` tool."""

import asyncio

import httpx

from toolservers.core.errors import CurlRequestError, RequestTimeoutError
from toolservers.core.logging import get_logger
from toolservers.tools.models import CurlOptions, HttpCallResult

logger = get_logger(__name__)

USER_AGENT = "mcp-toolservers/curl"


def _request_headers(headers: dict[str, str] | None) -> dict[str, str]:
    """Caller headers with the fixed User-Agent replacing any caller value."""
    merged = {
        name: value
        for name, value in (headers or {}).items()
        if name.lower() != "user-agent"
    }
    merged["User-Agent"] = USER_AGENT
    return merged


class HttpExecutor:
    """Issues exactly one HTTP request per call.

    The tool timeout is the only timeout applied: httpx's own timeouts are
    disabled and the request is cancelled once ``timeout`` ms have elapsed.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def execute(self, args: CurlOptions) -> HttpCallResult:
        try:
            return await asyncio.wait_for(self._send(args), timeout=args.timeout / 1000)
        except asyncio.TimeoutError:
            logger.warning(f"Request to {args.url} timed out after {args.timeout}ms")
            raise RequestTimeoutError(args.timeout) from None
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            logger.error(f"Request to {args.url} failed: {e}")
            raise CurlRequestError(str(e) or type(e).__name__) from e

    async def _send(self, args: CurlOptions) -> HttpCallResult:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(None),
            follow_redirects=True,
        ) as client:
            response = await client.request(
                args.method,
                args.url,
                headers=_request_headers(args.headers),
                content=args.body,
            )
            logger.info(f"{args.method} {args.url} -> {response.status_code}")
            return {
                "status": response.status_code,
                "statusText": response.reason_phrase,
                # Repeated headers are joined into one comma-separated value
                "headers": dict(response.headers.items()),
                "body": response.content.decode("utf-8", errors="replace"),
            }
