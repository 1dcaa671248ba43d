import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from ..models import PreparedRequest

if TYPE_CHECKING:
    from ...ew_utils.session import ClientSession

logger = logging.getLogger("endpointware.transport")


def normalize_base_url(base_url: str) -> str:
    """Ensure the base URL has http/https (default https) and no trailing slash."""
    if not base_url.lower().startswith(("http://", "https://")):
        base_url = f"https://{base_url}"
    return base_url.rstrip("/")


class HttpTransport:
    """Low-level HTTP client dispatching prepared requests through httpx.

    With an injected ``httpx.AsyncClient`` every request goes through that
    client, which the transport then owns and closes in ``aclose``; otherwise
    a short-lived client is opened per request. Non-2xx responses raise
    ``httpx.HTTPStatusError`` and network failures raise
    ``httpx.RequestError``; neither is caught here.
    """

    def __init__(self, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._client = client

    def build_url(self, session: "ClientSession", request: PreparedRequest) -> str:
        path = request.url if request.url.startswith("/") else f"/{request.url}"
        return normalize_base_url(session.get_url()) + path

    def request_kwargs(self, request: PreparedRequest) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": request.headers}
        if request.params:
            kwargs["params"] = request.params
        if request.json_body is not None:
            kwargs["json"] = request.json_body
        if request.form is not None:
            kwargs["files"] = request.form
        return kwargs

    async def send(self, session: "ClientSession", request: PreparedRequest) -> httpx.Response:
        url = self.build_url(session, request)
        kwargs = self.request_kwargs(request)
        method = request.method.upper()

        logger.debug("%s %s (endpoint '%s')", method, url, request.endpoint)

        if self._client is not None:
            resp = await self._client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), follow_redirects=True) as client:
                resp = await client.request(method, url, **kwargs)

        resp.raise_for_status()
        return resp

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
